from enum import Enum


class PaymentStatus(str, Enum):
    """支払い記録のステータス"""

    COMPLETED = "COMPLETED"
    PENDING = "PENDING"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"
