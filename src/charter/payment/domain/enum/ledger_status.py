from enum import Enum


class LedgerStatus(str, Enum):
    """予約単位の支払い状況"""

    PENDING = "PENDING"
    PARTIAL = "PARTIAL"
    COMPLETED = "COMPLETED"
    OVERDUE = "OVERDUE"
