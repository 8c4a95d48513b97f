from enum import Enum


class BookingStatus(str, Enum):
    """確定予約のステータス"""

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"
