from enum import Enum


class ReservationResult(str, Enum):
    """予約ストアへの確保結果"""

    SUCCESS = "SUCCESS"
    CONFLICT = "CONFLICT"
