from enum import Enum


class BookingChannel(str, Enum):
    """予約経路（管理者は当日予約が可能）"""

    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"
