from enum import Enum


class AssetCategory(str, Enum):
    """機体カテゴリ"""

    HELICOPTER = "helicopter"
    YACHT = "yacht"
    LUXURY_CAR = "luxury-car"
    PRIVATE_JET = "private-jet"
