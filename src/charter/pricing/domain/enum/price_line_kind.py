from enum import Enum


class PriceLineKind(str, Enum):
    """料金明細の種別"""

    BASE = "BASE"
    DURATION = "DURATION"
    PEAK_SEASON = "PEAK_SEASON"
    WEEKEND = "WEEKEND"
    GUESTS = "GUESTS"
    ADDON = "ADDON"
    ROUNDING = "ROUNDING"
