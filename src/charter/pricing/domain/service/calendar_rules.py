"""カレンダー規則

繁忙期・週末の判定。副作用を持たない純粋関数のみ。
"""

from datetime import date

# 11月〜3月
PEAK_SEASON_MONTHS = frozenset({11, 12, 1, 2, 3})

# 営業地の週末は金曜・土曜（date.weekday(): 月曜=0）
WEEKEND_WEEKDAYS = frozenset({4, 5})


def is_peak_season(day: date) -> bool:
    """繁忙期（11月〜3月）かどうか"""
    return day.month in PEAK_SEASON_MONTHS


def is_weekend(day: date) -> bool:
    """週末（金曜・土曜）かどうか"""
    return day.weekday() in WEEKEND_WEEKDAYS
