from collections.abc import Callable
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

Clock = Callable[[], datetime]


def business_clock(timezone_name: str) -> Clock:
    """営業地のタイムゾーンで現在時刻を返す Clock を生成する

    「今日」「現在の時」の判定はすべて営業地の壁時計で行う。
    """
    tz: tzinfo = ZoneInfo(timezone_name)

    def _now() -> datetime:
        return datetime.now(tz)

    return _now
