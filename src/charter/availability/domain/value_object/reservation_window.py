from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from charter.fleet.domain import AssetId

ONE_HOUR = timedelta(hours=1)


@dataclass(frozen=True)
class ReservationWindow:
    """機体を占有する時間帯 [start, end)

    日時は営業地の壁時計（タイムゾーンなし）で保持する。
    """

    asset_id: AssetId
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start.tzinfo is not None or self.end.tzinfo is not None:
            raise ValueError("Reservation windows use naive local datetimes")
        if self.end <= self.start:
            raise ValueError("Window end must be after start")

    @classmethod
    def for_slot(
        cls, asset_id: AssetId, day: date, start_hour: int, duration_hours: int
    ) -> ReservationWindow:
        start = datetime.combine(day, time(hour=start_hour))
        return cls(
            asset_id=asset_id, start=start, end=start + timedelta(hours=duration_hours)
        )

    def overlaps(self, other: ReservationWindow) -> bool:
        """半開区間の重なり判定（同一機体のみ）"""
        if self.asset_id != other.asset_id:
            return False
        return self.start < other.end and other.start < self.end

    def hours(self) -> Iterator[datetime]:
        """占有する各時間の開始時刻"""
        current = self.start.replace(minute=0, second=0, microsecond=0)
        while current < self.end:
            yield current
            current += ONE_HOUR

    @property
    def duration_hours(self) -> int:
        return int((self.end - self.start) / ONE_HOUR)
