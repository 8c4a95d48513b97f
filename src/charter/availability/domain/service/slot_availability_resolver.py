from collections.abc import Iterable
from datetime import date, datetime

from charter.availability.domain.value_object import (
    Reservation,
    ReservationWindow,
    Slot,
)
from charter.availability.domain.repository import ReservationStore
from charter.fleet.domain import Asset, AssetId, AssetNotFoundException, AssetRepository
from charter.shared.domain import InvalidInputException
from charter.shared.utils import Clock

# 08:00〜19:00 開始の12枠
OPERATING_HOURS = range(8, 20)


class SlotAvailabilityResolver:
    """機体・日付ごとの空き枠を算出するドメインサービス

    結果はキャッシュせず、呼び出しのたびに予約ストアから算出する。
    """

    def __init__(
        self,
        asset_repository: AssetRepository,
        reservation_store: ReservationStore,
        clock: Clock,
    ) -> None:
        self._asset_repository = asset_repository
        self._reservation_store = reservation_store
        self._clock = clock

    def get_available_slots(self, asset_id: AssetId, day: date) -> list[Slot]:
        now = self._now()
        if day < now.date():
            raise InvalidInputException.for_field("date", "Date is in the past")
        self.require_active_asset(asset_id)
        return self._slots_for(asset_id, day, now)

    def is_window_available(
        self, asset_id: AssetId, day: date, start_hour: int, duration_hours: int
    ) -> bool:
        """開始時刻から利用時間全体が空いているか"""
        now = self._now()
        if day < now.date() or start_hour not in OPERATING_HOURS:
            return False
        if self._has_started(day, start_hour, now):
            return False
        self.require_active_asset(asset_id)
        window = ReservationWindow.for_slot(asset_id, day, start_hour, duration_hours)
        return not self._reservation_store.find_overlapping(window)

    def get_blocked_dates(self, asset_id: AssetId, days: Iterable[date]) -> list[date]:
        """全枠が埋まっている日付（過去日を含む）"""
        now = self._now()
        self.require_active_asset(asset_id)
        blocked = []
        for day in sorted(set(days)):
            if day < now.date():
                blocked.append(day)
                continue
            if not any(slot.is_available for slot in self._slots_for(asset_id, day, now)):
                blocked.append(day)
        return blocked

    def require_active_asset(self, asset_id: AssetId) -> Asset:
        asset = self._asset_repository.find_by_id(asset_id)
        if asset is None or not asset.is_active:
            raise AssetNotFoundException(f"Asset not found: {asset_id}")
        return asset

    def _slots_for(self, asset_id: AssetId, day: date, now: datetime) -> list[Slot]:
        operating_window = ReservationWindow.for_slot(
            asset_id, day, OPERATING_HOURS.start, len(OPERATING_HOURS)
        )
        reservations = self._reservation_store.find_overlapping(operating_window)
        return [
            Slot(
                start_hour=hour,
                is_available=not self._has_started(day, hour, now)
                and not self._is_reserved(asset_id, day, hour, reservations),
            )
            for hour in OPERATING_HOURS
        ]

    @staticmethod
    def _has_started(day: date, start_hour: int, now: datetime) -> bool:
        # 当日の枠は開始時刻に達した時点で締め切る（10:00 の枠は 10:00:00 に締切）
        return day == now.date() and start_hour <= now.hour

    @staticmethod
    def _is_reserved(
        asset_id: AssetId, day: date, hour: int, reservations: list[Reservation]
    ) -> bool:
        hour_window = ReservationWindow.for_slot(asset_id, day, hour, 1)
        return any(r.window.overlaps(hour_window) for r in reservations)

    def _now(self) -> datetime:
        return self._clock()
