import threading

from charter.availability.domain import (
    Reservation,
    ReservationResult,
    ReservationStore,
    ReservationWindow,
)


class InMemoryReservationStore(ReservationStore):
    """メモリ上の ReservationStore（テスト・ローカル実行用）

    確認と確保は同じロックの中で行う。
    """

    def __init__(self) -> None:
        self._reservations: dict[str, Reservation] = {}
        self._lock = threading.Lock()

    def find_overlapping(self, window: ReservationWindow) -> list[Reservation]:
        with self._lock:
            return self._overlapping(window)

    def reserve(self, reference: str, window: ReservationWindow) -> ReservationResult:
        with self._lock:
            existing = self._reservations.get(reference)
            if existing is not None:
                if existing.window == window:
                    return ReservationResult.SUCCESS
                return ReservationResult.CONFLICT
            if self._overlapping(window):
                return ReservationResult.CONFLICT
            self._reservations[reference] = Reservation(reference=reference, window=window)
            return ReservationResult.SUCCESS

    def release(self, reference: str) -> None:
        with self._lock:
            self._reservations.pop(reference, None)

    def _overlapping(self, window: ReservationWindow) -> list[Reservation]:
        return sorted(
            (r for r in self._reservations.values() if r.window.overlaps(window)),
            key=lambda r: r.window.start,
        )
