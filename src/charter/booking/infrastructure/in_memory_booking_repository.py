import copy
import threading

from charter.booking.domain import (
    BookingId,
    BookingRepository,
    BookingStatus,
    ConfirmedBooking,
)
from charter.shared.domain import DuplicateResourceException, OptimisticLockException


class InMemoryBookingRepository(BookingRepository):
    """メモリ上の BookingRepository（テスト・ローカル実行用）

    保存時にコピーを持ち、DynamoDB 実装と同じ条件付き書き込みの振る舞いをする。
    """

    def __init__(self) -> None:
        self._bookings: dict[BookingId, ConfirmedBooking] = {}
        self._lock = threading.Lock()

    def save(self, booking: ConfirmedBooking) -> None:
        with self._lock:
            if booking.id in self._bookings:
                raise DuplicateResourceException(f"Booking already exists: {booking.id}")
            self._bookings[booking.id] = self._copy(booking)

    def find_by_id(self, booking_id: BookingId) -> ConfirmedBooking | None:
        with self._lock:
            booking = self._bookings.get(booking_id)
            return self._copy(booking) if booking is not None else None

    def update(
        self, booking: ConfirmedBooking, expected_status: BookingStatus | None = None
    ) -> None:
        with self._lock:
            stored = self._bookings.get(booking.id)
            if stored is None or (
                expected_status is not None and stored.status != expected_status
            ):
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status}, "
                    f"booking_id={booking.id}"
                )
            self._bookings[booking.id] = self._copy(booking)

    @staticmethod
    def _copy(booking: ConfirmedBooking) -> ConfirmedBooking:
        stored = copy.deepcopy(booking)
        stored.flush_domain_events()
        return stored
