from abc import abstractmethod

from charter.booking.domain.entity import ConfirmedBooking
from charter.booking.domain.enum import BookingStatus
from charter.booking.domain.value_object import BookingId
from charter.shared.domain import Repository


class BookingRepository(Repository[ConfirmedBooking, BookingId]):
    """確定予約リポジトリのインターフェース"""

    @abstractmethod
    def update(
        self, booking: ConfirmedBooking, expected_status: BookingStatus | None = None
    ) -> None:
        """ステータスを更新する（expected_status と異なれば OptimisticLockException）"""
        pass
