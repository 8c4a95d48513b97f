from abc import abstractmethod

from charter.booking.domain import BookingId
from charter.payment.domain.entity import PaymentRecord
from charter.payment.domain.value_object import PaymentId
from charter.shared.domain import Repository


class PaymentRepository(Repository[PaymentRecord, PaymentId]):
    """支払い記録リポジトリのインターフェース

    save は同じ ID の記録があれば DuplicateResourceException を送出する。
    """

    @abstractmethod
    def find_by_booking_id(self, booking_id: BookingId) -> list[PaymentRecord]:
        """予約の支払い記録を記録日時順で返す"""
        pass
