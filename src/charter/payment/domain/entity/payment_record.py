from __future__ import annotations

from datetime import datetime

from charter.booking.domain import BookingId
from charter.payment.domain.enum import PaymentStatus
from charter.payment.domain.value_object import PaymentId
from charter.shared.domain import BusinessRuleViolationException, Entity, Money


class PaymentRecord(Entity[PaymentId]):
    """支払い記録（追記のみ）

    返金は元の記録を書き換えず、REFUNDED の記録を別に追加する。
    """

    def __init__(
        self,
        id: PaymentId,
        booking_id: BookingId,
        amount: Money,
        method: str,
        recorded_at: datetime,
        status: PaymentStatus,
        transaction_id: str | None = None,
        refunded_payment_id: PaymentId | None = None,
    ) -> None:
        super().__init__(id)
        self._booking_id = booking_id
        self._amount = amount
        self._method = method
        self._recorded_at = recorded_at
        self._status = status
        self._transaction_id = transaction_id
        self._refunded_payment_id = refunded_payment_id

    @property
    def booking_id(self) -> BookingId:
        return self._booking_id

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def method(self) -> str:
        return self._method

    @property
    def recorded_at(self) -> datetime:
        return self._recorded_at

    @property
    def status(self) -> PaymentStatus:
        return self._status

    @property
    def transaction_id(self) -> str | None:
        return self._transaction_id

    @property
    def refunded_payment_id(self) -> PaymentId | None:
        return self._refunded_payment_id

    @property
    def is_completed(self) -> bool:
        return self._status == PaymentStatus.COMPLETED

    @property
    def is_refund(self) -> bool:
        return self._status == PaymentStatus.REFUNDED

    def create_refund(self, amount: Money, at: datetime) -> PaymentRecord:
        """この支払いに対する返金記録を生成する"""
        if not self.is_completed:
            raise BusinessRuleViolationException("Can only refund completed payments")
        if amount > self._amount:
            raise BusinessRuleViolationException(
                f"Refund {amount} exceeds original payment {self._amount}"
            )
        return PaymentRecord(
            id=PaymentId.refund_of(self.id),
            booking_id=self._booking_id,
            amount=amount,
            method=self._method,
            recorded_at=at,
            status=PaymentStatus.REFUNDED,
            transaction_id=self._transaction_id,
            refunded_payment_id=self.id,
        )
