from dataclasses import dataclass
from datetime import datetime

from charter.availability.domain import ReservationStore
from charter.booking.domain import (
    BookingId,
    BookingNotFoundException,
    BookingRepository,
    BookingStatus,
    ConfirmedBooking,
)
from charter.payment.domain import (
    PaymentRecord,
    PaymentRepository,
    RefundPolicy,
    RefundQuote,
    calculate_refund,
    hours_until,
    paid_amount_of,
)
from charter.shared.domain import Money
from charter.shared.utils import get_logger

logger = get_logger("cancel-booking")


@dataclass(frozen=True)
class CancellationResult:
    booking: ConfirmedBooking
    quote: RefundQuote
    refunds: tuple[PaymentRecord, ...]


class CancelBookingService:
    """キャンセル・返金ユースケース"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        payment_repository: PaymentRepository,
        reservation_store: ReservationStore,
        refund_policy: RefundPolicy,
    ) -> None:
        self._booking_repository = booking_repository
        self._payment_repository = payment_repository
        self._reservation_store = reservation_store
        self._refund_policy = refund_policy

    def quote_cancellation(self, booking_id: BookingId, at: datetime) -> RefundQuote:
        """指定時刻にキャンセルした場合の返金額"""
        booking = self._require_booking(booking_id)
        return self._quote(booking, self._payment_repository.find_by_booking_id(booking_id), at)

    def cancel(self, booking_id: BookingId, at: datetime) -> CancellationResult:
        """予約をキャンセルし、返金記録を追加して枠を解放する

        キャンセル済みの予約に対しては状態を更新せず、元のキャンセル時刻で
        見積もり直して不足している返金記録の追加と枠の解放だけを行う。
        途中で失敗したキャンセルはもう一度呼び出せば完了する。
        """
        booking = self._require_booking(booking_id)
        records = self._payment_repository.find_by_booking_id(booking_id)

        if booking.status == BookingStatus.CANCELLED and booking.cancelled_at:
            at = booking.cancelled_at
            quote = self._quote(booking, records, at)
            logger.info(
                "Resuming cancellation",
                extra={"booking_id": str(booking_id)},
            )
        else:
            quote = self._quote(booking, records, at)
            previous_status = booking.status
            booking.cancel(at)
            self._booking_repository.update(booking, expected_status=previous_status)

        refunds = self._append_refunds(records, quote.refundable_amount, at)
        self._reservation_store.release(str(booking_id))

        for event in booking.flush_domain_events():
            logger.info(
                event.name,
                extra={
                    "booking_id": str(booking_id),
                    "refunded": str(quote.refundable_amount.amount),
                },
            )
        return CancellationResult(booking=booking, quote=quote, refunds=tuple(refunds))

    def _quote(
        self, booking: ConfirmedBooking, records: list[PaymentRecord], at: datetime
    ) -> RefundQuote:
        paid = paid_amount_of(records, booking.total_price)
        hours = hours_until(booking.service_start, at)
        return RefundQuote(
            booking_id=str(booking.id),
            quoted_at=at,
            policy_type=self._refund_policy.type,
            hours_until_service=hours,
            paid_amount=paid,
            refundable_amount=calculate_refund(self._refund_policy, paid, hours),
        )

    def _append_refunds(
        self, records: list[PaymentRecord], refundable: Money, at: datetime
    ) -> list[PaymentRecord]:
        """返金額を新しい支払いから順に割り当てて REFUNDED の記録を追加する

        返金記録が既にある支払いは保存し直さない。
        """
        existing = {r.refunded_payment_id: r for r in records if r.is_refund}
        refunds: list[PaymentRecord] = []
        left = refundable
        completed = [r for r in records if r.is_completed]
        for record in sorted(completed, key=lambda r: r.recorded_at, reverse=True):
            if left.is_zero():
                break
            portion = record.amount if record.amount <= left else left
            refund = existing.get(record.id)
            if refund is None:
                refund = record.create_refund(portion, at)
                self._payment_repository.save(refund)
            refunds.append(refund)
            left = left.subtract(portion)
        return refunds

    def _require_booking(self, booking_id: BookingId) -> ConfirmedBooking:
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise BookingNotFoundException(f"Booking not found: {booking_id}")
        return booking
