from charter.booking.domain import (
    BookingId,
    BookingNotFoundException,
    BookingRepository,
    BookingStatus,
    ConfirmedBooking,
)
from charter.payment.domain import (
    AlreadySettledException,
    DepositPolicy,
    OverpaymentRejectedException,
    PaymentId,
    PaymentRecord,
    PaymentRepository,
    PaymentStatus,
    PaymentStatusView,
    calculate_status,
    paid_amount_of,
)
from charter.shared.domain import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    InvalidInputException,
    Money,
    OptimisticLockException,
)
from charter.shared.utils import Clock, get_logger

logger = get_logger("payment-ledger")


class PaymentLedgerService:
    """支払い台帳ユースケース

    - 外部トランザクションIDごとに冪等（同じ通知は1回だけ計上）
    - デポジットに達したら PENDING の予約を CONFIRMED にする
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        payment_repository: PaymentRepository,
        deposit_policy: DepositPolicy,
        clock: Clock,
    ) -> None:
        self._booking_repository = booking_repository
        self._payment_repository = payment_repository
        self._deposit_policy = deposit_policy
        self._clock = clock

    @property
    def deposit_policy(self) -> DepositPolicy:
        return self._deposit_policy

    def record_payment(
        self,
        booking_id: BookingId,
        amount: Money,
        method: str,
        transaction_id: str,
    ) -> PaymentRecord:
        """支払いを記録する"""
        if amount.is_zero():
            raise InvalidInputException.for_field("amount", "Amount must be positive")
        if not transaction_id:
            raise InvalidInputException.for_field(
                "transaction_id", "transaction_id is required"
            )

        booking = self._require_booking(booking_id)
        records = self._payment_repository.find_by_booking_id(booking_id)
        payment_id = PaymentId.from_transaction_id(transaction_id)
        for record in records:
            if record.id == payment_id:
                logger.info(
                    "Duplicate payment notification",
                    extra={"booking_id": str(booking_id), "transaction_id": transaction_id},
                )
                return record

        if booking.status == BookingStatus.CANCELLED:
            raise BusinessRuleViolationException(
                f"Cannot record payment for cancelled booking: {booking_id}"
            )
        total = booking.total_price
        if amount.currency != total.currency:
            raise InvalidInputException.for_field(
                "currency", f"Payments must be made in {total.currency}"
            )

        paid = paid_amount_of(records, total)
        if paid >= total:
            raise AlreadySettledException(f"Booking is already fully paid: {booking_id}")
        if paid.add(amount) > total:
            raise OverpaymentRejectedException(
                f"Payment of {amount} exceeds remaining {total.subtract(paid)}"
            )

        record = PaymentRecord(
            id=payment_id,
            booking_id=booking_id,
            amount=amount,
            method=method,
            recorded_at=self._clock(),
            status=PaymentStatus.COMPLETED,
            transaction_id=transaction_id,
        )
        try:
            self._payment_repository.save(record)
        except DuplicateResourceException:
            # 同じ通知が並行して届いた場合は先に書かれた記録を返す
            existing = self._payment_repository.find_by_id(payment_id)
            if existing is None:
                raise
            return existing

        logger.info(
            "Payment recorded",
            extra={
                "booking_id": str(booking_id),
                "payment_id": str(payment_id),
                "amount": str(amount.amount),
            },
        )

        if paid.add(amount) >= self._deposit_policy.deposit_amount(total):
            self._confirm(booking)
        return record

    def get_status(self, booking_id: BookingId) -> PaymentStatusView:
        booking = self._require_booking(booking_id)
        records = self._payment_repository.find_by_booking_id(booking_id)
        return calculate_status(
            booking_id=str(booking_id),
            total=booking.total_price,
            records=records,
            policy=self._deposit_policy,
            booked_at=booking.created_at,
            service_start=booking.service_start,
            now=self._clock(),
        )

    def get_history(self, booking_id: BookingId) -> list[PaymentRecord]:
        """支払い記録を記録日時順で返す"""
        self._require_booking(booking_id)
        records = self._payment_repository.find_by_booking_id(booking_id)
        return sorted(records, key=lambda r: r.recorded_at)

    def _confirm(self, booking: ConfirmedBooking) -> None:
        if booking.status != BookingStatus.PENDING:
            return
        booking.confirm()
        try:
            self._booking_repository.update(booking, expected_status=BookingStatus.PENDING)
        except OptimisticLockException:
            logger.info(
                "Booking already confirmed by another payment",
                extra={"booking_id": str(booking.id)},
            )
            return
        for event in booking.flush_domain_events():
            logger.info(event.name, extra={"booking_id": str(booking.id)})

    def _require_booking(self, booking_id: BookingId) -> ConfirmedBooking:
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None:
            raise BookingNotFoundException(f"Booking not found: {booking_id}")
        return booking
