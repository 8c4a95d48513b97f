import uuid
from datetime import datetime, tzinfo

from charter.availability.domain import (
    ReservationResult,
    ReservationStore,
    ReservationWindow,
    SlotNoLongerAvailableException,
)
from charter.booking.applications.booking_workflow import BookingWorkflow
from charter.booking.domain import (
    BookingDraft,
    BookingId,
    BookingRepository,
    ConfirmedBooking,
    ConfirmedBookingFactory,
    DraftId,
    PaymentDeclinedException,
    WorkflowStep,
)
from charter.payment.applications.payment_ledger import PaymentLedgerService
from charter.payment.domain import PaymentGateway
from charter.pricing.domain import PricingEngine
from charter.shared.domain import (
    DuplicateResourceException,
    InvalidTransitionException,
    Money,
)
from charter.shared.utils import Clock, get_logger

logger = get_logger("checkout")


class CheckoutService:
    """チェックアウト（ドラフト -> 確定予約）ユースケース

    1. 料金を再計算する
    2. 予約ストアで枠を原子的に再確認・確保する（競合なら DateTime に戻す）
    3. デポジットを決済する（拒否なら枠を解放する）
    4. 確定予約を保存し、支払いを台帳に記録する
    5. ドラフトを Confirmation に進める
    """

    def __init__(
        self,
        workflow: BookingWorkflow,
        pricing_engine: PricingEngine,
        reservation_store: ReservationStore,
        payment_gateway: PaymentGateway,
        booking_repository: BookingRepository,
        ledger: PaymentLedgerService,
        factory: ConfirmedBookingFactory,
        clock: Clock,
    ) -> None:
        self._workflow = workflow
        self._pricing_engine = pricing_engine
        self._reservation_store = reservation_store
        self._payment_gateway = payment_gateway
        self._booking_repository = booking_repository
        self._ledger = ledger
        self._factory = factory
        self._clock = clock

    def checkout(self, draft_id: DraftId, payment_method: str) -> ConfirmedBooking:
        draft = self._workflow.resume(draft_id)
        if draft.step != WorkflowStep.PAYMENT:
            raise InvalidTransitionException(
                f"Checkout requires the PAYMENT step (current: {draft.step.value})"
            )

        price = self._pricing_engine.compute_price(
            category=draft.category,
            day=draft.day,
            duration_hours=draft.duration_hours,
            guest_count=draft.guest_count,
            addon_ids=draft.addon_ids,
        )
        now = self._clock()
        booking = self._factory.create(
            draft, price, created_at=now, business_tz=self._business_tz(now)
        )
        booking_id = booking.id

        window = ReservationWindow.for_slot(
            draft.asset_id, draft.day, draft.start_hour, draft.duration_hours
        )
        if self._reservation_store.reserve(str(booking_id), window) == ReservationResult.CONFLICT:
            logger.info(
                "Slot taken before checkout",
                extra={"draft_id": str(draft_id), "asset_id": str(draft.asset_id)},
            )
            self._workflow.reopen_datetime(draft)
            raise SlotNoLongerAvailableException(
                "The selected time slot is no longer available"
            )

        attempt_id = self._payment_attempt_for(draft)

        deposit = self._ledger.deposit_policy.deposit_amount(price.total)
        transaction_id = None
        if not deposit.is_zero():
            transaction_id = self._capture_deposit(
                draft, booking_id, deposit, payment_method, attempt_id
            )

        booking = self._save_booking(booking)
        if transaction_id is not None:
            self._ledger.record_payment(
                booking_id=booking_id,
                amount=deposit,
                method=payment_method,
                transaction_id=transaction_id,
            )
        self._workflow.complete(draft)

        for event in booking.flush_domain_events():
            logger.info(event.name, extra={"booking_id": str(booking_id)})
        logger.info(
            "Checkout completed",
            extra={
                "draft_id": str(draft_id),
                "booking_id": str(booking_id),
                "total": str(price.total.amount),
            },
        )
        return self._booking_repository.find_by_id(booking_id) or booking

    def _payment_attempt_for(self, draft: BookingDraft) -> str:
        """決済の冪等キーを決める

        前回の試行が拒否されていなければ同じキーを再利用する。
        拒否された後の再試行だけ新しいキーを発行する。
        """
        if draft.payment_attempt_id and draft.payment_error is None:
            return draft.payment_attempt_id
        attempt_id = str(uuid.uuid4())
        draft.start_payment_attempt(attempt_id)
        self._workflow.save(draft)
        return attempt_id

    def _capture_deposit(
        self,
        draft: BookingDraft,
        booking_id: BookingId,
        deposit: Money,
        payment_method: str,
        attempt_id: str,
    ) -> str:
        """デポジットを決済する（拒否なら枠を解放して PaymentDeclinedException）"""
        result = self._payment_gateway.capture(
            reference=str(booking_id),
            amount=deposit,
            method=payment_method,
            idempotency_key=attempt_id,
        )
        if not result.succeeded:
            self._reservation_store.release(str(booking_id))
            draft.record_payment_failure(result.message or "Payment was declined")
            self._workflow.save(draft)
            logger.info(
                "Deposit declined",
                extra={"draft_id": str(draft.id), "booking_id": str(booking_id)},
            )
            raise PaymentDeclinedException(result.message or "Payment was declined")
        return result.transaction_id or attempt_id

    def _save_booking(self, booking: ConfirmedBooking) -> ConfirmedBooking:
        """同じドラフトの再試行なら保存済みの予約を使う"""
        try:
            self._booking_repository.save(booking)
        except DuplicateResourceException:
            existing = self._booking_repository.find_by_id(booking.id)
            if existing is None:
                raise
            return existing
        return booking

    @staticmethod
    def _business_tz(now: datetime) -> tzinfo:
        if now.tzinfo is None:
            raise ValueError("Clock must return timezone-aware datetimes")
        return now.tzinfo
