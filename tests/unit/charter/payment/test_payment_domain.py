from datetime import timedelta
from decimal import Decimal

import pytest

from charter.booking.domain import BookingId
from charter.payment.domain import (
    DepositPolicy,
    LedgerStatus,
    PaymentId,
    PaymentRecord,
    PaymentStatus,
    ReminderType,
    plan_reminder,
)
from charter.shared.domain import BusinessRuleViolationException, Money


@pytest.fixture
def create_record(clock):
    def _factory(
        transaction_id: str = "txn-1",
        amount: int = 2000,
        status: PaymentStatus = PaymentStatus.COMPLETED,
    ) -> PaymentRecord:
        return PaymentRecord(
            id=PaymentId.from_transaction_id(transaction_id),
            booking_id=BookingId(value="booking_for_draft-001"),
            amount=Money.aed(amount),
            method="card",
            recorded_at=clock(),
            status=status,
            transaction_id=transaction_id,
        )

    return _factory


class TestPaymentId:
    def test_from_transaction_id_is_deterministic(self):
        assert PaymentId.from_transaction_id("txn-1") == PaymentId(value="payment_for_txn-1")

    def test_refund_id_refers_to_original(self):
        original = PaymentId.from_transaction_id("txn-1")

        assert str(PaymentId.refund_of(original)) == "refund_of_payment_for_txn-1"


class TestPaymentRecord:
    def test_create_refund_appends_new_record(self, create_record, clock):
        record = create_record()

        refund = record.create_refund(Money.aed(500), clock())

        assert refund.is_refund
        assert refund.amount == Money.aed(500)
        assert refund.refunded_payment_id == record.id
        assert record.is_completed

    def test_refund_cannot_exceed_original(self, create_record, clock):
        with pytest.raises(BusinessRuleViolationException, match="exceeds"):
            create_record().create_refund(Money.aed(2001), clock())

    def test_only_completed_payment_can_be_refunded(self, create_record, clock):
        record = create_record(status=PaymentStatus.FAILED)

        with pytest.raises(BusinessRuleViolationException):
            record.create_refund(Money.aed(100), clock())


class TestDepositPolicy:
    def test_deposit_amount_is_percentage_of_total(self):
        policy = DepositPolicy(deposit_percentage=Decimal("20"))

        assert policy.deposit_amount(Money.aed(8200)) == Money.aed(1640)

    def test_deposit_due_within_grace_period(self, clock):
        policy = DepositPolicy(deposit_percentage=Decimal("20"))

        due = policy.deposit_due_at(clock(), clock() + timedelta(days=10))

        assert due == clock() + timedelta(hours=24)

    def test_deposit_due_never_after_balance_due(self, clock):
        policy = DepositPolicy(deposit_percentage=Decimal("20"))
        service_start = clock() + timedelta(hours=60)

        due = policy.deposit_due_at(clock(), service_start)

        assert due == service_start - timedelta(hours=48)

    def test_deposit_due_never_before_booking(self, clock):
        policy = DepositPolicy(deposit_percentage=Decimal("20"))

        due = policy.deposit_due_at(clock(), clock() + timedelta(hours=5))

        assert due == clock()

    def test_percentage_out_of_range_is_rejected(self):
        with pytest.raises(ValueError):
            DepositPolicy(deposit_percentage=Decimal("120"))


class TestPlanReminder:
    def test_completed_has_no_reminder(self, clock):
        assert (
            plan_reminder(
                LedgerStatus.COMPLETED, Money.aed(100), Money.aed(20), None, Money.aed(0)
            )
            is None
        )

    def test_overdue_takes_priority(self, clock):
        reminder = plan_reminder(
            LedgerStatus.OVERDUE, Money.aed(0), Money.aed(20), clock(), Money.aed(20)
        )

        assert reminder.type == ReminderType.OVERDUE
        assert reminder.amount == Money.aed(20)

    def test_balance_after_deposit(self, clock):
        reminder = plan_reminder(
            LedgerStatus.PARTIAL, Money.aed(20), Money.aed(20), clock(), Money.aed(80)
        )

        assert reminder.type == ReminderType.BALANCE
