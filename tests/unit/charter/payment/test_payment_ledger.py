from datetime import timedelta
from decimal import Decimal

import pytest

from charter.booking.domain import BookingId, BookingNotFoundException, BookingStatus
from charter.payment.domain import (
    AlreadySettledException,
    LedgerStatus,
    OverpaymentRejectedException,
    PaymentId,
    ReminderType,
)
from charter.shared.domain import (
    BusinessRuleViolationException,
    Currency,
    InvalidInputException,
    Money,
)


class TestRecordPayment:
    def test_records_completed_payment(self, ledger, saved_booking, clock):
        record = ledger.record_payment(saved_booking.id, Money.aed(1000), "card", "txn-1")

        assert record.id == PaymentId.from_transaction_id("txn-1")
        assert record.amount == Money.aed(1000)
        assert record.recorded_at == clock()
        assert record.is_completed

    def test_duplicate_notification_is_recorded_once(
        self, ledger, saved_booking, payment_repository
    ):
        first = ledger.record_payment(saved_booking.id, Money.aed(1000), "card", "txn-1")
        second = ledger.record_payment(saved_booking.id, Money.aed(1000), "card", "txn-1")

        assert second == first
        assert len(payment_repository.find_by_booking_id(saved_booking.id)) == 1

    def test_reaching_deposit_confirms_booking(
        self, ledger, saved_booking, booking_repository
    ):
        ledger.record_payment(saved_booking.id, Money.aed(2000), "card", "txn-1")

        assert booking_repository.find_by_id(saved_booking.id).status == BookingStatus.CONFIRMED

    def test_below_deposit_keeps_booking_pending(
        self, ledger, saved_booking, booking_repository
    ):
        ledger.record_payment(saved_booking.id, Money.aed(1999), "card", "txn-1")

        assert booking_repository.find_by_id(saved_booking.id).status == BookingStatus.PENDING

    def test_settled_booking_rejects_more_payments(self, ledger, saved_booking):
        ledger.record_payment(saved_booking.id, Money.aed(10000), "card", "txn-1")

        with pytest.raises(AlreadySettledException):
            ledger.record_payment(saved_booking.id, Money.aed(1), "card", "txn-2")

    def test_overpayment_is_rejected(self, ledger, saved_booking, payment_repository):
        ledger.record_payment(saved_booking.id, Money.aed(9000), "card", "txn-1")

        with pytest.raises(OverpaymentRejectedException):
            ledger.record_payment(saved_booking.id, Money.aed(1001), "card", "txn-2")
        assert len(payment_repository.find_by_booking_id(saved_booking.id)) == 1

    def test_zero_amount_is_invalid(self, ledger, saved_booking):
        with pytest.raises(InvalidInputException) as exc:
            ledger.record_payment(saved_booking.id, Money.aed(0), "card", "txn-1")

        assert "amount" in exc.value.errors

    def test_transaction_id_is_required(self, ledger, saved_booking):
        with pytest.raises(InvalidInputException) as exc:
            ledger.record_payment(saved_booking.id, Money.aed(100), "card", "")

        assert "transaction_id" in exc.value.errors

    def test_currency_must_match_booking(self, ledger, saved_booking):
        with pytest.raises(InvalidInputException) as exc:
            ledger.record_payment(
                saved_booking.id, Money(Decimal("100"), Currency("USD")), "card", "txn-1"
            )

        assert "currency" in exc.value.errors

    def test_unknown_booking(self, ledger):
        with pytest.raises(BookingNotFoundException):
            ledger.record_payment(BookingId(value="missing"), Money.aed(100), "card", "txn-1")

    def test_cancelled_booking_rejects_payment(
        self, ledger, create_booking, booking_repository
    ):
        booking = create_booking(status=BookingStatus.CANCELLED)
        booking_repository.save(booking)

        with pytest.raises(BusinessRuleViolationException, match="cancelled"):
            ledger.record_payment(booking.id, Money.aed(100), "card", "txn-1")


class TestGetStatus:
    def test_unpaid_booking_is_pending_with_deposit_due(self, ledger, saved_booking, clock):
        status = ledger.get_status(saved_booking.id)

        assert status.status == LedgerStatus.PENDING
        assert status.paid_amount == Money.aed(0)
        assert status.remaining_amount == Money.aed(10000)
        assert status.next_amount == Money.aed(2000)
        assert status.next_due_date == clock() + timedelta(hours=24)
        assert status.reminder.type == ReminderType.DEPOSIT

    def test_deposit_paid_is_partial_with_balance_due(self, ledger, saved_booking):
        ledger.record_payment(saved_booking.id, Money.aed(2000), "card", "txn-1")

        status = ledger.get_status(saved_booking.id)

        assert status.status == LedgerStatus.PARTIAL
        assert status.remaining_amount == Money.aed(8000)
        assert status.next_amount == Money.aed(8000)
        assert status.next_due_date == saved_booking.service_start - timedelta(hours=48)
        assert status.reminder.type == ReminderType.BALANCE

    def test_fully_paid_is_completed(self, ledger, saved_booking):
        ledger.record_payment(saved_booking.id, Money.aed(2000), "card", "txn-1")
        ledger.record_payment(saved_booking.id, Money.aed(8000), "card", "txn-2")

        status = ledger.get_status(saved_booking.id)

        assert status.status == LedgerStatus.COMPLETED
        assert status.remaining_amount == Money.aed(0)
        assert status.next_due_date is None
        assert status.reminder is None

    def test_missed_deposit_is_overdue(self, ledger, saved_booking, clock):
        clock.advance(hours=25)

        status = ledger.get_status(saved_booking.id)

        assert status.status == LedgerStatus.OVERDUE
        assert status.reminder.type == ReminderType.OVERDUE

    def test_history_is_ordered_by_recording_time(self, ledger, saved_booking, clock):
        ledger.record_payment(saved_booking.id, Money.aed(2000), "card", "txn-1")
        clock.advance(hours=1)
        ledger.record_payment(saved_booking.id, Money.aed(500), "bank", "txn-2")

        history = ledger.get_history(saved_booking.id)

        assert [r.transaction_id for r in history] == ["txn-1", "txn-2"]
