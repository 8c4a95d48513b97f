from collections.abc import Iterable
from datetime import datetime

from charter.payment.domain.entity import PaymentRecord
from charter.payment.domain.enum import LedgerStatus
from charter.payment.domain.value_object import DepositPolicy, PaymentStatusView
from charter.shared.domain import Money

from .reminder_planner import plan_reminder


def paid_amount_of(records: Iterable[PaymentRecord], total: Money) -> Money:
    """COMPLETED の記録の合計"""
    return Money.sum([r.amount for r in records if r.is_completed], total.currency)


def calculate_status(
    booking_id: str,
    total: Money,
    records: list[PaymentRecord],
    policy: DepositPolicy,
    booked_at: datetime,
    service_start: datetime,
    now: datetime,
) -> PaymentStatusView:
    """支払い記録から支払い状況を算出する

    - デポジット未達: 期限は予約時刻 + 猶予、金額はデポジットの不足分
    - デポジット到達後: 期限はサービス開始の balance_due_hours 時間前、金額は残額
    - 期限を過ぎて未完了なら OVERDUE
    """
    paid = paid_amount_of(records, total)
    refunded = Money.sum([r.amount for r in records if r.is_refund], total.currency)
    remaining = (
        total.subtract(paid) if paid < total else Money.zero(total.currency)
    )
    deposit = policy.deposit_amount(total)

    if remaining.is_zero():
        status = LedgerStatus.COMPLETED
        next_due_date = None
        next_amount = Money.zero(total.currency)
    else:
        if paid < deposit:
            next_due_date = policy.deposit_due_at(booked_at, service_start)
            next_amount = deposit.subtract(paid)
        else:
            next_due_date = policy.balance_due_at(service_start)
            next_amount = remaining

        if now > next_due_date:
            status = LedgerStatus.OVERDUE
        elif paid.is_zero():
            status = LedgerStatus.PENDING
        else:
            status = LedgerStatus.PARTIAL

    return PaymentStatusView(
        booking_id=booking_id,
        total_amount=total,
        paid_amount=paid,
        refunded_amount=refunded,
        remaining_amount=remaining,
        next_due_date=next_due_date,
        next_amount=next_amount,
        status=status,
        reminder=plan_reminder(status, paid, deposit, next_due_date, next_amount),
        history=tuple(sorted(records, key=lambda r: r.recorded_at)),
    )
