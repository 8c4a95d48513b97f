from datetime import datetime

from charter.payment.domain.enum import LedgerStatus, ReminderType
from charter.payment.domain.value_object import PaymentReminder
from charter.shared.domain import Money


def plan_reminder(
    status: LedgerStatus,
    paid_amount: Money,
    deposit_amount: Money,
    next_due_date: datetime | None,
    next_amount: Money,
) -> PaymentReminder | None:
    """支払い状況から次のリマインダーを決める（支払い完了なら None）"""
    if status == LedgerStatus.COMPLETED or next_due_date is None:
        return None
    if status == LedgerStatus.OVERDUE:
        reminder_type = ReminderType.OVERDUE
    elif paid_amount < deposit_amount:
        reminder_type = ReminderType.DEPOSIT
    else:
        reminder_type = ReminderType.BALANCE
    return PaymentReminder(type=reminder_type, due_date=next_due_date, amount=next_amount)
