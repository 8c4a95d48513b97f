from dataclasses import dataclass, field
from datetime import datetime

from charter.payment.domain.enum import LedgerStatus
from charter.shared.domain import Currency, Money

from .payment_reminder import PaymentReminder


@dataclass(frozen=True)
class PaymentStatusView:
    """予約単位の支払い状況（支払い記録から毎回算出する）"""

    booking_id: str
    total_amount: Money
    paid_amount: Money
    refunded_amount: Money
    remaining_amount: Money
    next_due_date: datetime | None
    next_amount: Money
    status: LedgerStatus
    reminder: PaymentReminder | None = None
    history: tuple = field(default_factory=tuple)

    @property
    def currency(self) -> Currency:
        return self.total_amount.currency
