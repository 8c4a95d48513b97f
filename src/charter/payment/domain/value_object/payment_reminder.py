from dataclasses import dataclass
from datetime import datetime

from charter.payment.domain.enum import ReminderType
from charter.shared.domain import Money


@dataclass(frozen=True)
class PaymentReminder:
    """次に送るべき支払いリマインダー（送信はコアの外）"""

    type: ReminderType
    due_date: datetime
    amount: Money
