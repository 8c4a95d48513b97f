from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from charter.payment.domain.enum import RefundPolicyType
from charter.shared.domain import Money


@dataclass(frozen=True)
class RefundQuote:
    """キャンセル時点での返金見積もり"""

    booking_id: str
    quoted_at: datetime
    policy_type: RefundPolicyType
    hours_until_service: Decimal
    paid_amount: Money
    refundable_amount: Money

    @property
    def is_refundable(self) -> bool:
        return not self.refundable_amount.is_zero()
