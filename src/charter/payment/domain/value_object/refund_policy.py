from dataclasses import dataclass
from decimal import Decimal

from charter.payment.domain.enum import RefundPolicyType


@dataclass(frozen=True)
class RefundPolicy:
    """キャンセル時の返金ポリシー"""

    type: RefundPolicyType
    deadline_hours: int = 24
    percentage: Decimal = Decimal("100")

    def __post_init__(self) -> None:
        if self.deadline_hours < 0:
            raise ValueError("deadline_hours cannot be negative")
        if not Decimal("0") <= self.percentage <= Decimal("100"):
            raise ValueError("percentage must be between 0 and 100")
