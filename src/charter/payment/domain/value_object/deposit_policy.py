from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal

from charter.shared.domain import Money


@dataclass(frozen=True)
class DepositPolicy:
    """デポジット / 残金の支払いスケジュール

    - デポジット: 合計の deposit_percentage %、予約から grace_hours 以内
    - 残金: サービス開始の balance_due_hours 時間前まで
    """

    deposit_percentage: Decimal
    grace_hours: int = 24
    balance_due_hours: int = 48

    def __post_init__(self) -> None:
        if not Decimal("0") <= self.deposit_percentage <= Decimal("100"):
            raise ValueError("deposit_percentage must be between 0 and 100")
        if self.grace_hours < 0 or self.balance_due_hours < 0:
            raise ValueError("Hours cannot be negative")

    def deposit_amount(self, total: Money) -> Money:
        return total.percentage(self.deposit_percentage)

    def balance_due_at(self, service_start: datetime) -> datetime:
        return service_start - timedelta(hours=self.balance_due_hours)

    def deposit_due_at(self, booked_at: datetime, service_start: datetime) -> datetime:
        """残金期限より遅くならず、予約時刻より早くならない"""
        due = min(
            booked_at + timedelta(hours=self.grace_hours),
            self.balance_due_at(service_start),
        )
        return max(due, booked_at)
