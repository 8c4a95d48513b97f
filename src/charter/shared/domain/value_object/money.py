from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from .currency import Currency

WHOLE_UNIT = Decimal("1")


def round_half_up(amount: Decimal) -> Decimal:
    """通貨の最小単位（整数）に四捨五入する"""
    return amount.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def _check_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError(
                f"Currency mismatch: {self.currency} and {other.currency}"
            )

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        self._check_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: Money) -> Money:
        """金額を減算する（結果が負になる場合は ValueError）"""
        self._check_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def percentage(self, percent: Decimal) -> Money:
        """指定パーセントの金額を整数単位に丸めて返す"""
        return Money(
            amount=round_half_up(self.amount * percent / Decimal("100")),
            currency=self.currency,
        )

    def is_zero(self) -> bool:
        return self.amount == 0

    def __lt__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount >= other.amount

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(Decimal("0"), currency)

    @classmethod
    def aed(cls, amount: Decimal | int | str) -> Money:
        """UAE ディルハムで Money を生成"""
        return cls(Decimal(str(amount)), Currency.aed())

    @classmethod
    def sum(cls, items: list[Money], currency: Currency) -> Money:
        """同一通貨の Money を合計する（空なら 0）"""
        total = cls.zero(currency)
        for item in items:
            total = total.add(item)
        return total
