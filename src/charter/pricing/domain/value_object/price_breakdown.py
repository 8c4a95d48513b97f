from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from charter.pricing.domain.enum import PriceLineKind
from charter.shared.domain import Currency, Money


@dataclass(frozen=True)
class PriceLine:
    """料金明細の1行

    amount は合計への寄与額（倍率の行は倍率適用による増分）。
    オプション行は label に表示名、addon_id にカタログ上の ID を持つ。
    """

    kind: PriceLineKind
    label: str
    amount: Decimal
    multiplier: Decimal | None = None
    addon_id: str | None = None

    def to_dict(self) -> dict:
        data = {
            "kind": self.kind.value,
            "label": self.label,
            "amount": str(self.amount),
        }
        if self.multiplier is not None:
            data["multiplier"] = str(self.multiplier)
        if self.addon_id is not None:
            data["addon_id"] = self.addon_id
        return data

    @classmethod
    def from_dict(cls, data: dict) -> PriceLine:
        multiplier = data.get("multiplier")
        return cls(
            kind=PriceLineKind(data["kind"]),
            label=data["label"],
            amount=Decimal(str(data["amount"])),
            multiplier=Decimal(str(multiplier)) if multiplier is not None else None,
            addon_id=data.get("addon_id"),
        )


@dataclass(frozen=True)
class PriceBreakdown:
    """料金計算の結果（合計 + 明細）

    明細の合計は丸め行を含めて total と一致する。
    """

    total: Money
    lines: tuple[PriceLine, ...]

    def lines_of(self, kind: PriceLineKind) -> tuple[PriceLine, ...]:
        return tuple(line for line in self.lines if line.kind == kind)

    def has_line(self, kind: PriceLineKind) -> bool:
        return any(line.kind == kind for line in self.lines)

    @property
    def addon_ids(self) -> tuple[str, ...]:
        return tuple(
            line.addon_id
            for line in self.lines_of(PriceLineKind.ADDON)
            if line.addon_id is not None
        )

    def to_dict(self) -> dict:
        return {
            "total": str(self.total.amount),
            "currency": str(self.total.currency),
            "lines": [line.to_dict() for line in self.lines],
        }

    @classmethod
    def from_dict(cls, data: dict) -> PriceBreakdown:
        return cls(
            total=Money(
                amount=Decimal(str(data["total"])),
                currency=Currency(data["currency"]),
            ),
            lines=tuple(PriceLine.from_dict(line) for line in data.get("lines", [])),
        )
