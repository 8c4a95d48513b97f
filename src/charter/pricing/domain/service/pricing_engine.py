from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from charter.fleet.domain import AssetCategory
from charter.pricing.domain.enum import PriceLineKind
from charter.pricing.domain.exceptions import UnknownAddonException
from charter.pricing.domain.service.calendar_rules import is_peak_season, is_weekend
from charter.pricing.domain.value_object import (
    PriceBreakdown,
    PriceLine,
    PricingCatalog,
    PricingRuleSet,
)
from charter.shared.domain import InvalidInputException, Money, round_half_up


class PricingEngine:
    """料金計算のドメインサービス

    計算順序:
    1. 基本料金
    2. + (時間 - 1) x 時間単価
    3. 繁忙期なら x 繁忙期倍率
    4. 週末なら x 週末倍率
    5. + 追加ゲスト数 x ゲスト単価
    6. + オプション料金（カタログ順）
    7. 整数単位に四捨五入

    入力が同じなら結果も同じ（外部状態を読まない）。
    """

    def __init__(self, catalog: PricingCatalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> PricingCatalog:
        return self._catalog

    def rule_set_for(self, category: AssetCategory) -> PricingRuleSet:
        return self._catalog.rule_set_for(category)

    def compute_price(
        self,
        category: AssetCategory,
        day: date,
        duration_hours: int,
        guest_count: int,
        addon_ids: Iterable[str] = (),
    ) -> PriceBreakdown:
        rules = self.rule_set_for(category)
        self._validate(rules, duration_hours, guest_count)
        addon_lines = self._addon_lines(rules, category, addon_ids)

        lines: list[PriceLine] = [
            PriceLine(PriceLineKind.BASE, "Base price", rules.base_price)
        ]
        price = rules.base_price

        extra_hours = duration_hours - 1
        if extra_hours > 0:
            duration_amount = extra_hours * rules.hourly_rate
            lines.append(
                PriceLine(
                    PriceLineKind.DURATION,
                    f"{extra_hours} additional hour(s)",
                    duration_amount,
                )
            )
            price += duration_amount

        if is_peak_season(day):
            price = self._apply_multiplier(
                lines, price, PriceLineKind.PEAK_SEASON, rules.peak_season_multiplier
            )
        if is_weekend(day):
            price = self._apply_multiplier(
                lines, price, PriceLineKind.WEEKEND, rules.weekend_multiplier
            )

        extra_guests = max(0, guest_count - 1)
        if extra_guests > 0:
            guest_amount = extra_guests * rules.guest_rate
            lines.append(
                PriceLine(
                    PriceLineKind.GUESTS, f"{extra_guests} additional guest(s)", guest_amount
                )
            )
            price += guest_amount

        for line in addon_lines:
            lines.append(line)
            price += line.amount

        total = round_half_up(price)
        if total != price:
            lines.append(PriceLine(PriceLineKind.ROUNDING, "Rounding", total - price))

        return PriceBreakdown(
            total=Money(amount=total, currency=self._catalog.currency),
            lines=tuple(lines),
        )

    def _validate(
        self, rules: PricingRuleSet, duration_hours: int, guest_count: int
    ) -> None:
        errors: dict[str, str] = {}
        if duration_hours < 1:
            errors["duration_hours"] = "Duration must be at least 1 hour"
        if guest_count < 1:
            errors["guest_count"] = "At least 1 guest is required"
        elif guest_count > rules.max_guests:
            errors["guest_count"] = f"Maximum {rules.max_guests} guests allowed"
        if errors:
            raise InvalidInputException("Invalid pricing input", errors)

    def _addon_lines(
        self, rules: PricingRuleSet, category: AssetCategory, addon_ids: Iterable[str]
    ) -> list[PriceLine]:
        requested = set(addon_ids)
        for addon_id in requested:
            if rules.find_addon(addon_id) is None:
                raise UnknownAddonException(addon_id, category.value)
        return [
            PriceLine(PriceLineKind.ADDON, addon.label, addon.price, addon_id=addon.id)
            for addon in rules.addons
            if addon.id in requested
        ]

    @staticmethod
    def _apply_multiplier(
        lines: list[PriceLine],
        price: Decimal,
        kind: PriceLineKind,
        multiplier: Decimal,
    ) -> Decimal:
        adjusted = price * multiplier
        lines.append(
            PriceLine(kind, f"x{multiplier}", adjusted - price, multiplier=multiplier)
        )
        return adjusted
