from decimal import Decimal

from charter.fleet.domain import AssetCategory
from charter.pricing.domain.value_object import Addon, PricingCatalog, PricingRuleSet
from charter.shared.domain import Currency

_AVIATION_DURATIONS = (2, 4, 8, 24)


def _aviation_rules(addons: tuple[Addon, ...]) -> PricingRuleSet:
    return PricingRuleSet(
        base_price=Decimal("15000"),
        hourly_rate=Decimal("3000"),
        peak_season_multiplier=Decimal("1.4"),
        weekend_multiplier=Decimal("1.1"),
        guest_rate=Decimal("200"),
        max_guests=15,
        addons=addons,
        allowed_durations=_AVIATION_DURATIONS,
    )


class PricingCatalogFactory:
    """料金カタログのファクトリ"""

    def create_default(self, currency: Currency | None = None) -> PricingCatalog:
        """標準の料金表（AED 建て）を生成する"""
        rule_sets = {
            AssetCategory.YACHT: PricingRuleSet(
                base_price=Decimal("5000"),
                hourly_rate=Decimal("1000"),
                peak_season_multiplier=Decimal("1.3"),
                weekend_multiplier=Decimal("1.2"),
                guest_rate=Decimal("100"),
                max_guests=30,
                addons=(
                    Addon("catering", "Gourmet Catering", Decimal("399")),
                    Addon("watersports", "Water Sports Package", Decimal("299")),
                    Addon("sunset", "Sunset Cruise Extension", Decimal("199")),
                ),
                allowed_durations=(2, 4, 8, 24),
            ),
            AssetCategory.HELICOPTER: _aviation_rules(
                (
                    Addon("photo", "Professional Photography", Decimal("299")),
                    Addon("champagne", "Champagne Service", Decimal("199")),
                    Addon("pickup", "Hotel Pickup", Decimal("149")),
                )
            ),
            AssetCategory.PRIVATE_JET: _aviation_rules(
                (
                    Addon("catering", "Premium Catering", Decimal("599")),
                    Addon("concierge", "Concierge Service", Decimal("399")),
                    Addon("transfer", "Airport Transfer", Decimal("299")),
                )
            ),
            AssetCategory.LUXURY_CAR: PricingRuleSet(
                base_price=Decimal("1000"),
                hourly_rate=Decimal("200"),
                peak_season_multiplier=Decimal("1.2"),
                weekend_multiplier=Decimal("1.15"),
                guest_rate=Decimal("50"),
                max_guests=4,
                addons=(
                    Addon("chauffeur", "Professional Chauffeur", Decimal("199")),
                    Addon("refreshments", "Premium Refreshments", Decimal("99")),
                    Addon("wifi", "Mobile WiFi", Decimal("49")),
                ),
                allowed_durations=(1, 2, 3, 4, 6, 8),
            ),
        }
        return PricingCatalog(currency=currency or Currency.aed(), rule_sets=rule_sets)
