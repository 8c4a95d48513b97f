from dataclasses import replace
from decimal import Decimal

import pytest

from charter.fleet.domain import AssetCategory
from charter.pricing.domain import (
    Addon,
    PricingCatalog,
    PricingCatalogFactory,
    PricingRuleSet,
    PricingRulesNotConfiguredException,
)
from charter.shared.domain import Currency


class TestPricingCatalogFactory:
    def test_default_catalog_covers_every_category(self):
        catalog = PricingCatalogFactory().create_default()

        assert set(catalog.rule_sets) == set(AssetCategory)
        assert catalog.currency == Currency.aed()

    def test_default_guest_ceilings(self):
        catalog = PricingCatalogFactory().create_default()

        assert catalog.rule_set_for(AssetCategory.YACHT).max_guests == 30
        assert catalog.rule_set_for(AssetCategory.HELICOPTER).max_guests == 15
        assert catalog.rule_set_for(AssetCategory.PRIVATE_JET).max_guests == 15
        assert catalog.rule_set_for(AssetCategory.LUXURY_CAR).max_guests == 4

    def test_default_addons_per_category(self):
        catalog = PricingCatalogFactory().create_default()

        assert catalog.rule_set_for(AssetCategory.HELICOPTER).addon_ids == (
            "photo",
            "champagne",
            "pickup",
        )
        assert catalog.rule_set_for(AssetCategory.LUXURY_CAR).find_addon(
            "chauffeur"
        ).price == Decimal("199")


class TestPricingCatalog:
    def test_rule_sets_cannot_be_mutated(self):
        catalog = PricingCatalogFactory().create_default()

        with pytest.raises(TypeError):
            catalog.rule_sets[AssetCategory.YACHT] = None

    def test_source_mapping_changes_do_not_leak_into_catalog(self):
        rules = PricingCatalogFactory().create_default().rule_sets
        source = {AssetCategory.YACHT: rules[AssetCategory.YACHT]}
        catalog = PricingCatalog(currency=Currency.aed(), rule_sets=source)

        source[AssetCategory.HELICOPTER] = rules[AssetCategory.HELICOPTER]

        assert AssetCategory.HELICOPTER not in catalog.rule_sets

    def test_missing_category_raises_not_found(self):
        catalog = PricingCatalog(currency=Currency.aed(), rule_sets={})

        with pytest.raises(
            PricingRulesNotConfiguredException,
            match="No pricing rules configured for yacht",
        ) as exc:
            catalog.rule_set_for(AssetCategory.YACHT)

        assert exc.value.error_code == "PRICING_RULES_NOT_CONFIGURED"
        assert exc.value.category == "yacht"

    def test_with_rule_set_returns_new_catalog(self):
        catalog = PricingCatalogFactory().create_default()
        yacht = catalog.rule_set_for(AssetCategory.YACHT)

        updated = catalog.with_rule_set(
            AssetCategory.YACHT, replace(yacht, base_price=Decimal("6000"))
        )

        assert updated.rule_set_for(AssetCategory.YACHT).base_price == Decimal("6000")
        assert catalog.rule_set_for(AssetCategory.YACHT).base_price == Decimal("5000")
        assert updated.rule_set_for(AssetCategory.HELICOPTER) == catalog.rule_set_for(
            AssetCategory.HELICOPTER
        )


class TestPricingRuleSet:
    def test_duplicate_addon_ids_are_rejected(self):
        with pytest.raises(ValueError, match="Duplicate addon ids"):
            PricingRuleSet(
                base_price=Decimal("1"),
                hourly_rate=Decimal("1"),
                peak_season_multiplier=Decimal("1"),
                weekend_multiplier=Decimal("1"),
                guest_rate=Decimal("1"),
                max_guests=1,
                addons=(Addon("a", "A", Decimal("1")), Addon("a", "A2", Decimal("2"))),
            )

    def test_non_positive_multiplier_is_rejected(self):
        with pytest.raises(ValueError, match="Multipliers must be positive"):
            PricingRuleSet(
                base_price=Decimal("1"),
                hourly_rate=Decimal("1"),
                peak_season_multiplier=Decimal("0"),
                weekend_multiplier=Decimal("1"),
                guest_rate=Decimal("1"),
                max_guests=1,
            )
