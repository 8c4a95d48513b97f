from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from charter.fleet.domain import AssetCategory
from charter.pricing.domain.exceptions import PricingRulesNotConfiguredException
from charter.shared.domain import Currency

from .pricing_rule_set import PricingRuleSet


@dataclass(frozen=True, eq=False)
class PricingCatalog:
    """カテゴリ -> 料金ルールの不変な設定オブジェクト

    PricingEngine の生成時に渡す。テナント別・テスト用のルールも同じ形で差し替える。
    """

    currency: Currency
    rule_sets: Mapping[AssetCategory, PricingRuleSet] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rule_sets", MappingProxyType(dict(self.rule_sets)))

    def rule_set_for(self, category: AssetCategory) -> PricingRuleSet:
        try:
            return self.rule_sets[category]
        except KeyError as e:
            raise PricingRulesNotConfiguredException(category.value) from e

    def with_rule_set(
        self, category: AssetCategory, rule_set: PricingRuleSet
    ) -> "PricingCatalog":
        """一部カテゴリだけ差し替えた新しいカタログを返す"""
        rule_sets = dict(self.rule_sets)
        rule_sets[category] = rule_set
        return PricingCatalog(currency=self.currency, rule_sets=rule_sets)
