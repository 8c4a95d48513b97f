from charter.shared.domain import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class UnknownAddonException(BusinessRuleViolationException):
    """カテゴリのカタログに存在しないオプションが指定された"""

    error_code = "UNKNOWN_ADDON"

    def __init__(self, addon_id: str, category: str) -> None:
        super().__init__(f"Unknown addon for {category}: {addon_id}")
        self.addon_id = addon_id


class PricingRulesNotConfiguredException(ResourceNotFoundException):
    """カテゴリの料金ルールがカタログに登録されていない"""

    error_code = "PRICING_RULES_NOT_CONFIGURED"

    def __init__(self, category: str) -> None:
        super().__init__(f"No pricing rules configured for {category}")
        self.category = category
