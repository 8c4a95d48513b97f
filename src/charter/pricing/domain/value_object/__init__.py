from .addon import Addon as Addon
from .price_breakdown import PriceBreakdown as PriceBreakdown
from .price_breakdown import PriceLine as PriceLine
from .pricing_catalog import PricingCatalog as PricingCatalog
from .pricing_rule_set import PricingRuleSet as PricingRuleSet
