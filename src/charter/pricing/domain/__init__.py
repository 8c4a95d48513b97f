from .enum import PriceLineKind as PriceLineKind
from .exceptions import (
    PricingRulesNotConfiguredException as PricingRulesNotConfiguredException,
)
from .exceptions import UnknownAddonException as UnknownAddonException
from .factory import PricingCatalogFactory as PricingCatalogFactory
from .service import PricingEngine as PricingEngine
from .service import is_peak_season as is_peak_season
from .service import is_weekend as is_weekend
from .value_object import Addon as Addon
from .value_object import PriceBreakdown as PriceBreakdown
from .value_object import PriceLine as PriceLine
from .value_object import PricingCatalog as PricingCatalog
from .value_object import PricingRuleSet as PricingRuleSet
