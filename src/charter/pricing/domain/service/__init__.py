from .calendar_rules import is_peak_season as is_peak_season
from .calendar_rules import is_weekend as is_weekend
from .pricing_engine import PricingEngine as PricingEngine
