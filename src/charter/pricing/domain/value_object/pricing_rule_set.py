from dataclasses import dataclass
from decimal import Decimal

from .addon import Addon


@dataclass(frozen=True)
class PricingRuleSet:
    """カテゴリ別の料金ルール

    ゲスト上限・予約可能時間はこのルールセットを唯一の正とする。
    """

    base_price: Decimal
    hourly_rate: Decimal
    peak_season_multiplier: Decimal
    weekend_multiplier: Decimal
    guest_rate: Decimal
    max_guests: int
    addons: tuple[Addon, ...] = ()
    allowed_durations: tuple[int, ...] = (1, 2, 3, 4, 6, 8)

    def __post_init__(self) -> None:
        if self.base_price < 0 or self.hourly_rate < 0 or self.guest_rate < 0:
            raise ValueError("Prices and rates cannot be negative")
        if self.peak_season_multiplier <= 0 or self.weekend_multiplier <= 0:
            raise ValueError("Multipliers must be positive")
        if self.max_guests < 1:
            raise ValueError("max_guests must be at least 1")
        if not self.allowed_durations or min(self.allowed_durations) < 1:
            raise ValueError("allowed_durations must contain positive hours")
        ids = [addon.id for addon in self.addons]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate addon ids: {ids}")

    def find_addon(self, addon_id: str) -> Addon | None:
        for addon in self.addons:
            if addon.id == addon_id:
                return addon
        return None

    @property
    def addon_ids(self) -> tuple[str, ...]:
        return tuple(addon.id for addon in self.addons)
