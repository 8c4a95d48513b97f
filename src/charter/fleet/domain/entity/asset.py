from decimal import Decimal

from charter.fleet.domain.enum import AssetCategory
from charter.fleet.domain.value_object import AssetId
from charter.shared.domain import Entity, Money

HOURS_PER_DAY = Decimal("24")


class Asset(Entity[AssetId]):
    """予約対象の機体（ヘリ・ヨット・高級車・プライベートジェット）

    フリート管理が所有するため、コアからは参照のみ。
    """

    def __init__(
        self,
        id: AssetId,
        category: AssetCategory,
        hourly_rate: Money,
        max_capacity: int,
        is_active: bool = True,
        daily_rate: Money | None = None,
    ) -> None:
        super().__init__(id)
        if max_capacity < 1:
            raise ValueError("Asset capacity must be at least 1")
        self._category = category
        self._hourly_rate = hourly_rate
        self._daily_rate = daily_rate
        self._max_capacity = max_capacity
        self._is_active = is_active

    @property
    def category(self) -> AssetCategory:
        return self._category

    @property
    def hourly_rate(self) -> Money:
        return self._hourly_rate

    @property
    def daily_rate(self) -> Money:
        """日額（未設定なら時間単価 x 24）"""
        if self._daily_rate is not None:
            return self._daily_rate
        return Money(
            amount=self._hourly_rate.amount * HOURS_PER_DAY,
            currency=self._hourly_rate.currency,
        )

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    @property
    def is_active(self) -> bool:
        return self._is_active
