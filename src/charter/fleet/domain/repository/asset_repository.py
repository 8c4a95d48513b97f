from abc import abstractmethod

from charter.fleet.domain.entity import Asset
from charter.fleet.domain.value_object import AssetId
from charter.shared.domain import ReadOnlyRepository


class AssetRepository(ReadOnlyRepository[Asset, AssetId]):
    """機体参照のインターフェース（フリート管理側が所有）"""

    @abstractmethod
    def find_by_id(self, asset_id: AssetId) -> Asset | None:
        """機体IDで検索する"""
        raise NotImplementedError
