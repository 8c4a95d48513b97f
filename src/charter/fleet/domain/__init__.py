from .entity import Asset as Asset
from .enum import AssetCategory as AssetCategory
from .exceptions import AssetNotFoundException as AssetNotFoundException
from .repository import AssetRepository as AssetRepository
from .value_object import AssetId as AssetId
