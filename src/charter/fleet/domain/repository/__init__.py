from .asset_repository import AssetRepository as AssetRepository
