from .asset_id import AssetId as AssetId
