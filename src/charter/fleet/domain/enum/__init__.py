from .asset_category import AssetCategory as AssetCategory
