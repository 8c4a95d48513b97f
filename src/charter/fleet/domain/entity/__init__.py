from .asset import Asset as Asset
