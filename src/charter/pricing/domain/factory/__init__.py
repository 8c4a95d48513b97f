from .pricing_catalog_factory import PricingCatalogFactory as PricingCatalogFactory
