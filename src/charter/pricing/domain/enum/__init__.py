from .price_line_kind import PriceLineKind as PriceLineKind
