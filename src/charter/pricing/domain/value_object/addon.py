from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Addon:
    """オプション（固定料金の追加サービス）"""

    id: str
    label: str
    price: Decimal

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Addon id cannot be empty")
        if self.price < 0:
            raise ValueError(f"Addon price cannot be negative: {self.id}")
