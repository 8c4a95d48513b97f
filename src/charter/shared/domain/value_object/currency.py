from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: AED, USD, EUR, GBP
    """

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"AED", "USD", "EUR", "GBP"})

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.SUPPORTED:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.SUPPORTED))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def aed(cls) -> Currency:
        """UAE ディルハム（既定通貨）"""
        return cls("AED")

    @classmethod
    def usd(cls) -> Currency:
        """米ドル"""
        return cls("USD")
