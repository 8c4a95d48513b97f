from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class DraftId:
    """予約ドラフトID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("DraftId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> DraftId:
        return cls(value=str(uuid.uuid4()))
