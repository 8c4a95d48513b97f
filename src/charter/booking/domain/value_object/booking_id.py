from __future__ import annotations

from dataclasses import dataclass

from .draft_id import DraftId


@dataclass(frozen=True)
class BookingId:
    """確定予約ID

    例: "booking_for_3f2a..."
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("BookingId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_draft_id(cls, draft_id: DraftId) -> BookingId:
        """DraftId から冪等な BookingId を生成（同じドラフトの再試行は同じ予約になる）"""
        return cls(value=f"booking_for_{draft_id}")
