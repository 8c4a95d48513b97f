from __future__ import annotations

from pydantic import BaseModel

from charter.booking.domain import BookingDraft, ConfirmedBooking
from charter.pricing.domain import PriceBreakdown


class PriceLineData(BaseModel):
    kind: str
    label: str
    amount: str
    multiplier: str | None = None
    addon_id: str | None = None


class PriceData(BaseModel):
    """料金明細のレスポンスモデル"""

    total: str
    currency: str
    lines: list[PriceLineData]

    @classmethod
    def from_breakdown(cls, price: PriceBreakdown) -> PriceData:
        return cls.model_validate(price.to_dict())


class DraftData(BaseModel):
    """ドラフトのレスポンスモデル"""

    draft_id: str
    asset_id: str
    category: str
    channel: str
    step: str
    first_name: str
    last_name: str
    email: str
    phone: str
    special_requests: str
    date: str | None
    start_hour: int | None
    duration_hours: int | None
    guest_count: int
    addon_ids: list[str]
    price: PriceData | None
    payment_error: str | None
    updated_at: str


class DraftResponse(BaseModel):
    status: str = "success"
    data: DraftData


class BookingData(BaseModel):
    """確定予約のレスポンスモデル"""

    booking_id: str
    draft_id: str
    asset_id: str
    category: str
    service_start: str
    duration_hours: int
    guest_count: int
    addon_ids: list[str]
    total_amount: str
    currency: str
    price: PriceData
    status: str
    created_at: str


class BookingResponse(BaseModel):
    status: str = "success"
    data: BookingData


def to_draft_response(draft: BookingDraft) -> dict:
    """BookingDraft をレスポンス辞書に変換する"""
    snapshot = draft.to_snapshot()
    return DraftResponse(
        data=DraftData(
            draft_id=snapshot["draft_id"],
            asset_id=snapshot["asset_id"],
            category=snapshot["category"],
            channel=snapshot["channel"],
            step=snapshot["step"],
            first_name=snapshot["first_name"],
            last_name=snapshot["last_name"],
            email=snapshot["email"],
            phone=snapshot["phone"],
            special_requests=snapshot["special_requests"],
            date=snapshot["date"],
            start_hour=snapshot["start_hour"],
            duration_hours=snapshot["duration_hours"],
            guest_count=snapshot["guest_count"],
            addon_ids=snapshot["addon_ids"],
            price=PriceData.from_breakdown(draft.price) if draft.price else None,
            payment_error=snapshot["payment_error"],
            updated_at=snapshot["updated_at"],
        )
    ).model_dump()


def to_booking_response(booking: ConfirmedBooking) -> dict:
    """ConfirmedBooking をレスポンス辞書に変換する"""
    return BookingResponse(
        data=BookingData(
            booking_id=str(booking.id),
            draft_id=str(booking.draft_id),
            asset_id=str(booking.asset_id),
            category=booking.category.value,
            service_start=booking.service_start.isoformat(),
            duration_hours=booking.duration_hours,
            guest_count=booking.guest_count,
            addon_ids=list(booking.addon_ids),
            total_amount=str(booking.total_price.amount),
            currency=str(booking.total_price.currency),
            price=PriceData.from_breakdown(booking.price),
            status=booking.status.value,
            created_at=booking.created_at.isoformat(),
        )
    ).model_dump()
