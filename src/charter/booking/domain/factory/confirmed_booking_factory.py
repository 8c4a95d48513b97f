from datetime import datetime, time, tzinfo

from charter.booking.domain.entity import BookingCreated, BookingDraft, ConfirmedBooking
from charter.booking.domain.enum import BookingStatus
from charter.booking.domain.value_object import BookingId
from charter.pricing.domain import PriceBreakdown
from charter.shared.domain import InvalidInputException


class ConfirmedBookingFactory:
    """確定予約ファクトリ"""

    def create(
        self,
        draft: BookingDraft,
        price: PriceBreakdown,
        created_at: datetime,
        business_tz: tzinfo,
    ) -> ConfirmedBooking:
        """完了したドラフトから確定予約を生成する（ステータスは PENDING）"""
        if draft.day is None or draft.start_hour is None or draft.duration_hours is None:
            raise InvalidInputException.for_field(
                "date", "Date, time and duration must be chosen before checkout"
            )

        booking = ConfirmedBooking(
            id=BookingId.from_draft_id(draft.id),
            draft_id=draft.id,
            asset_id=draft.asset_id,
            category=draft.category,
            channel=draft.channel,
            contact=draft.contact,
            special_requests=draft.special_requests,
            service_start=datetime.combine(
                draft.day, time(hour=draft.start_hour), tzinfo=business_tz
            ),
            duration_hours=draft.duration_hours,
            guest_count=draft.guest_count,
            addon_ids=draft.addon_ids,
            price=price,
            created_at=created_at,
            status=BookingStatus.PENDING,
        )
        booking.add_domain_event(
            BookingCreated(booking_id=booking.id, total_price=booking.total_price)
        )
        return booking
