from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from charter.booking.domain.enum import BookingChannel, BookingStatus
from charter.booking.domain.value_object import BookingId, DraftId, PassengerContact
from charter.fleet.domain import AssetCategory, AssetId
from charter.pricing.domain import PriceBreakdown
from charter.shared.domain import (
    AggregateRoot,
    BusinessRuleViolationException,
    DomainEvent,
    Money,
)


@dataclass(frozen=True)
class BookingCreated(DomainEvent):
    booking_id: BookingId
    total_price: Money


@dataclass(frozen=True)
class BookingConfirmed(DomainEvent):
    booking_id: BookingId


@dataclass(frozen=True)
class BookingCancelled(DomainEvent):
    booking_id: BookingId
    cancelled_at: datetime


class ConfirmedBooking(AggregateRoot[BookingId]):
    """確定予約（集約ルート）

    完了したドラフトの内容は生成後に変更しない。変わるのはステータスのみ。
    """

    def __init__(
        self,
        id: BookingId,
        draft_id: DraftId,
        asset_id: AssetId,
        category: AssetCategory,
        channel: BookingChannel,
        contact: PassengerContact,
        special_requests: str,
        service_start: datetime,
        duration_hours: int,
        guest_count: int,
        addon_ids: tuple[str, ...],
        price: PriceBreakdown,
        created_at: datetime,
        status: BookingStatus = BookingStatus.PENDING,
        cancelled_at: datetime | None = None,
    ) -> None:
        super().__init__(id)
        if service_start.tzinfo is None:
            raise ValueError("service_start must be timezone-aware")
        self._draft_id = draft_id
        self._asset_id = asset_id
        self._category = category
        self._channel = channel
        self._contact = contact
        self._special_requests = special_requests
        self._service_start = service_start
        self._duration_hours = duration_hours
        self._guest_count = guest_count
        self._addon_ids = tuple(addon_ids)
        self._price = price
        self._created_at = created_at
        self._status = status
        self._cancelled_at = cancelled_at

    @property
    def draft_id(self) -> DraftId:
        return self._draft_id

    @property
    def asset_id(self) -> AssetId:
        return self._asset_id

    @property
    def category(self) -> AssetCategory:
        return self._category

    @property
    def channel(self) -> BookingChannel:
        return self._channel

    @property
    def contact(self) -> PassengerContact:
        return self._contact

    @property
    def special_requests(self) -> str:
        return self._special_requests

    @property
    def service_start(self) -> datetime:
        return self._service_start

    @property
    def service_end(self) -> datetime:
        return self._service_start + timedelta(hours=self._duration_hours)

    @property
    def duration_hours(self) -> int:
        return self._duration_hours

    @property
    def guest_count(self) -> int:
        return self._guest_count

    @property
    def addon_ids(self) -> tuple[str, ...]:
        return self._addon_ids

    @property
    def price(self) -> PriceBreakdown:
        return self._price

    @property
    def total_price(self) -> Money:
        return self._price.total

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def cancelled_at(self) -> datetime | None:
        return self._cancelled_at

    def confirm(self) -> None:
        """デポジット受領により確定する"""
        if self._status == BookingStatus.CONFIRMED:
            return
        if self._status != BookingStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot confirm booking in {self._status.value} status"
            )
        self._status = BookingStatus.CONFIRMED
        self.add_domain_event(BookingConfirmed(booking_id=self.id))

    def cancel(self, at: datetime) -> None:
        if self._status not in (BookingStatus.PENDING, BookingStatus.CONFIRMED):
            raise BusinessRuleViolationException(
                f"Cannot cancel booking in {self._status.value} status"
            )
        self._status = BookingStatus.CANCELLED
        self._cancelled_at = at
        self.add_domain_event(BookingCancelled(booking_id=self.id, cancelled_at=at))

    def complete(self) -> None:
        """サービス提供済みにする"""
        if self._status != BookingStatus.CONFIRMED:
            raise BusinessRuleViolationException(
                f"Cannot complete booking in {self._status.value} status"
            )
        self._status = BookingStatus.COMPLETED
