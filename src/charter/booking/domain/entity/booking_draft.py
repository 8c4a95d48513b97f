from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from charter.booking.domain.enum import BookingChannel, WorkflowStep
from charter.booking.domain.value_object import DraftId, PassengerContact
from charter.fleet.domain import AssetCategory, AssetId
from charter.pricing.domain import PriceBreakdown
from charter.shared.domain import Entity, InvalidTransitionException


class BookingDraft(Entity[DraftId]):
    """入力途中の予約（ワークフローの状態を1つにまとめた値）

    - 各ステップの項目は、そのステップにいる間だけ編集できる
    - ステップの移動は BookingWorkflow が行う
    - 所有者は1人のため内部でロックしない
    """

    def __init__(
        self,
        id: DraftId,
        asset_id: AssetId,
        category: AssetCategory,
        channel: BookingChannel,
        updated_at: datetime,
        step: WorkflowStep = WorkflowStep.DETAILS,
        contact: PassengerContact | None = None,
        special_requests: str = "",
        day: date | None = None,
        start_hour: int | None = None,
        duration_hours: int | None = None,
        guest_count: int = 1,
        addon_ids: Iterable[str] = (),
        price: PriceBreakdown | None = None,
        payment_attempt_id: str | None = None,
        payment_error: str | None = None,
    ) -> None:
        super().__init__(id)
        self._asset_id = asset_id
        self._category = category
        self._channel = channel
        self._updated_at = updated_at
        self._step = step
        self._contact = contact or PassengerContact()
        self._special_requests = special_requests
        self._day = day
        self._start_hour = start_hour
        self._duration_hours = duration_hours
        self._guest_count = guest_count
        self._addon_ids = tuple(dict.fromkeys(addon_ids))
        self._price = price
        self._payment_attempt_id = payment_attempt_id
        self._payment_error = payment_error

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
    def step(self) -> WorkflowStep:
        return self._step

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def contact(self) -> PassengerContact:
        return self._contact

    @property
    def special_requests(self) -> str:
        return self._special_requests

    @property
    def day(self) -> date | None:
        return self._day

    @property
    def start_hour(self) -> int | None:
        return self._start_hour

    @property
    def duration_hours(self) -> int | None:
        return self._duration_hours

    @property
    def guest_count(self) -> int:
        return self._guest_count

    @property
    def addon_ids(self) -> tuple[str, ...]:
        return self._addon_ids

    @property
    def price(self) -> PriceBreakdown | None:
        return self._price

    @property
    def payment_attempt_id(self) -> str | None:
        return self._payment_attempt_id

    @property
    def payment_error(self) -> str | None:
        return self._payment_error

    # --- ステップごとの編集 ---

    def update_details(
        self, contact: PassengerContact, special_requests: str = ""
    ) -> None:
        self._require_step(WorkflowStep.DETAILS)
        self._contact = contact
        self._special_requests = special_requests

    def choose_datetime(
        self,
        day: date | None,
        start_hour: int | None,
        duration_hours: int | None,
        guest_count: int,
    ) -> None:
        self._require_step(WorkflowStep.DATETIME)
        self._day = day
        self._start_hour = start_hour
        self._duration_hours = duration_hours
        self._guest_count = guest_count

    def choose_addons(self, addon_ids: Iterable[str]) -> None:
        self._require_step(WorkflowStep.EXTRAS)
        self._addon_ids = tuple(dict.fromkeys(addon_ids))

    def start_payment_attempt(self, attempt_id: str) -> None:
        self._require_step(WorkflowStep.PAYMENT)
        self._payment_attempt_id = attempt_id
        self._payment_error = None

    def record_payment_failure(self, message: str) -> None:
        self._require_step(WorkflowStep.PAYMENT)
        self._payment_error = message

    # --- ワークフローからのみ呼ばれる操作 ---

    def move_to(self, step: WorkflowStep, at: datetime) -> None:
        self._step = step
        self._updated_at = at

    def attach_price(self, price: PriceBreakdown) -> None:
        self._price = price

    def clear_price(self) -> None:
        self._price = None

    def clear_payment_attempt(self) -> None:
        self._payment_attempt_id = None
        self._payment_error = None

    def touch(self, at: datetime) -> None:
        self._updated_at = at

    def _require_step(self, step: WorkflowStep) -> None:
        if self._step != step:
            raise InvalidTransitionException(
                f"{step.value} fields can only be edited on the {step.value} step "
                f"(current: {self._step.value})"
            )

    # --- スナップショット ---

    def to_snapshot(self) -> dict:
        """セッションストアに渡すフラットな辞書"""
        return {
            "draft_id": str(self.id),
            "asset_id": str(self._asset_id),
            "category": self._category.value,
            "channel": self._channel.value,
            "step": self._step.value,
            "updated_at": self._updated_at.isoformat(),
            "first_name": self._contact.first_name,
            "last_name": self._contact.last_name,
            "email": self._contact.email,
            "phone": self._contact.phone,
            "special_requests": self._special_requests,
            "date": self._day.isoformat() if self._day else None,
            "start_hour": self._start_hour,
            "duration_hours": self._duration_hours,
            "guest_count": self._guest_count,
            "addon_ids": list(self._addon_ids),
            "price": self._price.to_dict() if self._price else None,
            "payment_attempt_id": self._payment_attempt_id,
            "payment_error": self._payment_error,
        }

    @classmethod
    def from_snapshot(cls, snapshot: dict) -> BookingDraft:
        day = snapshot.get("date")
        price = snapshot.get("price")
        start_hour = snapshot.get("start_hour")
        duration_hours = snapshot.get("duration_hours")
        return cls(
            id=DraftId(value=snapshot["draft_id"]),
            asset_id=AssetId(value=snapshot["asset_id"]),
            category=AssetCategory(snapshot["category"]),
            channel=BookingChannel(snapshot["channel"]),
            step=WorkflowStep(snapshot["step"]),
            updated_at=datetime.fromisoformat(snapshot["updated_at"]),
            contact=PassengerContact(
                first_name=snapshot.get("first_name", ""),
                last_name=snapshot.get("last_name", ""),
                email=snapshot.get("email", ""),
                phone=snapshot.get("phone", ""),
            ),
            special_requests=snapshot.get("special_requests", ""),
            day=date.fromisoformat(day) if day else None,
            start_hour=int(start_hour) if start_hour is not None else None,
            duration_hours=int(duration_hours) if duration_hours is not None else None,
            guest_count=int(snapshot.get("guest_count", 1)),
            addon_ids=snapshot.get("addon_ids", []),
            price=PriceBreakdown.from_dict(price) if price else None,
            payment_attempt_id=snapshot.get("payment_attempt_id"),
            payment_error=snapshot.get("payment_error"),
        )
