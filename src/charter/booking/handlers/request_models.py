import datetime as dt

from pydantic import BaseModel, Field

from charter.booking.domain import BookingChannel, WorkflowStep


class StartDraftRequest(BaseModel):
    """ドラフト開始リクエストモデル"""

    asset_id: str = Field(..., min_length=1)
    channel: BookingChannel = Field(
        default=BookingChannel.CUSTOMER,
        description="予約経路（ADMIN は当日予約可）",
    )


class DetailsInput(BaseModel):
    """Details ステップの入力"""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    special_requests: str = Field(default="", max_length=2000)


class DateTimeInput(BaseModel):
    """DateTime ステップの入力"""

    date: dt.date | None = None
    start_hour: int | None = Field(default=None, ge=0, le=23)
    duration_hours: int | None = Field(default=None, ge=1)
    guest_count: int = Field(default=1, description="代表者を含む人数")


class ExtrasInput(BaseModel):
    """Extras ステップの入力"""

    addon_ids: list[str] = Field(default_factory=list)


class SubmitStepRequest(BaseModel):
    """ステップ送信リクエストモデル

    現在のステップの入力を反映してから target_step へ移動する。
    target_step が現在のステップなら保存のみ。
    """

    target_step: WorkflowStep
    details: DetailsInput | None = None
    datetime: DateTimeInput | None = None
    extras: ExtrasInput | None = None


class CheckoutRequest(BaseModel):
    """チェックアウトリクエストモデル"""

    payment_method: str = Field(default="card", min_length=1)
