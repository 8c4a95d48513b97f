from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from charter.shared.domain import Currency
from charter.shared.utils import to_decimal


class PaymentCallbackRequest(BaseModel):
    """決済プロバイダからの結果通知モデル"""

    booking_id: str = Field(..., min_length=1)
    transaction_id: str = Field(..., min_length=1)
    amount: Decimal = Field(
        ...,
        gt=0,
        description="決済金額（0より大きい値）",
    )
    currency: str = Field(
        default="AED",
        pattern="^[A-Z]{3}$",
        description="通貨コード（ISO 4217）",
    )
    method: str = Field(default="card", min_length=1)
    status: Literal["succeeded", "failed"] = "succeeded"

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return to_decimal(v)

    @field_validator("currency")
    @classmethod
    def check_supported_currency(cls, v: str) -> str:
        return str(Currency(v))
