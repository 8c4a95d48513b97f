import os
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from charter.shared.utils.validators import to_decimal


class Settings(BaseModel):
    """実行時設定（環境変数から読み込む）

    デポジット率は本設定のみを正とし、コード中に固定値を持たない。
    """

    table_name: str | None = Field(default=None, description="DynamoDB テーブル名")
    currency: str = Field(default="AED", pattern="^[A-Z]{3}$")
    business_timezone: str = Field(default="Asia/Dubai")

    deposit_percentage: Decimal = Field(default=Decimal("20"), ge=0, le=100)
    deposit_grace_hours: int = Field(default=24, ge=0)
    balance_due_hours: int = Field(default=48, ge=0)

    refund_policy_type: str = Field(
        default="flexible", pattern="^(flexible|moderate|strict)$"
    )
    refund_deadline_hours: int = Field(default=24, ge=0)
    refund_percentage: Decimal = Field(default=Decimal("90"), ge=0, le=100)

    draft_timeout_minutes: int = Field(default=30, gt=0)
    payment_provider_function: str | None = None

    @field_validator("deposit_percentage", "refund_percentage", mode="before")
    @classmethod
    def convert_to_decimal(cls, v: object) -> Decimal:
        return to_decimal(v)


_ENV_VARS = {
    "table_name": "TABLE_NAME",
    "currency": "CURRENCY",
    "business_timezone": "BUSINESS_TIMEZONE",
    "deposit_percentage": "DEPOSIT_PERCENTAGE",
    "deposit_grace_hours": "DEPOSIT_GRACE_HOURS",
    "balance_due_hours": "BALANCE_DUE_HOURS",
    "refund_policy_type": "REFUND_POLICY_TYPE",
    "refund_deadline_hours": "REFUND_DEADLINE_HOURS",
    "refund_percentage": "REFUND_PERCENTAGE",
    "draft_timeout_minutes": "DRAFT_TIMEOUT_MINUTES",
    "payment_provider_function": "PAYMENT_PROVIDER_FUNCTION",
}


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """環境変数から Settings を組み立てる（未設定の項目は既定値）"""
    source = os.environ if environ is None else environ
    values = {
        field: source[env_name]
        for field, env_name in _ENV_VARS.items()
        if source.get(env_name)
    }
    return Settings.model_validate(values)
