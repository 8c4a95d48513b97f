from datetime import datetime
from decimal import Decimal

from charter.payment.domain.enum import RefundPolicyType
from charter.payment.domain.value_object import RefundPolicy
from charter.shared.domain import Money

SECONDS_PER_HOUR = Decimal("3600")


def hours_until(service_start: datetime, at: datetime) -> Decimal:
    """at からサービス開始までの時間数（開始後は負）"""
    seconds = Decimal(str((service_start - at).total_seconds()))
    return seconds / SECONDS_PER_HOUR


def calculate_refund(
    policy: RefundPolicy, paid_amount: Money, hours_until_service: Decimal
) -> Money:
    """返金額を算出する

    - 期限（サービス開始の deadline_hours 時間前）を過ぎたら 0
    - flexible: 全額 / moderate: 設定の割合 / strict: 0
    """
    if hours_until_service < policy.deadline_hours:
        return Money.zero(paid_amount.currency)
    if policy.type == RefundPolicyType.FLEXIBLE:
        return paid_amount
    if policy.type == RefundPolicyType.MODERATE:
        return paid_amount.percentage(policy.percentage)
    return Money.zero(paid_amount.currency)
