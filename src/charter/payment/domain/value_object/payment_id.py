from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentId:
    """支払い記録ID

    外部トランザクションIDから決定的に生成する（同じ通知は同じ記録になる）。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("PaymentId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_transaction_id(cls, transaction_id: str) -> PaymentId:
        return cls(value=f"payment_for_{transaction_id}")

    @classmethod
    def refund_of(cls, original: PaymentId) -> PaymentId:
        return cls(value=f"refund_of_{original}")
