from abc import ABC, abstractmethod
from dataclasses import dataclass

from charter.shared.domain import Money


@dataclass(frozen=True)
class CaptureResult:
    """決済プロバイダの結果"""

    succeeded: bool
    transaction_id: str | None = None
    message: str | None = None


class PaymentGateway(ABC):
    """決済プロバイダのポート

    一時的な障害は CollaboratorUnavailableException、拒否は CaptureResult で返す。
    """

    @abstractmethod
    def capture(
        self, reference: str, amount: Money, method: str, idempotency_key: str
    ) -> CaptureResult:
        pass
