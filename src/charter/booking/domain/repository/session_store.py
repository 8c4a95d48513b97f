from abc import ABC, abstractmethod
from datetime import datetime

from charter.booking.domain.value_object import DraftId


class SessionStore(ABC):
    """ドラフトのスナップショットを保持するセッションストアのポート"""

    @abstractmethod
    def save(self, draft_id: DraftId, snapshot: dict, expires_at: datetime) -> None:
        pass

    @abstractmethod
    def load(self, draft_id: DraftId) -> dict | None:
        pass

    @abstractmethod
    def discard(self, draft_id: DraftId) -> None:
        pass
