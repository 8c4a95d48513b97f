import copy
from datetime import datetime

from charter.booking.domain import DraftId, SessionStore


class InMemorySessionStore(SessionStore):
    """メモリ上の SessionStore（テスト・ローカル実行用）"""

    def __init__(self) -> None:
        self._snapshots: dict[DraftId, dict] = {}
        self._expires_at: dict[DraftId, datetime] = {}

    def save(self, draft_id: DraftId, snapshot: dict, expires_at: datetime) -> None:
        self._snapshots[draft_id] = copy.deepcopy(snapshot)
        self._expires_at[draft_id] = expires_at

    def load(self, draft_id: DraftId) -> dict | None:
        snapshot = self._snapshots.get(draft_id)
        return copy.deepcopy(snapshot) if snapshot is not None else None

    def discard(self, draft_id: DraftId) -> None:
        self._snapshots.pop(draft_id, None)
        self._expires_at.pop(draft_id, None)

    def expires_at(self, draft_id: DraftId) -> datetime | None:
        return self._expires_at.get(draft_id)
