from __future__ import annotations

from enum import Enum


class WorkflowStep(str, Enum):
    """予約ワークフローのステップ（定義順 = 進行順）"""

    DETAILS = "DETAILS"
    DATETIME = "DATETIME"
    EXTRAS = "EXTRAS"
    PAYMENT = "PAYMENT"
    CONFIRMATION = "CONFIRMATION"

    @property
    def index(self) -> int:
        return list(WorkflowStep).index(self)

    @property
    def next(self) -> WorkflowStep | None:
        steps = list(WorkflowStep)
        return steps[self.index + 1] if self.index + 1 < len(steps) else None

    @property
    def previous(self) -> WorkflowStep | None:
        """直前のステップ（確認画面からは戻れない）"""
        if self in (WorkflowStep.DETAILS, WorkflowStep.CONFIRMATION):
            return None
        return list(WorkflowStep)[self.index - 1]

    @property
    def is_terminal(self) -> bool:
        return self == WorkflowStep.CONFIRMATION
