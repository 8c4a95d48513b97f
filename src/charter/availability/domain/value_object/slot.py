from dataclasses import dataclass


@dataclass(frozen=True)
class Slot:
    """1時間単位の開始枠（リクエストごとに算出する）"""

    start_hour: int
    is_available: bool

    def __post_init__(self) -> None:
        if not 0 <= self.start_hour <= 23:
            raise ValueError(f"Invalid start hour: {self.start_hour}")

    @property
    def label(self) -> str:
        return f"{self.start_hour:02d}:00"
