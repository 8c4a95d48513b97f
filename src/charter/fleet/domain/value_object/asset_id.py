from dataclasses import dataclass


@dataclass(frozen=True)
class AssetId:
    """機体ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("AssetId cannot be empty")

    def __str__(self) -> str:
        return self.value
