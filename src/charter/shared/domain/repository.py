from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class ReadOnlyRepository(ABC, Generic[T, ID]):
    """参照専用リポジトリ

    コアが所有しない集約（例: 機体マスタ）の参照に使う。
    """

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDで集約を検索する"""
        raise NotImplementedError


class Repository(ReadOnlyRepository[T, ID]):
    """Repository 基底クラス

    - コアが所有する集約の永続化を抽象化する
    """

    @abstractmethod
    def save(self, aggregate: T) -> None:
        """集約を新規に永続化する（既存なら DuplicateResourceException）"""
        raise NotImplementedError
