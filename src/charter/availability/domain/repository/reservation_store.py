from abc import ABC, abstractmethod

from charter.availability.domain.enum import ReservationResult
from charter.availability.domain.value_object import Reservation, ReservationWindow


class ReservationStore(ABC):
    """予約ストアのポート

    reserve は「重なりの再確認 + 確保」を1つの原子的操作として行う。
    """

    @abstractmethod
    def find_overlapping(self, window: ReservationWindow) -> list[Reservation]:
        pass

    @abstractmethod
    def reserve(self, reference: str, window: ReservationWindow) -> ReservationResult:
        pass

    @abstractmethod
    def release(self, reference: str) -> None:
        """確保を解放する（存在しなければ何もしない）"""
        pass
