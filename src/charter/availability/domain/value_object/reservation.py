from dataclasses import dataclass

from .reservation_window import ReservationWindow


@dataclass(frozen=True)
class Reservation:
    """予約ストアに確保済みの時間帯

    reference は確定予約のID。
    """

    reference: str
    window: ReservationWindow
