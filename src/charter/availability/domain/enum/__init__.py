from .reservation_result import ReservationResult as ReservationResult
