from .reservation_store import ReservationStore as ReservationStore
