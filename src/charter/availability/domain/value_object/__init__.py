from .reservation import Reservation as Reservation
from .reservation_window import ReservationWindow as ReservationWindow
from .slot import Slot as Slot
