from .enum import ReservationResult as ReservationResult
from .exceptions import SlotNoLongerAvailableException as SlotNoLongerAvailableException
from .repository import ReservationStore as ReservationStore
from .service import OPERATING_HOURS as OPERATING_HOURS
from .service import SlotAvailabilityResolver as SlotAvailabilityResolver
from .value_object import Reservation as Reservation
from .value_object import ReservationWindow as ReservationWindow
from .value_object import Slot as Slot
