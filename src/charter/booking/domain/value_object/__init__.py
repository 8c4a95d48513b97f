from .booking_id import BookingId as BookingId
from .draft_id import DraftId as DraftId
from .passenger_contact import PassengerContact as PassengerContact
