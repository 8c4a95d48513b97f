from .booking_draft import BookingDraft as BookingDraft
from .confirmed_booking import BookingCancelled as BookingCancelled
from .confirmed_booking import BookingConfirmed as BookingConfirmed
from .confirmed_booking import BookingCreated as BookingCreated
from .confirmed_booking import ConfirmedBooking as ConfirmedBooking
