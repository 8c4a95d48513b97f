from .confirmed_booking_factory import ConfirmedBookingFactory as ConfirmedBookingFactory
