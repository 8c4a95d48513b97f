from .booking_repository import BookingRepository as BookingRepository
from .session_store import SessionStore as SessionStore
