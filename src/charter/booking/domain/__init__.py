from .entity import BookingCancelled as BookingCancelled
from .entity import BookingConfirmed as BookingConfirmed
from .entity import BookingCreated as BookingCreated
from .entity import BookingDraft as BookingDraft
from .entity import ConfirmedBooking as ConfirmedBooking
from .enum import BookingChannel as BookingChannel
from .enum import BookingStatus as BookingStatus
from .enum import WorkflowStep as WorkflowStep
from .exceptions import BookingNotFoundException as BookingNotFoundException
from .exceptions import DraftExpiredException as DraftExpiredException
from .exceptions import DraftNotFoundException as DraftNotFoundException
from .exceptions import PaymentDeclinedException as PaymentDeclinedException
from .factory import ConfirmedBookingFactory as ConfirmedBookingFactory
from .repository import BookingRepository as BookingRepository
from .repository import SessionStore as SessionStore
from .service import StepValidator as StepValidator
from .value_object import BookingId as BookingId
from .value_object import DraftId as DraftId
from .value_object import PassengerContact as PassengerContact
