from .booking_channel import BookingChannel as BookingChannel
from .booking_status import BookingStatus as BookingStatus
from .workflow_step import WorkflowStep as WorkflowStep
