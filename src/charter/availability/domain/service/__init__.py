from .slot_availability_resolver import OPERATING_HOURS as OPERATING_HOURS
from .slot_availability_resolver import (
    SlotAvailabilityResolver as SlotAvailabilityResolver,
)
