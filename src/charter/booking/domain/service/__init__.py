from .step_validator import MAX_ADVANCE_DAYS as MAX_ADVANCE_DAYS
from .step_validator import StepValidator as StepValidator
