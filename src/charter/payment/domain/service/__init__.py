from .refund_calculator import calculate_refund as calculate_refund
from .refund_calculator import hours_until as hours_until
from .reminder_planner import plan_reminder as plan_reminder
from .status_calculator import calculate_status as calculate_status
from .status_calculator import paid_amount_of as paid_amount_of
