from .entity import PaymentRecord as PaymentRecord
from .enum import LedgerStatus as LedgerStatus
from .enum import PaymentStatus as PaymentStatus
from .enum import RefundPolicyType as RefundPolicyType
from .enum import ReminderType as ReminderType
from .exceptions import AlreadySettledException as AlreadySettledException
from .exceptions import OverpaymentRejectedException as OverpaymentRejectedException
from .gateway import CaptureResult as CaptureResult
from .gateway import PaymentGateway as PaymentGateway
from .repository import PaymentRepository as PaymentRepository
from .service import calculate_refund as calculate_refund
from .service import calculate_status as calculate_status
from .service import hours_until as hours_until
from .service import paid_amount_of as paid_amount_of
from .service import plan_reminder as plan_reminder
from .value_object import DepositPolicy as DepositPolicy
from .value_object import PaymentId as PaymentId
from .value_object import PaymentReminder as PaymentReminder
from .value_object import PaymentStatusView as PaymentStatusView
from .value_object import RefundPolicy as RefundPolicy
from .value_object import RefundQuote as RefundQuote
