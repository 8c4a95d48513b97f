from .ledger_status import LedgerStatus as LedgerStatus
from .payment_status import PaymentStatus as PaymentStatus
from .refund_policy_type import RefundPolicyType as RefundPolicyType
from .reminder_type import ReminderType as ReminderType
