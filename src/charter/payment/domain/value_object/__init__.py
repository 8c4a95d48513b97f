from .deposit_policy import DepositPolicy as DepositPolicy
from .payment_id import PaymentId as PaymentId
from .payment_reminder import PaymentReminder as PaymentReminder
from .payment_status_view import PaymentStatusView as PaymentStatusView
from .refund_policy import RefundPolicy as RefundPolicy
from .refund_quote import RefundQuote as RefundQuote
