from .payment_gateway import CaptureResult as CaptureResult
from .payment_gateway import PaymentGateway as PaymentGateway
