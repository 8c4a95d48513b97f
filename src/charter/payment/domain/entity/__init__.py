from .payment_record import PaymentRecord as PaymentRecord
