"""Lambda ハンドラから使う依存関係の組み立て

各関数は初回呼び出し時に生成し、同じ実行環境の中で再利用する。
"""

from datetime import timedelta
from functools import cache

from charter.availability.domain import SlotAvailabilityResolver
from charter.availability.infrastructure.dynamodb_reservation_store import (
    DynamoDBReservationStore,
)
from charter.booking.applications.booking_workflow import BookingWorkflow
from charter.booking.applications.checkout import CheckoutService
from charter.booking.domain import ConfirmedBookingFactory, StepValidator
from charter.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from charter.booking.infrastructure.dynamodb_session_store import DynamoDBSessionStore
from charter.fleet.infrastructure.dynamodb_asset_repository import (
    DynamoDBAssetRepository,
)
from charter.payment.applications.cancel_booking import CancelBookingService
from charter.payment.applications.payment_ledger import PaymentLedgerService
from charter.payment.domain import DepositPolicy, RefundPolicy, RefundPolicyType
from charter.payment.infrastructure.dynamodb_payment_repository import (
    DynamoDBPaymentRepository,
)
from charter.payment.infrastructure.lambda_payment_gateway import LambdaPaymentGateway
from charter.pricing.domain import PricingCatalogFactory, PricingEngine
from charter.shared.domain import Currency
from charter.shared.settings import Settings, load_settings
from charter.shared.utils import Clock, business_clock


@cache
def settings() -> Settings:
    return load_settings()


@cache
def clock() -> Clock:
    return business_clock(settings().business_timezone)


@cache
def asset_repository() -> DynamoDBAssetRepository:
    return DynamoDBAssetRepository(settings().table_name)


@cache
def reservation_store() -> DynamoDBReservationStore:
    return DynamoDBReservationStore(settings().table_name)


@cache
def booking_repository() -> DynamoDBBookingRepository:
    return DynamoDBBookingRepository(settings().table_name)


@cache
def payment_repository() -> DynamoDBPaymentRepository:
    return DynamoDBPaymentRepository(settings().table_name)


@cache
def pricing_engine() -> PricingEngine:
    catalog = PricingCatalogFactory().create_default(Currency(settings().currency))
    return PricingEngine(catalog)


@cache
def slot_resolver() -> SlotAvailabilityResolver:
    return SlotAvailabilityResolver(
        asset_repository=asset_repository(),
        reservation_store=reservation_store(),
        clock=clock(),
    )


@cache
def booking_workflow() -> BookingWorkflow:
    return BookingWorkflow(
        asset_repository=asset_repository(),
        validator=StepValidator(slot_resolver(), pricing_engine()),
        pricing_engine=pricing_engine(),
        session_store=DynamoDBSessionStore(settings().table_name),
        clock=clock(),
        draft_timeout=timedelta(minutes=settings().draft_timeout_minutes),
    )


@cache
def payment_ledger() -> PaymentLedgerService:
    config = settings()
    return PaymentLedgerService(
        booking_repository=booking_repository(),
        payment_repository=payment_repository(),
        deposit_policy=DepositPolicy(
            deposit_percentage=config.deposit_percentage,
            grace_hours=config.deposit_grace_hours,
            balance_due_hours=config.balance_due_hours,
        ),
        clock=clock(),
    )


@cache
def checkout_service() -> CheckoutService:
    return CheckoutService(
        workflow=booking_workflow(),
        pricing_engine=pricing_engine(),
        reservation_store=reservation_store(),
        payment_gateway=LambdaPaymentGateway(settings().payment_provider_function),
        booking_repository=booking_repository(),
        ledger=payment_ledger(),
        factory=ConfirmedBookingFactory(),
        clock=clock(),
    )


@cache
def cancel_booking_service() -> CancelBookingService:
    config = settings()
    return CancelBookingService(
        booking_repository=booking_repository(),
        payment_repository=payment_repository(),
        reservation_store=reservation_store(),
        refund_policy=RefundPolicy(
            type=RefundPolicyType(config.refund_policy_type),
            deadline_hours=config.refund_deadline_hours,
            percentage=config.refund_percentage,
        ),
    )
