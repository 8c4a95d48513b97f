from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from charter import composition
from charter.booking.domain import BookingId
from charter.payment.handlers.request_models import PaymentCallbackRequest
from charter.payment.handlers.response_models import to_record_response
from charter.shared.domain import Currency, DomainException, Money
from charter.shared.utils import api_response, error_response, validation_error_response

logger = Logger()

ledger = composition.payment_ledger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """決済結果通知 Lambda Handler（同じ transaction_id の再送は1回だけ計上）

    POST /payments/callback
    """
    try:
        request = PaymentCallbackRequest.model_validate_json(event.body or "{}")
    except ValidationError as e:
        return validation_error_response(e)

    logger.info(
        "Received payment callback",
        extra={
            "booking_id": request.booking_id,
            "transaction_id": request.transaction_id,
            "provider_status": request.status,
        },
    )
    if request.status != "succeeded":
        return api_response(200, {"status": "ignored", "reason": "payment not succeeded"})

    try:
        record = ledger.record_payment(
            booking_id=BookingId(value=request.booking_id),
            amount=Money(amount=request.amount, currency=Currency(request.currency)),
            method=request.method,
            transaction_id=request.transaction_id,
        )
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to record payment")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_record_response(record))
