from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from charter import composition
from charter.booking.domain import BookingId
from charter.payment.handlers.response_models import to_status_response
from charter.shared.domain import DomainException
from charter.shared.utils import api_response, error_response

logger = Logger()

ledger = composition.payment_ledger()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """支払い状況取得 Lambda Handler

    GET /bookings/{booking_id}/payment-status
    """
    booking_id = (event.path_parameters or {}).get("booking_id")
    if not booking_id:
        return api_response(400, {"message": "booking_id is required"})

    logger.info("Fetching payment status", extra={"booking_id": booking_id})

    try:
        view = ledger.get_status(BookingId(value=booking_id))
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to fetch payment status")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_status_response(view))
