from datetime import datetime

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from charter import composition
from charter.booking.domain import BookingId
from charter.payment.handlers.response_models import to_quote_response
from charter.shared.domain import DomainException, InvalidInputException, IsoDateTime
from charter.shared.utils import api_response, error_response

logger = Logger()

clock = composition.clock()
service = composition.cancel_booking_service()


def _parse_at(value: str | None) -> datetime:
    """at クエリ（ISO 8601）を読む。省略時は現在時刻"""
    if not value:
        return clock()
    try:
        return IsoDateTime.from_string(value).value
    except ValueError as e:
        raise InvalidInputException.for_field("at", str(e)) from e


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def quote_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """返金見積もり Lambda Handler

    GET /bookings/{booking_id}/cancellation-quote?at=...
    """
    booking_id = (event.path_parameters or {}).get("booking_id")
    if not booking_id:
        return api_response(400, {"message": "booking_id is required"})

    try:
        at = _parse_at((event.query_string_parameters or {}).get("at"))
        quote = service.quote_cancellation(BookingId(value=booking_id), at)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to quote cancellation")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_quote_response(quote))


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def cancel_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler

    POST /bookings/{booking_id}/cancel
    """
    booking_id = (event.path_parameters or {}).get("booking_id")
    if not booking_id:
        return api_response(400, {"message": "booking_id is required"})

    logger.info("Received cancel request", extra={"booking_id": booking_id})

    try:
        result = service.cancel(BookingId(value=booking_id), clock())
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to cancel booking")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_quote_response(result.quote))
