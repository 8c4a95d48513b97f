from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from charter import composition
from charter.booking.domain import DraftId
from charter.booking.handlers.request_models import CheckoutRequest
from charter.booking.handlers.response_models import to_booking_response
from charter.shared.domain import DomainException
from charter.shared.utils import api_response, error_response, validation_error_response

logger = Logger()

service = composition.checkout_service()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """チェックアウト（確定予約の作成）Lambda Handler

    POST /drafts/{draft_id}/checkout
    """
    draft_id = (event.path_parameters or {}).get("draft_id")
    if not draft_id:
        return api_response(400, {"message": "draft_id is required"})

    logger.info("Received checkout request", extra={"draft_id": draft_id})

    try:
        request = CheckoutRequest.model_validate_json(event.body or "{}")
        booking = service.checkout(DraftId(value=draft_id), request.payment_method)
    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        logger.info(
            "Checkout rejected",
            extra={"draft_id": draft_id, "error_code": e.error_code},
        )
        return error_response(e)
    except Exception:
        logger.exception("Failed to checkout")
        return api_response(500, {"message": "Internal server error"})

    return api_response(201, to_booking_response(booking))
