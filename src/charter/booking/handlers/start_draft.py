from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from charter import composition
from charter.booking.handlers.request_models import StartDraftRequest
from charter.booking.handlers.response_models import to_draft_response
from charter.fleet.domain import AssetId
from charter.shared.domain import DomainException
from charter.shared.utils import api_response, error_response, validation_error_response

logger = Logger()

workflow = composition.booking_workflow()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約ドラフト開始 Lambda Handler

    POST /drafts
    """
    try:
        request = StartDraftRequest.model_validate_json(event.body or "{}")
        draft = workflow.start(AssetId(value=request.asset_id), request.channel)
    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to start draft")
        return api_response(500, {"message": "Internal server error"})

    return api_response(201, to_draft_response(draft))
