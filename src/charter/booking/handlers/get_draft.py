from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from charter import composition
from charter.booking.domain import DraftId
from charter.booking.handlers.response_models import to_draft_response
from charter.shared.domain import DomainException
from charter.shared.utils import api_response, error_response

logger = Logger()

workflow = composition.booking_workflow()


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約ドラフト再開 Lambda Handler

    GET /drafts/{draft_id}
    """
    draft_id = (event.path_parameters or {}).get("draft_id")
    if not draft_id:
        return api_response(400, {"message": "draft_id is required"})

    try:
        draft = workflow.resume(DraftId(value=draft_id))
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to load draft")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_draft_response(draft))
