from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from charter import composition
from charter.booking.domain import BookingDraft, DraftId, PassengerContact
from charter.booking.handlers.request_models import SubmitStepRequest
from charter.booking.handlers.response_models import to_draft_response
from charter.shared.domain import DomainException
from charter.shared.utils import api_response, error_response, validation_error_response

logger = Logger()

workflow = composition.booking_workflow()


def _apply_inputs(draft: BookingDraft, request: SubmitStepRequest) -> None:
    """送られてきたステップの入力をドラフトに反映する

    現在のステップ以外の入力が含まれていれば InvalidTransitionException。
    """
    if request.details is not None:
        details = request.details
        draft.update_details(
            PassengerContact(
                first_name=details.first_name,
                last_name=details.last_name,
                email=details.email,
                phone=details.phone,
            ),
            special_requests=details.special_requests,
        )
    if request.datetime is not None:
        chosen = request.datetime
        draft.choose_datetime(
            day=chosen.date,
            start_hour=chosen.start_hour,
            duration_hours=chosen.duration_hours,
            guest_count=chosen.guest_count,
        )
    if request.extras is not None:
        draft.choose_addons(request.extras.addon_ids)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """ステップ送信 / 戻る Lambda Handler

    POST /drafts/{draft_id}/steps
    """
    draft_id = (event.path_parameters or {}).get("draft_id")
    if not draft_id:
        return api_response(400, {"message": "draft_id is required"})

    try:
        request = SubmitStepRequest.model_validate_json(event.body or "{}")
        draft = workflow.resume(DraftId(value=draft_id))
        _apply_inputs(draft, request)
        if request.target_step == draft.step:
            workflow.save(draft)
        else:
            workflow.transition_to(draft, request.target_step)
    except ValidationError as e:
        return validation_error_response(e)
    except DomainException as e:
        logger.info(
            "Step submission rejected",
            extra={"draft_id": draft_id, "error_code": e.error_code},
        )
        return error_response(e)
    except Exception:
        logger.exception("Failed to submit step")
        return api_response(500, {"message": "Internal server error"})

    return api_response(200, to_draft_response(draft))
