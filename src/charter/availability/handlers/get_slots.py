from datetime import date

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from charter import composition
from charter.fleet.domain import AssetId
from charter.shared.domain import DomainException, InvalidInputException
from charter.shared.utils import api_response, error_response

logger = Logger()

resolver = composition.slot_resolver()


def _parse_date(value: str | None) -> date:
    if not value:
        raise InvalidInputException.for_field("date", "date is required")
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise InvalidInputException.for_field("date", f"Invalid date: {value}") from e


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """空き枠一覧取得 Lambda Handler

    GET /assets/{asset_id}/slots?date=YYYY-MM-DD
    """
    path_params = event.path_parameters or {}
    query = event.query_string_parameters or {}

    try:
        asset_id = AssetId(value=path_params.get("asset_id", ""))
    except ValueError:
        return api_response(400, {"message": "asset_id is required"})

    logger.info("Listing slots", extra={"asset_id": str(asset_id), "date": query.get("date")})

    try:
        day = _parse_date(query.get("date"))
        slots = resolver.get_available_slots(asset_id, day)
    except DomainException as e:
        logger.info("Slot lookup rejected", extra={"error_code": e.error_code})
        return error_response(e)
    except Exception:
        logger.exception("Failed to list slots")
        return api_response(500, {"message": "Internal server error"})

    return api_response(
        200,
        {
            "status": "success",
            "data": {
                "asset_id": str(asset_id),
                "date": day.isoformat(),
                "slots": [
                    {
                        "start_hour": slot.start_hour,
                        "label": slot.label,
                        "is_available": slot.is_available,
                    }
                    for slot in slots
                ],
            },
        },
    )
