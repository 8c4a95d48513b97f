from datetime import date, timedelta

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

MAX_RANGE_DAYS = 90

clock = composition.clock()
resolver = composition.slot_resolver()


def _date_range(query: dict[str, str]) -> list[date]:
    """from / days クエリから日付範囲を作る（既定は今日から 30 日）"""
    try:
        start = date.fromisoformat(query["from"]) if query.get("from") else clock().date()
        days = int(query.get("days", "30"))
    except ValueError as e:
        raise InvalidInputException.for_field("from", str(e)) from e
    if not 1 <= days <= MAX_RANGE_DAYS:
        raise InvalidInputException.for_field(
            "days", f"days must be between 1 and {MAX_RANGE_DAYS}"
        )
    return [start + timedelta(days=offset) for offset in range(days)]


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """満枠日一覧取得 Lambda Handler

    GET /assets/{asset_id}/blocked-dates?from=YYYY-MM-DD&days=30
    """
    path_params = event.path_parameters or {}
    try:
        asset_id = AssetId(value=path_params.get("asset_id", ""))
    except ValueError:
        return api_response(400, {"message": "asset_id is required"})

    try:
        days = _date_range(event.query_string_parameters or {})
        blocked = resolver.get_blocked_dates(asset_id, days)
    except DomainException as e:
        return error_response(e)
    except Exception:
        logger.exception("Failed to list blocked dates")
        return api_response(500, {"message": "Internal server error"})

    return api_response(
        200,
        {
            "status": "success",
            "data": {
                "asset_id": str(asset_id),
                "blocked_dates": [day.isoformat() for day in blocked],
            },
        },
    )
