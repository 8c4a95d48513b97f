import json
from unittest.mock import patch

import pytest

from charter.availability.domain import ReservationWindow
from charter.availability.handlers import get_blocked_dates, get_slots
from charter.fleet.domain import AssetId

ASSET = AssetId(value="yacht-azimut-68")


@pytest.fixture
def patched_resolver(resolver, clock):
    with patch.object(get_slots, "resolver", resolver), patch.object(
        get_blocked_dates, "resolver", resolver
    ), patch.object(get_blocked_dates, "clock", clock):
        yield resolver


def _slots_event(api_event, query):
    return api_event(
        "GET",
        "/assets/yacht-azimut-68/slots",
        path_parameters={"asset_id": "yacht-azimut-68"},
        query=query,
    )


class TestGetSlotsHandler:
    def test_lists_slots_for_date(
        self, patched_resolver, reservation_store, api_event, lambda_context, tomorrow
    ):
        reservation_store.reserve("booking-1", ReservationWindow.for_slot(ASSET, tomorrow, 10, 2))

        response = get_slots.lambda_handler(
            _slots_event(api_event, {"date": tomorrow.isoformat()}), lambda_context
        )

        assert response["statusCode"] == 200
        slots = json.loads(response["body"])["data"]["slots"]
        assert len(slots) == 12
        assert slots[0] == {"start_hour": 8, "label": "08:00", "is_available": True}
        assert [s["start_hour"] for s in slots if not s["is_available"]] == [10, 11]

    def test_missing_date_is_bad_request(self, patched_resolver, api_event, lambda_context):
        response = get_slots.lambda_handler(_slots_event(api_event, None), lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["details"] == {"date": "date is required"}

    def test_past_date_is_bad_request(self, patched_resolver, api_event, lambda_context):
        response = get_slots.lambda_handler(
            _slots_event(api_event, {"date": "2025-06-01"}), lambda_context
        )

        assert response["statusCode"] == 400


class TestGetBlockedDatesHandler:
    def test_lists_fully_booked_dates(
        self, patched_resolver, reservation_store, api_event, lambda_context, tomorrow
    ):
        reservation_store.reserve("booking-1", ReservationWindow.for_slot(ASSET, tomorrow, 8, 12))
        event = api_event(
            "GET",
            "/assets/yacht-azimut-68/blocked-dates",
            path_parameters={"asset_id": "yacht-azimut-68"},
            query={"days": "7"},
        )

        response = get_blocked_dates.lambda_handler(event, lambda_context)

        data = json.loads(response["body"])["data"]
        assert data["blocked_dates"] == [tomorrow.isoformat()]

    def test_range_is_limited(self, patched_resolver, api_event, lambda_context):
        event = api_event(
            "GET",
            "/assets/yacht-azimut-68/blocked-dates",
            path_parameters={"asset_id": "yacht-azimut-68"},
            query={"days": "91"},
        )

        response = get_blocked_dates.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
