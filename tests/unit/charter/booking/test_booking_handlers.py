import json
from unittest.mock import patch

import pytest

from charter.booking.domain import PaymentDeclinedException, WorkflowStep
from charter.booking.handlers import create_booking, start_draft, submit_step
from charter.fleet.domain import AssetId


@pytest.fixture
def patched_workflow(workflow):
    with patch.object(start_draft, "workflow", workflow), patch.object(
        submit_step, "workflow", workflow
    ):
        yield workflow


class TestStartDraftHandler:
    def test_start_returns_created_draft(self, patched_workflow, api_event, lambda_context):
        event = api_event("POST", "/drafts", body={"asset_id": "yacht-azimut-68"})

        response = start_draft.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["data"]["step"] == "DETAILS"
        assert body["data"]["asset_id"] == "yacht-azimut-68"

    def test_unknown_asset_is_not_found(self, patched_workflow, api_event, lambda_context):
        event = api_event("POST", "/drafts", body={"asset_id": "missing"})

        response = start_draft.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 404

    def test_missing_asset_id_is_bad_request(
        self, patched_workflow, api_event, lambda_context
    ):
        response = start_draft.lambda_handler(api_event("POST", "/drafts", body={}), lambda_context)

        assert response["statusCode"] == 400
        assert "asset_id" in json.loads(response["body"])["details"]


class TestSubmitStepHandler:
    def _submit(self, api_event, lambda_context, draft_id, body):
        event = api_event(
            "POST",
            f"/drafts/{draft_id}/steps",
            path_parameters={"draft_id": str(draft_id)},
            body=body,
        )
        return submit_step.lambda_handler(event, lambda_context)

    def test_details_move_to_datetime(self, patched_workflow, api_event, lambda_context):
        draft = patched_workflow.start(AssetId(value="yacht-azimut-68"))

        response = self._submit(
            api_event,
            lambda_context,
            draft.id,
            {
                "target_step": "DATETIME",
                "details": {
                    "first_name": "Layla",
                    "last_name": "Haddad",
                    "email": "layla@example.com",
                    "phone": "+971500000000",
                },
            },
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"]["step"] == "DATETIME"

    def test_field_errors_are_returned(self, patched_workflow, api_event, lambda_context):
        draft = patched_workflow.start(AssetId(value="yacht-azimut-68"))

        response = self._submit(
            api_event,
            lambda_context,
            draft.id,
            {"target_step": "DATETIME", "details": {"first_name": "Layla", "email": "bad"}},
        )

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["error_code"] == "INVALID_INPUT"
        assert body["details"]["email"] == "Invalid email format"

    def test_skipping_steps_is_a_conflict(self, patched_workflow, api_event, lambda_context):
        draft = patched_workflow.start(AssetId(value="yacht-azimut-68"))

        response = self._submit(api_event, lambda_context, draft.id, {"target_step": "PAYMENT"})

        assert response["statusCode"] == 409
        assert json.loads(response["body"])["error_code"] == "INVALID_TRANSITION"

    def test_back_returns_previous_step(
        self, patched_workflow, advance_draft, api_event, lambda_context
    ):
        draft = advance_draft(
            patched_workflow.start(AssetId(value="yacht-azimut-68")), WorkflowStep.EXTRAS
        )

        response = self._submit(api_event, lambda_context, draft.id, {"target_step": "DATETIME"})

        data = json.loads(response["body"])["data"]
        assert data["step"] == "DATETIME"
        assert data["price"] is None

    def test_unknown_draft_is_not_found(self, patched_workflow, api_event, lambda_context):
        response = self._submit(api_event, lambda_context, "missing", {"target_step": "DATETIME"})

        assert response["statusCode"] == 404


class TestCreateBookingHandler:
    def test_unexpected_error_is_internal(self, api_event, lambda_context):
        with patch.object(create_booking, "service") as service:
            service.checkout.side_effect = RuntimeError("boom")
            event = api_event(
                "POST",
                "/drafts/draft-1/checkout",
                path_parameters={"draft_id": "draft-1"},
                body={"payment_method": "card"},
            )

            response = create_booking.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"]) == {"message": "Internal server error"}

    def test_declined_payment_is_payment_required(self, api_event, lambda_context):
        with patch.object(create_booking, "service") as service:
            service.checkout.side_effect = PaymentDeclinedException("Card declined")
            event = api_event(
                "POST",
                "/drafts/draft-1/checkout",
                path_parameters={"draft_id": "draft-1"},
            )

            response = create_booking.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 402
        assert json.loads(response["body"])["message"] == "Card declined"
