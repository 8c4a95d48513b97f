from datetime import date, datetime
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from charter.availability.domain import ReservationResult, ReservationWindow
from charter.availability.infrastructure.dynamodb_reservation_store import (
    DynamoDBReservationStore,
)
from charter.fleet.domain import AssetId
from charter.shared.domain import CollaboratorUnavailableException

ASSET = AssetId(value="yacht-1")
WINDOW = ReservationWindow.for_slot(ASSET, date(2025, 6, 3), 10, 2)


def _client_error(code: str, operation: str = "TransactWriteItems") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture
def table():
    with patch(
        "charter.availability.infrastructure.dynamodb_reservation_store.boto3"
    ) as mock_boto3:
        mock_table = MagicMock()
        mock_boto3.resource.return_value.Table.return_value = mock_table
        yield mock_table


@pytest.fixture
def store(table):
    return DynamoDBReservationStore(table_name="charter-test")


class TestReserve:
    def test_writes_one_conditional_item_per_hour(self, store, table):
        result = store.reserve("booking-1", WINDOW)

        assert result == ReservationResult.SUCCESS
        items = table.meta.client.transact_write_items.call_args.kwargs["TransactItems"]
        keys = [(i["Put"]["Item"]["PK"], i["Put"]["Item"]["SK"]) for i in items]
        assert keys == [
            ("RESERVATION#booking-1", "WINDOW"),
            ("ASSET#yacht-1", "HOUR#2025-06-03T10"),
            ("ASSET#yacht-1", "HOUR#2025-06-03T11"),
        ]
        assert all(
            i["Put"]["ConditionExpression"] == "attribute_not_exists(PK)" for i in items
        )

    def test_cancelled_transaction_is_a_conflict(self, store, table):
        table.meta.client.transact_write_items.side_effect = _client_error(
            "TransactionCanceledException"
        )
        table.get_item.return_value = {}

        assert store.reserve("booking-2", WINDOW) == ReservationResult.CONFLICT

    def test_retry_of_same_reservation_succeeds(self, store, table):
        table.meta.client.transact_write_items.side_effect = _client_error(
            "TransactionCanceledException"
        )
        table.get_item.return_value = {
            "Item": {
                "reference": "booking-1",
                "asset_id": "yacht-1",
                "window_start": "2025-06-03T10:00:00",
                "window_end": "2025-06-03T12:00:00",
            }
        }

        assert store.reserve("booking-1", WINDOW) == ReservationResult.SUCCESS

    def test_other_errors_mean_store_unavailable(self, store, table):
        table.meta.client.transact_write_items.side_effect = _client_error(
            "ProvisionedThroughputExceededException"
        )

        with pytest.raises(CollaboratorUnavailableException, match="reservation-store"):
            store.reserve("booking-1", WINDOW)


class TestFindOverlapping:
    def test_groups_hour_cells_by_reference(self, store, table):
        cell = {
            "reference": "booking-1",
            "asset_id": "yacht-1",
            "window_start": "2025-06-03T09:00:00",
            "window_end": "2025-06-03T11:00:00",
        }
        table.query.return_value = {"Items": [cell, dict(cell)]}

        reservations = store.find_overlapping(WINDOW)

        assert len(reservations) == 1
        assert reservations[0].reference == "booking-1"
        assert reservations[0].window.start == datetime(2025, 6, 3, 9)
        assert table.query.call_args.kwargs["ConsistentRead"] is True


class TestRelease:
    def test_deletes_header_and_hour_cells(self, store, table):
        table.get_item.return_value = {
            "Item": {
                "reference": "booking-1",
                "asset_id": "yacht-1",
                "window_start": "2025-06-03T10:00:00",
                "window_end": "2025-06-03T12:00:00",
            }
        }

        store.release("booking-1")

        items = table.meta.client.transact_write_items.call_args.kwargs["TransactItems"]
        assert [i["Delete"]["Key"]["SK"] for i in items] == [
            "WINDOW",
            "HOUR#2025-06-03T10",
            "HOUR#2025-06-03T11",
        ]

    def test_unknown_reference_is_noop(self, store, table):
        table.get_item.return_value = {}

        store.release("missing")

        table.meta.client.transact_write_items.assert_not_called()
