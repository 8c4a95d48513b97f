import os
from datetime import datetime

import boto3
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from charter.availability.domain import (
    Reservation,
    ReservationResult,
    ReservationStore,
    ReservationWindow,
)
from charter.fleet.domain import AssetId
from charter.shared.domain import CollaboratorUnavailableException
from charter.shared.utils import get_logger

logger = get_logger("reservation-store")

HOUR_KEY_FORMAT = "%Y-%m-%dT%H"


def _hour_key(hour: datetime) -> str:
    return f"HOUR#{hour.strftime(HOUR_KEY_FORMAT)}"


class DynamoDBReservationStore(ReservationStore):
    """DynamoDB を使用した ReservationStore の具象実装

    - 占有する1時間ごとに ASSET#<id> / HOUR#<yyyy-mm-ddThh> アイテムを持つ
    - 確保は TransactWriteItems 1回（全セルに attribute_not_exists 条件）
    - RESERVATION#<reference> / WINDOW アイテムで解放対象を引く
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)
        self.client = self.table.meta.client

    def find_overlapping(self, window: ReservationWindow) -> list[Reservation]:
        hours = list(window.hours())
        try:
            response = self.table.query(
                KeyConditionExpression=Key("PK").eq(f"ASSET#{window.asset_id}")
                & Key("SK").between(_hour_key(hours[0]), _hour_key(hours[-1])),
                ConsistentRead=True,
            )
        except ClientError as e:
            raise CollaboratorUnavailableException("reservation-store", str(e)) from e

        reservations: dict[str, Reservation] = {}
        for item in response.get("Items", []):
            reference = item["reference"]
            if reference not in reservations:
                reservations[reference] = self._to_reservation(item)
        return sorted(reservations.values(), key=lambda r: r.window.start)

    def reserve(self, reference: str, window: ReservationWindow) -> ReservationResult:
        attributes = {
            "reference": reference,
            "asset_id": str(window.asset_id),
            "window_start": window.start.isoformat(),
            "window_end": window.end.isoformat(),
        }
        transact_items = [
            {
                "Put": {
                    "TableName": self.table_name,
                    "Item": {
                        "PK": f"RESERVATION#{reference}",
                        "SK": "WINDOW",
                        "entity_type": "RESERVATION",
                        **attributes,
                    },
                    "ConditionExpression": "attribute_not_exists(PK)",
                }
            }
        ]
        for hour in window.hours():
            transact_items.append(
                {
                    "Put": {
                        "TableName": self.table_name,
                        "Item": {
                            "PK": f"ASSET#{window.asset_id}",
                            "SK": _hour_key(hour),
                            "entity_type": "RESERVATION_HOUR",
                            **attributes,
                        },
                        "ConditionExpression": "attribute_not_exists(PK)",
                    }
                }
            )

        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            if e.response["Error"]["Code"] != "TransactionCanceledException":
                raise CollaboratorUnavailableException(
                    "reservation-store", str(e)
                ) from e
            if self._is_same_reservation(reference, window):
                return ReservationResult.SUCCESS
            logger.info(
                "Reservation conflict",
                extra={"reference": reference, "asset_id": str(window.asset_id)},
            )
            return ReservationResult.CONFLICT
        return ReservationResult.SUCCESS

    def release(self, reference: str) -> None:
        reservation = self._find_by_reference(reference)
        if reservation is None:
            return
        window = reservation.window
        transact_items = [
            {
                "Delete": {
                    "TableName": self.table_name,
                    "Key": {"PK": f"RESERVATION#{reference}", "SK": "WINDOW"},
                }
            }
        ]
        for hour in window.hours():
            transact_items.append(
                {
                    "Delete": {
                        "TableName": self.table_name,
                        "Key": {"PK": f"ASSET#{window.asset_id}", "SK": _hour_key(hour)},
                        "ConditionExpression": "#reference = :reference",
                        "ExpressionAttributeNames": {"#reference": "reference"},
                        "ExpressionAttributeValues": {":reference": reference},
                    }
                }
            )
        try:
            self.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            raise CollaboratorUnavailableException("reservation-store", str(e)) from e

    def _is_same_reservation(self, reference: str, window: ReservationWindow) -> bool:
        """再試行された同一予約かどうか（同じ reference・同じ時間帯）"""
        existing = self._find_by_reference(reference)
        return existing is not None and existing.window == window

    def _find_by_reference(self, reference: str) -> Reservation | None:
        try:
            response = self.table.get_item(
                Key={"PK": f"RESERVATION#{reference}", "SK": "WINDOW"},
                ConsistentRead=True,
            )
        except ClientError as e:
            raise CollaboratorUnavailableException("reservation-store", str(e)) from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_reservation(item)

    def _to_reservation(self, item: dict) -> Reservation:
        return Reservation(
            reference=item["reference"],
            window=ReservationWindow(
                asset_id=AssetId(value=item["asset_id"]),
                start=datetime.fromisoformat(item["window_start"]),
                end=datetime.fromisoformat(item["window_end"]),
            ),
        )
