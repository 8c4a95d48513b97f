import os
from datetime import datetime

import boto3
from botocore.exceptions import ClientError

from charter.booking.domain import DraftId, SessionStore
from charter.shared.domain import CollaboratorUnavailableException


class DynamoDBSessionStore(SessionStore):
    """DynamoDB を使用した SessionStore の具象実装

    DRAFT#<draft_id> / SNAPSHOT に保存し、expires_at を TTL 属性にする。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, draft_id: DraftId, snapshot: dict, expires_at: datetime) -> None:
        item = {
            "PK": f"DRAFT#{draft_id}",
            "SK": "SNAPSHOT",
            "entity_type": "DRAFT",
            "snapshot": snapshot,
            "expires_at": int(expires_at.timestamp()),
        }
        try:
            self.table.put_item(Item=item)
        except ClientError as e:
            raise CollaboratorUnavailableException("session-store", str(e)) from e

    def load(self, draft_id: DraftId) -> dict | None:
        try:
            response = self.table.get_item(
                Key={"PK": f"DRAFT#{draft_id}", "SK": "SNAPSHOT"},
                ConsistentRead=True,
            )
        except ClientError as e:
            raise CollaboratorUnavailableException("session-store", str(e)) from e
        item = response.get("Item")
        if not item:
            return None
        return dict(item["snapshot"])

    def discard(self, draft_id: DraftId) -> None:
        try:
            self.table.delete_item(Key={"PK": f"DRAFT#{draft_id}", "SK": "SNAPSHOT"})
        except ClientError as e:
            raise CollaboratorUnavailableException("session-store", str(e)) from e
