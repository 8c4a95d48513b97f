import os
from datetime import datetime
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from charter.booking.domain import BookingId
from charter.payment.domain import PaymentId, PaymentRecord, PaymentRepository, PaymentStatus
from charter.shared.domain import (
    CollaboratorUnavailableException,
    Currency,
    DuplicateResourceException,
    Money,
)


class DynamoDBPaymentRepository(PaymentRepository):
    """DynamoDB を使用した PaymentRepository の具象実装

    BOOKING#<booking_id> / PAYMENT#<payment_id> に追記する（更新しない）。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, record: PaymentRecord) -> None:
        """支払い記録を保存する（同じIDがあれば DuplicateResourceException）"""
        item = {
            "PK": f"BOOKING#{record.booking_id}",
            "SK": f"PAYMENT#{record.id}",
            "entity_type": "PAYMENT",
            "payment_id": str(record.id),
            "booking_id": str(record.booking_id),
            "amount": str(record.amount.amount),
            "currency": str(record.amount.currency),
            "method": record.method,
            "recorded_at": record.recorded_at.isoformat(),
            "status": record.status.value,
        }
        if record.transaction_id is not None:
            item["transaction_id"] = record.transaction_id
        if record.refunded_payment_id is not None:
            item["refunded_payment_id"] = str(record.refunded_payment_id)
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Payment already exists: {record.id}")
            raise CollaboratorUnavailableException("payment-ledger", str(e)) from e

    def find_by_id(self, payment_id: PaymentId) -> PaymentRecord | None:
        """支払いIDで検索"""
        try:
            response = self.table.scan(
                FilterExpression=Attr("payment_id").eq(str(payment_id)),
                ConsistentRead=True,
            )
        except ClientError as e:
            raise CollaboratorUnavailableException("payment-ledger", str(e)) from e
        items = response.get("Items", [])
        if not items:
            return None
        return self._to_entity(items[0])

    def find_by_booking_id(self, booking_id: BookingId) -> list[PaymentRecord]:
        try:
            response = self.table.query(
                KeyConditionExpression=Key("PK").eq(f"BOOKING#{booking_id}")
                & Key("SK").begins_with("PAYMENT#"),
                ConsistentRead=True,
            )
        except ClientError as e:
            raise CollaboratorUnavailableException("payment-ledger", str(e)) from e
        records = [self._to_entity(item) for item in response.get("Items", [])]
        return sorted(records, key=lambda r: r.recorded_at)

    def _to_entity(self, item: dict) -> PaymentRecord:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        refunded_payment_id = item.get("refunded_payment_id")
        return PaymentRecord(
            id=PaymentId(value=item["payment_id"]),
            booking_id=BookingId(value=item["booking_id"]),
            amount=Money(
                amount=Decimal(item["amount"]),
                currency=Currency(item["currency"]),
            ),
            method=item["method"],
            recorded_at=datetime.fromisoformat(item["recorded_at"]),
            status=PaymentStatus(item["status"]),
            transaction_id=item.get("transaction_id"),
            refunded_payment_id=(
                PaymentId(value=refunded_payment_id) if refunded_payment_id else None
            ),
        )
