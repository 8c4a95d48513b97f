import os
from datetime import datetime

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from charter.booking.domain import (
    BookingChannel,
    BookingId,
    BookingRepository,
    BookingStatus,
    ConfirmedBooking,
    DraftId,
    PassengerContact,
)
from charter.fleet.domain import AssetCategory, AssetId
from charter.pricing.domain import PriceBreakdown
from charter.shared.domain import (
    CollaboratorUnavailableException,
    DuplicateResourceException,
    OptimisticLockException,
)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDB を使用した BookingRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, booking: ConfirmedBooking) -> None:
        """確定予約を保存する"""
        item = {
            "PK": f"BOOKING#{booking.id}",
            "SK": "PROFILE",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "draft_id": str(booking.draft_id),
            "asset_id": str(booking.asset_id),
            "category": booking.category.value,
            "channel": booking.channel.value,
            "first_name": booking.contact.first_name,
            "last_name": booking.contact.last_name,
            "email": booking.contact.email,
            "phone": booking.contact.phone,
            "special_requests": booking.special_requests,
            "service_start": booking.service_start.isoformat(),
            "duration_hours": booking.duration_hours,
            "guest_count": booking.guest_count,
            "addon_ids": list(booking.addon_ids),
            "price": booking.price.to_dict(),
            "total_amount": str(booking.total_price.amount),
            "currency": str(booking.total_price.currency),
            "created_at": booking.created_at.isoformat(),
            "status": booking.status.value,
            "GSI1PK": f"ASSET#{booking.asset_id}",
            "GSI1SK": f"BOOKING#{booking.service_start.isoformat()}",
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Booking already exists: {booking.id}")
            raise CollaboratorUnavailableException("booking-store", str(e)) from e

    def find_by_id(self, booking_id: BookingId) -> ConfirmedBooking | None:
        """予約IDで検索"""
        try:
            response = self.table.get_item(
                Key={"PK": f"BOOKING#{booking_id}", "SK": "PROFILE"},
                ConsistentRead=True,
            )
        except ClientError as e:
            raise CollaboratorUnavailableException("booking-store", str(e)) from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def update(
        self, booking: ConfirmedBooking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        kwargs: dict = {
            "Key": {"PK": f"BOOKING#{booking.id}", "SK": "PROFILE"},
            "UpdateExpression": "SET #status = :status, cancelled_at = :cancelled_at",
            "ExpressionAttributeNames": {"#status": "status"},
            "ExpressionAttributeValues": {
                ":status": booking.status.value,
                ":cancelled_at": (
                    booking.cancelled_at.isoformat() if booking.cancelled_at else None
                ),
            },
        }

        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("status").eq(expected_status.value)

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status}, "
                    f"booking_id={booking.id}"
                )
            raise CollaboratorUnavailableException("booking-store", str(e)) from e

    def _to_entity(self, item: dict) -> ConfirmedBooking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        cancelled_at = item.get("cancelled_at")
        return ConfirmedBooking(
            id=BookingId(value=item["booking_id"]),
            draft_id=DraftId(value=item["draft_id"]),
            asset_id=AssetId(value=item["asset_id"]),
            category=AssetCategory(item["category"]),
            channel=BookingChannel(item["channel"]),
            contact=PassengerContact(
                first_name=item["first_name"],
                last_name=item["last_name"],
                email=item["email"],
                phone=item["phone"],
            ),
            special_requests=item.get("special_requests", ""),
            service_start=datetime.fromisoformat(item["service_start"]),
            duration_hours=int(item["duration_hours"]),
            guest_count=int(item["guest_count"]),
            addon_ids=tuple(item.get("addon_ids", [])),
            price=PriceBreakdown.from_dict(item["price"]),
            created_at=datetime.fromisoformat(item["created_at"]),
            status=BookingStatus(item["status"]),
            cancelled_at=datetime.fromisoformat(cancelled_at) if cancelled_at else None,
        )
