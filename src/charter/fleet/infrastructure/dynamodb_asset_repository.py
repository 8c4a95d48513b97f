import os
from decimal import Decimal

import boto3
from botocore.exceptions import ClientError

from charter.fleet.domain import Asset, AssetCategory, AssetId, AssetRepository
from charter.shared.domain import CollaboratorUnavailableException, Currency, Money


class DynamoDBAssetRepository(AssetRepository):
    """DynamoDB を使用した AssetRepository の具象実装

    フリート管理が書き込んだ ASSET#<id> / PROFILE アイテムを読む。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, asset_id: AssetId) -> Asset | None:
        """機体IDで検索"""
        try:
            response = self.table.get_item(
                Key={"PK": f"ASSET#{asset_id}", "SK": "PROFILE"},
            )
        except ClientError as e:
            raise CollaboratorUnavailableException("asset-lookup", str(e)) from e
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> Asset:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(item.get("currency", "AED"))
        daily_rate = item.get("daily_rate")
        return Asset(
            id=AssetId(value=item["asset_id"]),
            category=AssetCategory(item["category"]),
            hourly_rate=Money(amount=Decimal(str(item["hourly_rate"])), currency=currency),
            daily_rate=(
                Money(amount=Decimal(str(daily_rate)), currency=currency)
                if daily_rate is not None
                else None
            ),
            max_capacity=int(item["max_capacity"]),
            is_active=bool(item.get("is_active", True)),
        )
