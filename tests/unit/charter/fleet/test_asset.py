from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import ClientError

from charter.fleet.domain import AssetCategory, AssetId
from charter.fleet.infrastructure.dynamodb_asset_repository import DynamoDBAssetRepository
from charter.shared.domain import CollaboratorUnavailableException, Money


@pytest.fixture
def asset_table():
    with patch("charter.fleet.infrastructure.dynamodb_asset_repository.boto3") as mock_boto3:
        mock_table = MagicMock()
        mock_boto3.resource.return_value.Table.return_value = mock_table
        yield mock_table


class TestAsset:
    def test_daily_rate_defaults_to_24_hours(self, create_asset):
        asset = create_asset(hourly_rate=Decimal("1000"))

        assert asset.daily_rate == Money.aed(24000)

    def test_capacity_must_be_positive(self, create_asset):
        with pytest.raises(ValueError):
            create_asset(max_capacity=0)


class TestDynamoDBAssetRepository:
    def test_find_by_id(self, asset_table):
        asset_table.get_item.return_value = {
            "Item": {
                "PK": "ASSET#heli-bell-407",
                "SK": "PROFILE",
                "asset_id": "heli-bell-407",
                "category": "helicopter",
                "hourly_rate": Decimal("3000"),
                "max_capacity": Decimal("6"),
                "is_active": True,
            }
        }
        repository = DynamoDBAssetRepository(table_name="charter-test")

        asset = repository.find_by_id(AssetId(value="heli-bell-407"))

        assert asset.id == AssetId(value="heli-bell-407")
        assert asset.category == AssetCategory.HELICOPTER
        assert asset.hourly_rate == Money.aed(3000)
        assert asset.max_capacity == 6
        asset_table.get_item.assert_called_once_with(
            Key={"PK": "ASSET#heli-bell-407", "SK": "PROFILE"}
        )

    def test_find_by_id_not_found(self, asset_table):
        asset_table.get_item.return_value = {}
        repository = DynamoDBAssetRepository(table_name="charter-test")

        assert repository.find_by_id(AssetId(value="missing")) is None

    def test_lookup_failure_means_unavailable(self, asset_table):
        asset_table.get_item.side_effect = ClientError(
            {"Error": {"Code": "InternalServerError", "Message": "boom"}}, "GetItem"
        )
        repository = DynamoDBAssetRepository(table_name="charter-test")

        with pytest.raises(CollaboratorUnavailableException, match="asset-lookup"):
            repository.find_by_id(AssetId(value="heli-bell-407"))
