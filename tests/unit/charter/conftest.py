import json
import os
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("AWS_DEFAULT_REGION", "me-central-1")
os.environ.setdefault("TABLE_NAME", "charter-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "charter-test")

from charter.availability.domain import SlotAvailabilityResolver  # noqa: E402
from charter.availability.infrastructure.in_memory_reservation_store import (  # noqa: E402
    InMemoryReservationStore,
)
from charter.booking.domain import (  # noqa: E402
    BookingChannel,
    BookingId,
    BookingStatus,
    ConfirmedBooking,
    DraftId,
    PassengerContact,
)
from charter.booking.infrastructure.in_memory_booking_repository import (  # noqa: E402
    InMemoryBookingRepository,
)
from charter.fleet.domain import Asset, AssetCategory, AssetId  # noqa: E402
from charter.payment.applications.payment_ledger import PaymentLedgerService  # noqa: E402
from charter.payment.domain import DepositPolicy  # noqa: E402
from charter.payment.infrastructure.in_memory_payment_repository import (  # noqa: E402
    InMemoryPaymentRepository,
)
from charter.pricing.domain import (  # noqa: E402
    PriceBreakdown,
    PriceLine,
    PriceLineKind,
    PricingCatalogFactory,
    PricingEngine,
)
from charter.shared.domain import Money  # noqa: E402

# 営業地（UTC+4）
GST = timezone(timedelta(hours=4))


class FakeClock:
    """テスト用の時計（advance で進める）"""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    """2025-06-02（月曜）10:30 GST"""
    return FakeClock(datetime(2025, 6, 2, 10, 30, tzinfo=GST))


@pytest.fixture
def tomorrow(clock) -> date:
    return clock().date() + timedelta(days=1)


@pytest.fixture
def create_asset():
    """Asset を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        asset_id: str = "yacht-azimut-68",
        category: AssetCategory = AssetCategory.YACHT,
        hourly_rate: Decimal = Decimal("1000"),
        max_capacity: int = 30,
        is_active: bool = True,
    ) -> Asset:
        return Asset(
            id=AssetId(value=asset_id),
            category=category,
            hourly_rate=Money.aed(hourly_rate),
            max_capacity=max_capacity,
            is_active=is_active,
        )

    return _factory


@pytest.fixture
def asset(create_asset):
    return create_asset()


@pytest.fixture
def asset_repository(asset):
    """登録済みの機体だけを返すリポジトリのモック"""
    repository = MagicMock()
    assets = {asset.id: asset}
    repository.find_by_id.side_effect = lambda asset_id: assets.get(asset_id)
    repository.assets = assets
    return repository


@pytest.fixture
def pricing_engine():
    return PricingEngine(PricingCatalogFactory().create_default())


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def gst():
    return GST


@pytest.fixture
def reservation_store():
    return InMemoryReservationStore()


@pytest.fixture
def resolver(asset_repository, reservation_store, clock):
    return SlotAvailabilityResolver(
        asset_repository=asset_repository,
        reservation_store=reservation_store,
        clock=clock,
    )


@pytest.fixture
def booking_repository():
    return InMemoryBookingRepository()


@pytest.fixture
def payment_repository():
    return InMemoryPaymentRepository()


@pytest.fixture
def deposit_policy():
    """デポジット 20%、猶予 24 時間、残金はサービス開始 48 時間前まで"""
    return DepositPolicy(deposit_percentage=Decimal("20"))


@pytest.fixture
def ledger(booking_repository, payment_repository, deposit_policy, clock):
    return PaymentLedgerService(
        booking_repository=booking_repository,
        payment_repository=payment_repository,
        deposit_policy=deposit_policy,
        clock=clock,
    )


@pytest.fixture
def create_booking(clock):
    """ConfirmedBooking を生成する Factory fixture"""

    def _factory(
        booking_id: str = "booking_for_draft-001",
        total: int = 10000,
        service_start: datetime | None = None,
        status: BookingStatus = BookingStatus.PENDING,
        created_at: datetime | None = None,
    ) -> ConfirmedBooking:
        return ConfirmedBooking(
            id=BookingId(value=booking_id),
            draft_id=DraftId(value="draft-001"),
            asset_id=AssetId(value="yacht-azimut-68"),
            category=AssetCategory.YACHT,
            channel=BookingChannel.CUSTOMER,
            contact=PassengerContact("Layla", "Haddad", "layla@example.com", "+971500000000"),
            special_requests="",
            service_start=service_start or clock() + timedelta(days=10),
            duration_hours=4,
            guest_count=2,
            addon_ids=(),
            price=PriceBreakdown(
                total=Money.aed(total),
                lines=(PriceLine(PriceLineKind.BASE, "Base price", Decimal(total)),),
            ),
            created_at=created_at or clock(),
            status=status,
        )

    return _factory


@pytest.fixture
def saved_booking(create_booking, booking_repository):
    """保存済みの予約（合計 10000 AED、サービス開始は 10 日後）"""
    booking = create_booking()
    booking_repository.save(booking)
    return booking


@dataclass
class FakeLambdaContext:
    function_name: str = "charter-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:me-central-1:123456789012:function:charter-test"
    aws_request_id: str = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway HTTP API (v2) のイベントを生成する Factory fixture"""

    def _factory(
        method: str = "GET",
        path: str = "/",
        path_parameters: dict | None = None,
        query: dict | None = None,
        body: dict | None = None,
    ) -> dict:
        return {
            "version": "2.0",
            "routeKey": f"{method} {path}",
            "rawPath": path,
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "queryStringParameters": query,
            "pathParameters": path_parameters,
            "requestContext": {
                "http": {"method": method, "path": path},
                "requestId": "request-1",
                "stage": "$default",
            },
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _factory
