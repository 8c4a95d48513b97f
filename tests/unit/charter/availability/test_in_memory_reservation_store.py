from concurrent.futures import ThreadPoolExecutor
from datetime import date

from charter.availability.domain import ReservationResult, ReservationWindow
from charter.availability.infrastructure.in_memory_reservation_store import (
    InMemoryReservationStore,
)
from charter.fleet.domain import AssetId

ASSET = AssetId(value="heli-bell-407")
DAY = date(2025, 6, 3)


class TestInMemoryReservationStore:
    def test_concurrent_reserve_for_same_slot_has_single_winner(self):
        store = InMemoryReservationStore()
        window = ReservationWindow.for_slot(ASSET, DAY, 10, 2)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(
                pool.map(lambda i: store.reserve(f"booking-{i}", window), range(8))
            )

        assert results.count(ReservationResult.SUCCESS) == 1
        assert results.count(ReservationResult.CONFLICT) == 7
        assert len(store.find_overlapping(window)) == 1

    def test_reserve_is_idempotent_per_reference(self):
        store = InMemoryReservationStore()
        window = ReservationWindow.for_slot(ASSET, DAY, 10, 2)

        assert store.reserve("booking-1", window) == ReservationResult.SUCCESS
        assert store.reserve("booking-1", window) == ReservationResult.SUCCESS
        assert len(store.find_overlapping(window)) == 1

    def test_release_frees_the_slot(self):
        store = InMemoryReservationStore()
        window = ReservationWindow.for_slot(ASSET, DAY, 10, 2)
        store.reserve("booking-1", window)

        store.release("booking-1")

        assert store.find_overlapping(window) == []
        assert store.reserve("booking-2", window) == ReservationResult.SUCCESS

    def test_release_of_unknown_reference_is_noop(self):
        store = InMemoryReservationStore()

        store.release("missing")

    def test_adjacent_windows_can_both_be_reserved(self):
        store = InMemoryReservationStore()

        first = store.reserve("booking-1", ReservationWindow.for_slot(ASSET, DAY, 10, 2))
        second = store.reserve("booking-2", ReservationWindow.for_slot(ASSET, DAY, 12, 2))

        assert first == second == ReservationResult.SUCCESS
