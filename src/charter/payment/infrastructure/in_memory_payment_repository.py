import threading

from charter.booking.domain import BookingId
from charter.payment.domain import PaymentId, PaymentRecord, PaymentRepository
from charter.shared.domain import DuplicateResourceException


class InMemoryPaymentRepository(PaymentRepository):
    """メモリ上の PaymentRepository（テスト・ローカル実行用）"""

    def __init__(self) -> None:
        self._records: dict[PaymentId, PaymentRecord] = {}
        self._lock = threading.Lock()

    def save(self, record: PaymentRecord) -> None:
        with self._lock:
            if record.id in self._records:
                raise DuplicateResourceException(f"Payment already exists: {record.id}")
            self._records[record.id] = record

    def find_by_id(self, payment_id: PaymentId) -> PaymentRecord | None:
        with self._lock:
            return self._records.get(payment_id)

    def find_by_booking_id(self, booking_id: BookingId) -> list[PaymentRecord]:
        with self._lock:
            records = [r for r in self._records.values() if r.booking_id == booking_id]
        return sorted(records, key=lambda r: r.recorded_at)
