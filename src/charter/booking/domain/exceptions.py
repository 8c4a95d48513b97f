from http import HTTPStatus

from charter.shared.domain import DomainException, ResourceNotFoundException


class DraftNotFoundException(ResourceNotFoundException):
    error_code = "DRAFT_NOT_FOUND"


class DraftExpiredException(DraftNotFoundException):
    """一定時間操作のなかったドラフト（破棄済み）"""

    error_code = "DRAFT_EXPIRED"


class BookingNotFoundException(ResourceNotFoundException):
    error_code = "BOOKING_NOT_FOUND"


class PaymentDeclinedException(DomainException):
    """決済プロバイダがデポジットの決済を拒否した"""

    error_code = "PAYMENT_DECLINED"
    http_status = HTTPStatus.PAYMENT_REQUIRED
