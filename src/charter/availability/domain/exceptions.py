from http import HTTPStatus

from charter.shared.domain import BusinessRuleViolationException


class SlotNoLongerAvailableException(BusinessRuleViolationException):
    """確認後に他の予約で枠が埋まった"""

    error_code = "SLOT_NO_LONGER_AVAILABLE"
    http_status = HTTPStatus.CONFLICT
