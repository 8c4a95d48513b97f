from charter.shared.domain import BusinessRuleViolationException


class OverpaymentRejectedException(BusinessRuleViolationException):
    """支払い済み + 今回の金額が合計を超える"""

    error_code = "OVERPAYMENT_REJECTED"


class AlreadySettledException(BusinessRuleViolationException):
    """残額がすでに 0"""

    error_code = "ALREADY_SETTLED"
