from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from charter.payment.domain import PaymentRecord, PaymentStatusView, RefundQuote


class PaymentRecordData(BaseModel):
    """支払い記録のレスポンスモデル"""

    payment_id: str
    booking_id: str
    amount: str
    currency: str
    method: str
    status: str
    recorded_at: str
    transaction_id: str | None = None
    refunded_payment_id: str | None = None


class ReminderData(BaseModel):
    type: str
    due_date: str
    amount: str


class PaymentStatusData(BaseModel):
    """支払い状況のレスポンスモデル"""

    booking_id: str
    currency: str
    total_amount: str
    paid_amount: str
    refunded_amount: str
    remaining_amount: str
    next_due_date: str | None
    next_amount: str
    status: str
    reminder: ReminderData | None
    history: list[PaymentRecordData]


class RefundQuoteData(BaseModel):
    """返金見積もりのレスポンスモデル"""

    booking_id: str
    quoted_at: str
    policy_type: str
    hours_until_service: str
    paid_amount: str
    refundable_amount: str
    currency: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: PaymentRecordData | PaymentStatusData | RefundQuoteData


def to_record_data(record: PaymentRecord) -> PaymentRecordData:
    return PaymentRecordData(
        payment_id=str(record.id),
        booking_id=str(record.booking_id),
        amount=str(record.amount.amount),
        currency=str(record.amount.currency),
        method=record.method,
        status=record.status.value,
        recorded_at=record.recorded_at.isoformat(),
        transaction_id=record.transaction_id,
        refunded_payment_id=(
            str(record.refunded_payment_id) if record.refunded_payment_id else None
        ),
    )


def to_record_response(record: PaymentRecord) -> dict:
    """PaymentRecord をレスポンス辞書に変換する"""
    return SuccessResponse(data=to_record_data(record)).model_dump()


def to_status_response(view: PaymentStatusView) -> dict:
    """PaymentStatusView をレスポンス辞書に変換する"""
    reminder = view.reminder
    return SuccessResponse(
        data=PaymentStatusData(
            booking_id=view.booking_id,
            currency=str(view.currency),
            total_amount=str(view.total_amount.amount),
            paid_amount=str(view.paid_amount.amount),
            refunded_amount=str(view.refunded_amount.amount),
            remaining_amount=str(view.remaining_amount.amount),
            next_due_date=view.next_due_date.isoformat() if view.next_due_date else None,
            next_amount=str(view.next_amount.amount),
            status=view.status.value,
            reminder=(
                ReminderData(
                    type=reminder.type.value,
                    due_date=reminder.due_date.isoformat(),
                    amount=str(reminder.amount.amount),
                )
                if reminder
                else None
            ),
            history=[to_record_data(record) for record in view.history],
        )
    ).model_dump()


def to_quote_response(quote: RefundQuote) -> dict:
    """RefundQuote をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=RefundQuoteData(
            booking_id=quote.booking_id,
            quoted_at=quote.quoted_at.isoformat(),
            policy_type=quote.policy_type.value,
            hours_until_service=str(quote.hours_until_service.quantize(Decimal("0.01"))),
            paid_amount=str(quote.paid_amount.amount),
            refundable_amount=str(quote.refundable_amount.amount),
            currency=str(quote.paid_amount.currency),
        )
    ).model_dump()
