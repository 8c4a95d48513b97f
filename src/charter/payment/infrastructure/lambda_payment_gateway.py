import json
import os

import boto3
from botocore.exceptions import ClientError

from charter.payment.domain import CaptureResult, PaymentGateway
from charter.shared.domain import CollaboratorUnavailableException, Money
from charter.shared.utils import get_logger

logger = get_logger("payment-gateway")


class LambdaPaymentGateway(PaymentGateway):
    """決済プロバイダ連携 Lambda を同期呼び出しする PaymentGateway

    応答: {"status": "succeeded" | "declined", "transaction_id": ..., "message": ...}
    """

    def __init__(self, function_name: str | None = None) -> None:
        self.function_name = function_name or os.getenv("PAYMENT_PROVIDER_FUNCTION")
        self.client = boto3.client("lambda")

    def capture(
        self, reference: str, amount: Money, method: str, idempotency_key: str
    ) -> CaptureResult:
        payload = {
            "reference": reference,
            "amount": str(amount.amount),
            "currency": str(amount.currency),
            "method": method,
            "idempotency_key": idempotency_key,
        }
        try:
            response = self.client.invoke(
                FunctionName=self.function_name,
                InvocationType="RequestResponse",
                Payload=json.dumps(payload).encode("utf-8"),
            )
        except ClientError as e:
            raise CollaboratorUnavailableException("payment-provider", str(e)) from e

        if response.get("FunctionError"):
            raise CollaboratorUnavailableException(
                "payment-provider", f"Provider function error: {response['FunctionError']}"
            )

        body = json.loads(response["Payload"].read() or b"{}")
        status = body.get("status")
        logger.info(
            "Payment provider responded",
            extra={"reference": reference, "provider_status": status},
        )
        if status == "succeeded":
            return CaptureResult(succeeded=True, transaction_id=body.get("transaction_id"))
        if status == "declined":
            return CaptureResult(
                succeeded=False, message=body.get("message") or "Payment was declined"
            )
        raise CollaboratorUnavailableException(
            "payment-provider", f"Unexpected provider status: {status}"
        )
