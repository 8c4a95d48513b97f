import json
from http import HTTPStatus

from pydantic import BaseModel, ValidationError

from charter.shared.domain.exception import (
    BusinessRuleViolationException,
    CollaboratorUnavailableException,
    DomainException,
    DuplicateResourceException,
    InvalidInputException,
    InvalidTransitionException,
    OptimisticLockException,
    ResourceNotFoundException,
)


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: dict[str, str] | None = None


# 先に一致したものが優先される（サブクラスを先に並べる）
_STATUS_BY_EXCEPTION: list[tuple[type[DomainException], HTTPStatus]] = [
    (InvalidInputException, HTTPStatus.BAD_REQUEST),
    (ResourceNotFoundException, HTTPStatus.NOT_FOUND),
    (InvalidTransitionException, HTTPStatus.CONFLICT),
    (DuplicateResourceException, HTTPStatus.CONFLICT),
    (OptimisticLockException, HTTPStatus.CONFLICT),
    (CollaboratorUnavailableException, HTTPStatus.SERVICE_UNAVAILABLE),
    (BusinessRuleViolationException, HTTPStatus.UNPROCESSABLE_ENTITY),
]


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def status_for(error: DomainException) -> HTTPStatus:
    """ドメイン例外に対応する HTTP ステータスを返す"""
    status = getattr(error, "http_status", None)
    if status is not None:
        return status
    for exception_type, mapped in _STATUS_BY_EXCEPTION:
        if isinstance(error, exception_type):
            return mapped
    return HTTPStatus.INTERNAL_SERVER_ERROR


def error_response(error: DomainException) -> dict:
    """ドメイン例外をエラーレスポンスに変換する

    InvalidInputException はフィールド単位のメッセージを details に含める。
    """
    details = error.errors if isinstance(error, InvalidInputException) else None
    body = ErrorResponse(
        error_code=error.error_code,
        message=str(error),
        details=details or None,
    ).model_dump(exclude_none=True)
    return api_response(status_for(error), body)


def validation_error_response(error: ValidationError) -> dict:
    """pydantic の検証エラーを 400 レスポンスに変換する"""
    details = {
        ".".join(str(loc) for loc in item["loc"]) or "body": item["msg"]
        for item in error.errors()
    }
    return error_response(InvalidInputException("Invalid request", details))
