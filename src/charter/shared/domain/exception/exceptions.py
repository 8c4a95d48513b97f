class DomainException(Exception):
    """ドメイン層で発生する基底例外

    error_code はハンドラ層でエラーレスポンスに変換する際に使う。
    """

    error_code = "DOMAIN_ERROR"


class InvalidInputException(DomainException):
    """入力値の検証エラー

    errors にはフィールド名 -> メッセージを保持する（フィールド単位で表示する）。
    """

    error_code = "INVALID_INPUT"

    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.errors: dict[str, str] = dict(errors or {})

    @classmethod
    def for_field(cls, field: str, message: str) -> "InvalidInputException":
        return cls(message, {field: message})


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    error_code = "NOT_FOUND"


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    error_code = "BUSINESS_RULE_VIOLATION"


class InvalidTransitionException(BusinessRuleViolationException):
    """ワークフローで許可されていない遷移"""

    error_code = "INVALID_TRANSITION"


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（条件付き書き込みの失敗時）"""

    error_code = "DUPLICATE_RESOURCE"


class OptimisticLockException(DomainException):
    """楽観ロックの競合エラー（ステータスが期待値と異なる場合）"""

    error_code = "CONFLICT"


class CollaboratorUnavailableException(DomainException):
    """外部コラボレータ（予約ストア・決済プロバイダ・セッションストア）の一時的な障害

    コア内部ではリトライしない。リトライ方針は呼び出し側が決める。
    """

    error_code = "COLLABORATOR_UNAVAILABLE"

    def __init__(self, collaborator: str, message: str) -> None:
        super().__init__(f"{collaborator} unavailable: {message}")
        self.collaborator = collaborator
