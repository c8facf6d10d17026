class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException):
    """入力値が不正な場合

    最初の違反で止めず、検出したすべての違反メッセージを errors に保持する。
    """

    def __init__(self, errors: list[str], message: str = "Validation failed") -> None:
        super().__init__(message)
        self.message = message
        self.errors = list(errors)


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class MalformedIdException(DomainException):
    """IDの形式がストアのID形式と一致しない場合"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（事前チェックまたは条件付き書き込みの失敗時）"""

    pass
