import re

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_NON_DIGIT = re.compile(r"\D")

PHONE_DIGITS = 10


def digits_only(value: str) -> str:
    """数字以外の文字を取り除く"""
    return _NON_DIGIT.sub("", value)


def is_valid_phone(phone: str) -> bool:
    """数字以外を除いた結果がちょうど10桁かどうか"""
    return len(digits_only(phone)) == PHONE_DIGITS


def is_valid_email(email: str) -> bool:
    """local@domain.tld の形をしているかどうか"""
    return _EMAIL_PATTERN.fullmatch(email) is not None


def clean_strings(values: object) -> list[str]:
    """リストから空文字・空白のみの要素を取り除く

    リスト以外が渡された場合は空リストを返す。
    """
    if not isinstance(values, list):
        return []
    return [v.strip() for v in values if isinstance(v, str) and v.strip()]


def clean_text(value: object) -> str:
    """文字列なら前後の空白を除いて返す（それ以外は空文字）"""
    return value.strip() if isinstance(value, str) else ""
