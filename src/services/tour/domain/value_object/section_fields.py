from collections.abc import Iterable

from services.shared.utils.validators import clean_strings, clean_text


def pick_text(changes: dict, names: Iterable[str]) -> dict[str, str]:
    """指定されたキーのうち入力にあるものを、空白除去した文字列で取り出す"""
    return {name: clean_text(changes[name]) for name in names if name in changes}


def pick_lists(changes: dict, names: Iterable[str]) -> dict[str, tuple[str, ...]]:
    """指定されたキーのうち入力にあるものを、空要素を除いたタプルで取り出す

    リスト以外（null など）は空として扱う。
    """
    return {
        name: tuple(clean_strings(changes[name])) for name in names if name in changes
    }
