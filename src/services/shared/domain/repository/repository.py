from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ..entity import AggregateRoot

A = TypeVar("A", bound=AggregateRoot)
ID = TypeVar("ID")


class Repository(ABC, Generic[A, ID]):
    """集約リポジトリの基底クラス

    1集約 = 1アイテム。集約の一部だけを書き換える操作は各リポジトリで定義する。
    """

    @abstractmethod
    def save(self, aggregate: A) -> None:
        """新規の集約を保存する（同じIDが既にあれば DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> A | None:
        """IDで集約を検索する（無ければ None）"""
        raise NotImplementedError

    def exists(self, id: ID) -> bool:
        return self.find_by_id(id) is not None
