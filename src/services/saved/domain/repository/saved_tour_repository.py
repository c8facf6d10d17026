from abc import abstractmethod

from services.saved.domain.entity import SavedTour
from services.saved.domain.value_object import SavedTourKey
from services.shared.domain import Repository, UserId


class SavedTourRepository(Repository[SavedTour, SavedTourKey]):
    """保存済みツアーリポジトリインターフェース"""

    @abstractmethod
    def save(self, saved_tour: SavedTour) -> None:
        """保存済みツアーを登録する

        Raises:
            DuplicateResourceException: 同じ組が既に保存されている場合
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, key: SavedTourKey) -> SavedTour | None:
        """ユーザーとツアーの組で検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: UserId) -> list[SavedTour]:
        """ユーザーの保存済みツアーをすべて取得する（順序は保証しない）"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: SavedTourKey) -> bool:
        """保存済みツアーを削除する

        Returns:
            bool: 削除対象が存在した場合 True
        """
        raise NotImplementedError
