from abc import abstractmethod

from services.shared.domain import Repository, TourId
from services.tour.domain.entity.tour import Tour
from services.tour.domain.enum import Category


class TourRepository(Repository[Tour, TourId]):
    """ツアーリポジトリのインターフェース"""

    @abstractmethod
    def save(self, tour: Tour) -> None:
        """新規ツアーを保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, tour_id: TourId) -> Tour | None:
        """ツアーIDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_all_active(self) -> list[Tour]:
        """公開中のツアーを新しい順に返す"""
        raise NotImplementedError

    @abstractmethod
    def find_active_by_category(self, category: Category) -> list[Tour]:
        """カテゴリで絞り込んだ公開中のツアーを新しい順に返す"""
        raise NotImplementedError

    @abstractmethod
    def update(self, tour: Tour) -> None:
        """ツアーを丸ごと上書き保存する（評価の集計値も含む）"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, tour_id: TourId) -> None:
        """ツアーを削除する"""
        raise NotImplementedError
