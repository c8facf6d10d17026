from abc import ABC, abstractmethod

from services.shared.domain import UserId
from services.user.domain.entity.user import User


class UserRepository(ABC):
    """ユーザー参照用リポジトリのインターフェース（書き込みは行わない）"""

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーIDで検索する"""
        raise NotImplementedError
