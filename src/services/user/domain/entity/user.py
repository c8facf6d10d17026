from services.shared.domain import Entity, UserId


class User(Entity[UserId]):
    """ユーザー（認証サービスが所有する読み取り専用のプロフィール）"""

    def __init__(self, id: UserId, name: str, email: str, phone: str = "") -> None:
        super().__init__(id)
        self._name = name
        self._email = email
        self._phone = phone

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def phone(self) -> str:
        return self._phone
