from dataclasses import dataclass

from .opaque_id import OpaqueId


@dataclass(frozen=True)
class UserId(OpaqueId):
    """ユーザーID（全サービス共通）

    ユーザー自体は認証サービスが所有する。本サービスは参照のみ。
    """

    LABEL = "user ID"
