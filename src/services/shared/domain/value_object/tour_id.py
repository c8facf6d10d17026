from dataclasses import dataclass

from .opaque_id import OpaqueId


@dataclass(frozen=True)
class TourId(OpaqueId):
    """ツアーID（全サービス共通）"""

    LABEL = "tour ID"
