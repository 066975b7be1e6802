"""Teams関連モジュール"""

from chat_kit.teams.models import ID, AspectRatio, MediaEventValue, ResourceResponse

__all__ = [
    "ID",
    "AspectRatio",
    "MediaEventValue",
    "ResourceResponse",
]
