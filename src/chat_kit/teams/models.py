"""Teams APIの共有モデル"""

from enum import Enum

from pydantic import BaseModel


class ResourceResponse(BaseModel, frozen=True):
    """リソース作成APIのレスポンス"""

    id: str


class AspectRatio(str, Enum):
    R4_3 = "4:3"
    R16_9 = "16:9"


class ID(BaseModel, frozen=True):
    id: str


class MediaEventValue(BaseModel, frozen=True):
    """メディアイベントの値（現状フィールドなし）"""
