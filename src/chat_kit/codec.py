"""Block Kitモデルのエンコード/デコード"""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from chat_kit.exceptions import ResponseDecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def encode(value: BaseModel) -> dict[str, Any]:
    """モデルをAPIのワイヤ形式のdictに変換する

    値がNoneのオプションフィールドはキーごと省略する。
    """
    data = value.model_dump(mode="json", exclude_none=True)
    logger.debug("Encoded %s", type(value).__name__)
    return data


def encode_json(value: BaseModel) -> str:
    """モデルをAPIのワイヤ形式のJSON文字列に変換する"""
    data = value.model_dump_json(exclude_none=True)
    logger.debug("Encoded %s (%d bytes)", type(value).__name__, len(data))
    return data


def decode(target: type[T] | Any, raw: str | bytes | dict[str, Any]) -> T:
    """生のJSON（またはdict）を指定した型にデコードする

    targetにはモデルクラスのほか、Blockなどのunion型も指定できる。
    未知のフィールドは無視される。

    Args:
        target: デコード先の型
        raw: JSON文字列、bytes、またはdict

    Returns:
        デコードされた値

    Raises:
        ResponseDecodeError: JSONが不正、または型と一致しない場合
    """
    adapter = TypeAdapter(target)
    name = getattr(target, "__name__", repr(target))
    try:
        if isinstance(raw, dict):
            value = adapter.validate_python(raw)
        else:
            value = adapter.validate_json(raw)
    except ValidationError as e:
        logger.warning("Failed to decode %s: %d error(s)", name, e.error_count())
        msg = f"Failed to decode {name}: {e}"
        raise ResponseDecodeError(msg, raw) from e
    logger.debug("Decoded %s", name)
    return value
