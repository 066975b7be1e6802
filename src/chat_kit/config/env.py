"""環境変数設定"""

import os

from pydantic import BaseModel, Field, ValidationError


class EnvConfig(BaseModel):
    """環境変数設定"""

    token: str | None = Field(default=None, description="APIトークン (xoxb- など)")
    api_base_url: str | None = Field(default=None, description="YAMLのapi_base_urlを上書きするベースURL")

    model_config = {"extra": "forbid"}


def load_env_config() -> EnvConfig:
    """環境変数からEnvConfigを読み込む

    CHAT_KIT_TOKENとCHAT_KIT_API_BASE_URLはどちらも任意。

    Returns:
        EnvConfig: 環境変数設定

    Raises:
        ValueError: 環境変数の値が不正な場合
    """
    try:
        return EnvConfig(
            token=os.environ.get("CHAT_KIT_TOKEN") or None,
            api_base_url=os.environ.get("CHAT_KIT_API_BASE_URL") or None,
        )
    except ValidationError as e:
        msg = f"Invalid environment variable: {e}"
        raise ValueError(msg) from e
