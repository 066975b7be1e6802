"""アプリケーション設定"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError


class AppConfig(BaseModel):
    """アプリケーション設定"""

    api_base_url: str = Field(default="https://slack.com/api", description="APIのベースURL")
    timeout_seconds: float = Field(default=10.0, gt=0, description="HTTPリクエストのタイムアウト（秒）")

    model_config = {"extra": "forbid"}


def load_app_config(config_path: Path) -> AppConfig:
    """YAMLファイルからAppConfigを読み込む

    Args:
        config_path: 設定ファイルのパス

    Returns:
        AppConfig: アプリケーション設定

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 設定ファイルが不正な場合
    """
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
            if data is None:
                data = {}
            if not isinstance(data, dict):
                msg = f"Config file must contain a mapping: {config_path}"
                raise ValueError(msg)
            return AppConfig(**data)
    except yaml.YAMLError as e:
        msg = f"Invalid YAML file: {e}"
        raise ValueError(msg) from e
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ValueError(msg) from e
