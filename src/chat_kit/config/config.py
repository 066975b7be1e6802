"""統合Config クラス"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from chat_kit.config.app import AppConfig, load_app_config
from chat_kit.config.env import load_env_config


class Config(BaseModel):
    """統合設定クラス（環境変数 + アプリケーション設定）"""

    # 環境変数由来
    token: str | None = Field(default=None, description="APIトークン (xoxb- など)")

    # config.yaml由来（環境変数で上書き可能）
    api_base_url: str = Field(default="https://slack.com/api", description="APIのベースURL")
    timeout_seconds: float = Field(default=10.0, gt=0, description="HTTPリクエストのタイムアウト（秒）")

    model_config = {"extra": "forbid"}


def load_config(config_path: Path | None = None) -> Config:
    """環境変数とYAMLファイルから統合設定を読み込む

    Args:
        config_path: YAMLファイルのパス。Noneの場合はデフォルト値を使う

    Returns:
        Config: 統合設定

    Raises:
        ValueError: 設定値が不正な場合
        FileNotFoundError: YAMLファイルが存在しない場合
    """
    # .envファイルを読み込み
    load_dotenv()

    env_config = load_env_config()
    app_config = load_app_config(config_path) if config_path is not None else AppConfig()

    return Config(
        token=env_config.token,
        api_base_url=env_config.api_base_url or app_config.api_base_url,
        timeout_seconds=app_config.timeout_seconds,
    )
