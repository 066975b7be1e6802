"""API操作をHTTPクライアントに橋渡しするクライアント

HTTP送信そのものは呼び出し側が用意したTransportに任せる。
リトライやレート制御は行わない。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar, runtime_checkable

import aiohttp
from pydantic import BaseModel

from chat_kit.api.operations import APIResponse, Operation
from chat_kit.api.router import HTTPMethod
from chat_kit.config import Config

logger = logging.getLogger(__name__)

BodyT = TypeVar("BodyT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=APIResponse)


@dataclass(frozen=True)
class PreparedRequest:
    """送信直前のHTTPリクエスト"""

    method: HTTPMethod
    url: str
    json: dict[str, Any]
    headers: dict[str, str] = field(default_factory=dict)


def prepare_request(
    operation: Operation[BodyT, ResponseT],
    body: BodyT,
    *,
    base_url: str,
    token: str | None = None,
) -> PreparedRequest:
    """操作とボディからHTTPリクエストを組み立てる

    Args:
        operation: API操作
        body: リクエストボディ
        base_url: APIのベースURL
        token: 指定時はAuthorizationヘッダーにBearerトークンとして付与する

    Returns:
        PreparedRequest
    """
    headers = {"Content-Type": "application/json; charset=utf-8"}
    if token:
        headers["Authorization"] = f"Bearer {token}"

    url = base_url.rstrip("/") + operation.route.path
    logger.debug("Prepared %s %s", operation.route.method.value, url)
    return PreparedRequest(
        method=operation.route.method,
        url=url,
        json=operation.encode_body(body),
        headers=headers,
    )


@runtime_checkable
class Transport(Protocol):
    """HTTPリクエストを送り、レスポンスボディを返すProtocol"""

    async def send(self, request: PreparedRequest) -> bytes: ...


class AiohttpTransport:
    """呼び出し側のaiohttp.ClientSessionを使うTransport実装"""

    def __init__(self, session: aiohttp.ClientSession, timeout_seconds: float = 10.0) -> None:
        """依存注入でClientSessionを受け取る"""
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    @classmethod
    def from_config(cls, session: aiohttp.ClientSession, config: Config) -> AiohttpTransport:
        """設定のtimeout_secondsを使ってTransportを生成する"""
        return cls(session, timeout_seconds=config.timeout_seconds)

    async def send(self, request: PreparedRequest) -> bytes:
        """リクエストを送信する

        Raises:
            aiohttp.ClientError: 接続エラー、または2xx以外のステータスの場合
            TimeoutError: タイムアウトした場合
        """
        async with self._session.request(
            request.method.value,
            request.url,
            json=request.json,
            headers=request.headers,
            timeout=self._timeout,
        ) as response:
            response.raise_for_status()
            return await response.read()


class ChatClient:
    """API操作を送信し、レスポンスをデコードするクライアント"""

    def __init__(self, transport: Transport, config: Config) -> None:
        self._transport = transport
        self._config = config

    async def call(self, operation: Operation[BodyT, ResponseT], body: BodyT) -> ResponseT:
        """API操作を実行する

        okがfalseのレスポンスもそのまま返す。エラーとして扱う場合は
        呼び出し側でraise_for_error()を使う。

        Args:
            operation: API操作
            body: リクエストボディ

        Returns:
            デコードされたレスポンス

        Raises:
            ResponseDecodeError: レスポンスがデコードできない場合
        """
        request = prepare_request(
            operation,
            body,
            base_url=self._config.api_base_url,
            token=self._config.token,
        )
        raw = await self._transport.send(request)
        return operation.decode_response(raw)
