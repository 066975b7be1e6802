"""API操作ごとのリクエストボディ・レスポンス・ルートの定義"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from chat_kit.api.router import Route
from chat_kit.blockkit.blocks import Block
from chat_kit.codec import decode, encode
from chat_kit.exceptions import ChatAPIError

logger = logging.getLogger(__name__)


# --- request bodies ---


class PostMessageBody(BaseModel, frozen=True, extra="forbid"):
    channel: str
    text: str
    token: str | None = None
    blocks: list[Block] | None = None
    thread_ts: str | None = None


class PostEphemeralBody(BaseModel, frozen=True, extra="forbid"):
    """特定ユーザーにだけ見えるメッセージ"""

    channel: str
    user: str
    text: str
    token: str | None = None
    blocks: list[Block] | None = None


class UpdateChatBody(BaseModel, frozen=True, extra="forbid"):
    channel: str
    ts: str  # 更新対象メッセージのタイムスタンプ
    text: str
    token: str | None = None
    blocks: list[Block] | None = None


class UnfurlChatBody(BaseModel, frozen=True, extra="forbid"):
    channel: str
    ts: str
    text: str
    token: str | None = None
    blocks: list[Block] | None = None


class CreateChannelBody(BaseModel, frozen=True, extra="forbid"):
    name: str
    token: str | None = None


# --- responses ---


class APIResponse(BaseModel, frozen=True):
    """APIレスポンスの共通部分

    APIは常に200を返し、成否はokで表す。okがfalseでもデコードは成功する。
    未知のフィールドは無視する。
    """

    ok: bool
    error: str | None = None
    warning: str | None = None

    def raise_for_error(self) -> None:
        """okがfalseの場合にChatAPIErrorを送出する

        Raises:
            ChatAPIError: okがfalseの場合
        """
        if self.ok:
            return
        error_code = self.error or "unknown_error"
        logger.warning("API returned an error: %s", error_code)
        raise ChatAPIError(f"API request failed: {error_code}", error_code)


class MessageResponse(APIResponse, frozen=True):
    ts: str | None = None


class Channel(BaseModel, frozen=True):
    id: str
    name: str


class CreateChannelResponse(APIResponse, frozen=True):
    channel: Channel | None = None


# --- operation descriptors ---

BodyT = TypeVar("BodyT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=APIResponse)


@dataclass(frozen=True)
class Operation(Generic[BodyT, ResponseT]):
    """1つのAPI呼び出しのルート・ボディ型・レスポンス型の組"""

    route: Route
    body_model: type[BodyT]
    response_model: type[ResponseT]

    def encode_body(self, body: BodyT) -> dict[str, Any]:
        """リクエストボディをワイヤ形式のdictに変換する

        Raises:
            TypeError: bodyがこの操作のボディ型でない場合
        """
        if not isinstance(body, self.body_model):
            msg = f"{self.route.name} expects {self.body_model.__name__}, got {type(body).__name__}"
            raise TypeError(msg)
        return encode(body)

    def decode_response(self, raw: str | bytes | dict[str, Any]) -> ResponseT:
        """生のレスポンスをこの操作のレスポンス型にデコードする

        Raises:
            ResponseDecodeError: JSONが不正、または必須フィールドが欠けている場合
        """
        return decode(self.response_model, raw)


POST_MESSAGE: Operation[PostMessageBody, MessageResponse] = Operation(
    Route.POST_MESSAGE, PostMessageBody, MessageResponse
)
POST_EPHEMERAL: Operation[PostEphemeralBody, MessageResponse] = Operation(
    Route.POST_EPHEMERAL, PostEphemeralBody, MessageResponse
)
UPDATE_CHAT: Operation[UpdateChatBody, MessageResponse] = Operation(Route.UPDATE_CHAT, UpdateChatBody, MessageResponse)
UNFURL_CHAT: Operation[UnfurlChatBody, MessageResponse] = Operation(Route.UNFURL_CHAT, UnfurlChatBody, MessageResponse)
CREATE_CHANNEL: Operation[CreateChannelBody, CreateChannelResponse] = Operation(
    Route.CREATE_CHANNEL, CreateChannelBody, CreateChannelResponse
)

OPERATIONS: dict[Route, Operation[Any, Any]] = {
    op.route: op for op in (POST_MESSAGE, POST_EPHEMERAL, UPDATE_CHAT, UNFURL_CHAT, CREATE_CHANNEL)
}
