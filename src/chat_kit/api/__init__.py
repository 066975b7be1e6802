"""API操作の定義と送信"""

from chat_kit.api.client import AiohttpTransport, ChatClient, PreparedRequest, Transport, prepare_request
from chat_kit.api.operations import (
    CREATE_CHANNEL,
    OPERATIONS,
    POST_EPHEMERAL,
    POST_MESSAGE,
    UNFURL_CHAT,
    UPDATE_CHAT,
    APIResponse,
    Channel,
    CreateChannelBody,
    CreateChannelResponse,
    MessageResponse,
    Operation,
    PostEphemeralBody,
    PostMessageBody,
    UnfurlChatBody,
    UpdateChatBody,
)
from chat_kit.api.router import HTTPMethod, Route

__all__ = [
    "APIResponse",
    "AiohttpTransport",
    "CREATE_CHANNEL",
    "Channel",
    "ChatClient",
    "CreateChannelBody",
    "CreateChannelResponse",
    "HTTPMethod",
    "MessageResponse",
    "OPERATIONS",
    "Operation",
    "POST_EPHEMERAL",
    "POST_MESSAGE",
    "PostEphemeralBody",
    "PostMessageBody",
    "PreparedRequest",
    "Route",
    "Transport",
    "UNFURL_CHAT",
    "UPDATE_CHAT",
    "UnfurlChatBody",
    "UpdateChatBody",
    "prepare_request",
]
