"""Block Kit形式のチャットメッセージとAPI操作の型付きモデル"""

from chat_kit.codec import decode, encode, encode_json
from chat_kit.exceptions import ChatAPIError, ChatKitError, ResponseDecodeError
from chat_kit.webhooks import QuillIncomingWebhook, SlackIncomingWebhook

__all__ = [
    "ChatAPIError",
    "ChatKitError",
    "QuillIncomingWebhook",
    "ResponseDecodeError",
    "SlackIncomingWebhook",
    "decode",
    "encode",
    "encode_json",
]
