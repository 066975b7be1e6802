"""Incoming Webhookのメッセージエンベロープ"""

from pydantic import BaseModel

from chat_kit.blockkit.blocks import Block


class SlackIncomingWebhook(BaseModel, frozen=True, extra="forbid"):
    """SlackのIncoming Webhookに送るペイロード"""

    text: str  # blocks指定時は通知用のフォールバックテキスト
    blocks: list[Block] | None = None
    thread_ts: str | None = None
    mrkdwn: bool | None = None


class QuillIncomingWebhook(BaseModel, frozen=True, extra="forbid"):
    """QuillのIncoming Webhookに送るペイロード

    thread_uidはクライアント側で決める冪等トークンで、同じ値のメッセージは同じスレッドにまとめられる。
    """

    text: str
    title: str | None = None
    blocks: list[Block] | None = None
    thread_ts: str | None = None
    thread_uid: str | None = None
