"""Block Kit composition object型定義

テキスト、オプション、確認ダイアログなど、ブロックや要素の中に埋め込まれる値オブジェクト。
"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field


class PlainText(BaseModel, frozen=True, extra="forbid"):
    """plain_text形式のテキストオブジェクト"""

    type: Literal["plain_text"] = "plain_text"
    text: str
    emoji: bool | None = None  # 絵文字コロン記法をエスケープするか


class MarkdownText(BaseModel, frozen=True, extra="forbid"):
    """mrkdwn形式のテキストオブジェクト"""

    type: Literal["mrkdwn"] = "mrkdwn"
    text: str
    verbatim: bool | None = None  # URLやメンションの自動変換を無効にするか


Text = Annotated[PlainText | MarkdownText, Field(discriminator="type")]


def plain_text(text: str, emoji: bool | None = None) -> PlainText:
    """plain_textのテキストオブジェクトを生成する"""
    return PlainText(text=text, emoji=emoji)


def markdown(text: str, verbatim: bool | None = None) -> MarkdownText:
    """mrkdwnのテキストオブジェクトを生成する"""
    return MarkdownText(text=text, verbatim=verbatim)


class Option(BaseModel, frozen=True, extra="forbid"):
    """選択肢

    overflow、select、multi-selectではplain_textのみ、
    radio_buttonsとcheckboxesではmrkdwnも使える（呼び出し側の責務）。
    """

    text: Text
    value: str  # 最大75文字
    description: PlainText | None = None
    url: str | None = None  # overflowメニューでのみ有効


class OptionGroup(BaseModel, frozen=True, extra="forbid"):
    """選択肢のグループ（最大100個の選択肢）"""

    label: PlainText
    options: list[Option]


class ConfirmationDialog(BaseModel, frozen=True, extra="forbid"):
    """インタラクティブ要素の実行前に表示する確認ダイアログ"""

    title: PlainText
    text: Text
    confirm: PlainText
    deny: PlainText
    style: Literal["primary", "danger"] | None = None


ActionTrigger = Literal["on_enter_pressed", "on_character_entered"]


class DispatchActionConfiguration(BaseModel, frozen=True, extra="forbid"):
    """plain_text_inputがblock_actionsを送るタイミング"""

    trigger_actions_on: list[ActionTrigger] | None = None


ConversationType = Literal["im", "mpim", "private", "public"]


class FilterForConversationList(BaseModel, frozen=True, extra="forbid"):
    """会話選択メニューに表示する会話の絞り込み条件"""

    include: list[ConversationType] | None = None
    exclude_external_shared_channels: bool | None = None
    exclude_bot_users: bool | None = None


def confirmation_dialog(
    title: str,
    text: PlainText | MarkdownText,
    confirm: str,
    deny: str,
    *,
    title_emoji: bool | None = None,
    confirm_emoji: bool | None = None,
    deny_emoji: bool | None = None,
    style: Literal["primary", "danger"] | None = None,
) -> ConfirmationDialog:
    """確認ダイアログを生成する

    本文以外（タイトル、確認ボタン、拒否ボタン）はplain_textとして組み立てる。

    Args:
        title: ダイアログのタイトル（最大100文字）
        text: ダイアログ本文（最大300文字）
        confirm: 確認ボタンのラベル（最大30文字）
        deny: 拒否ボタンのラベル（最大30文字）
        title_emoji: タイトルのemojiフラグ
        confirm_emoji: 確認ボタンのemojiフラグ
        deny_emoji: 拒否ボタンのemojiフラグ
        style: 確認ボタンの色

    Returns:
        ConfirmationDialog
    """
    return ConfirmationDialog(
        title=plain_text(title, title_emoji),
        text=text,
        confirm=plain_text(confirm, confirm_emoji),
        deny=plain_text(deny, deny_emoji),
        style=style,
    )


def plain_text_option(
    text: str,
    value: str,
    *,
    emoji: bool | None = None,
    description: str | None = None,
    description_emoji: bool | None = None,
    url: str | None = None,
) -> Option:
    """plain_textラベルの選択肢を生成する"""
    return Option(
        text=plain_text(text, emoji),
        value=value,
        description=plain_text(description, description_emoji) if description is not None else None,
        url=url,
    )


def markdown_option(
    text: str,
    value: str,
    *,
    verbatim: bool | None = None,
    description: str | None = None,
    description_emoji: bool | None = None,
    url: str | None = None,
) -> Option:
    """mrkdwnラベルの選択肢を生成する（radio_buttons、checkboxes向け）"""
    return Option(
        text=markdown(text, verbatim),
        value=value,
        description=plain_text(description, description_emoji) if description is not None else None,
        url=url,
    )


def option_group(label: str, options: list[Option], emoji: bool | None = None) -> OptionGroup:
    return OptionGroup(label=plain_text(label, emoji), options=options)


def dispatch_action_configuration(
    trigger_actions_on: list[ActionTrigger] | None = None,
) -> DispatchActionConfiguration:
    return DispatchActionConfiguration(trigger_actions_on=trigger_actions_on)


def filter_for_conversation_list(
    include: list[ConversationType] | None = None,
    exclude_external_shared_channels: bool | None = None,
    exclude_bot_users: bool | None = None,
) -> FilterForConversationList:
    return FilterForConversationList(
        include=include,
        exclude_external_shared_channels=exclude_external_shared_channels,
        exclude_bot_users=exclude_bot_users,
    )
