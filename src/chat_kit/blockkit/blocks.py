"""Block Kit ブロック型定義"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from chat_kit.blockkit.composition import MarkdownText, PlainText, Text, markdown, plain_text
from chat_kit.blockkit.elements import BlockElement, InteractiveElement

# contextブロックは要素に加えてテキストオブジェクトも並べられる
ContextElement = Annotated[InteractiveElement | PlainText | MarkdownText, Field(discriminator="type")]


class ActionsBlock(BaseModel, frozen=True, extra="forbid"):
    """インタラクティブ要素を並べるブロック（最大25要素）"""

    type: Literal["actions"] = "actions"
    elements: list[BlockElement]
    block_id: str | None = None


class ContextBlock(BaseModel, frozen=True, extra="forbid"):
    """補足情報を表示するブロック（最大10要素）"""

    type: Literal["context"] = "context"
    elements: list[ContextElement]
    block_id: str | None = None


class DividerBlock(BaseModel, frozen=True, extra="forbid"):
    type: Literal["divider"] = "divider"
    block_id: str | None = None


class FileBlock(BaseModel, frozen=True, extra="forbid"):
    """リモートファイルを表示するブロック"""

    type: Literal["file"] = "file"
    external_id: str
    source: str = "remote"
    block_id: str | None = None


class HeaderBlock(BaseModel, frozen=True, extra="forbid"):
    type: Literal["header"] = "header"
    text: PlainText  # 最大150文字
    block_id: str | None = None


class ImageBlock(BaseModel, frozen=True, extra="forbid"):
    type: Literal["image"] = "image"
    image_url: str
    alt_text: str
    title: PlainText | None = None
    block_id: str | None = None


class InputBlock(BaseModel, frozen=True, extra="forbid"):
    """ユーザー入力を受け取るブロック"""

    type: Literal["input"] = "input"
    label: PlainText
    element: BlockElement
    dispatch_action: bool | None = None
    block_id: str | None = None
    hint: PlainText | None = None
    optional: bool | None = None


class SectionBlock(BaseModel, frozen=True, extra="forbid"):
    """テキストとフィールドを表示するブロック

    textとfieldsの少なくとも一方が必要だが、構築時には検証しない。
    """

    type: Literal["section"] = "section"
    text: Text | None = None
    block_id: str | None = None
    fields: list[Text] | None = None
    accessory: BlockElement | None = None


Block = Annotated[
    ActionsBlock
    | ContextBlock
    | DividerBlock
    | FileBlock
    | HeaderBlock
    | ImageBlock
    | InputBlock
    | SectionBlock,
    Field(discriminator="type"),
]


def actions_block(elements: list[InteractiveElement], block_id: str | None = None) -> ActionsBlock:
    return ActionsBlock(elements=elements, block_id=block_id)


def context_block(
    elements: list[InteractiveElement | PlainText | MarkdownText],
    block_id: str | None = None,
) -> ContextBlock:
    return ContextBlock(elements=elements, block_id=block_id)


def divider_block(block_id: str | None = None) -> DividerBlock:
    return DividerBlock(block_id=block_id)


def file_block(external_id: str, source: str = "remote", block_id: str | None = None) -> FileBlock:
    return FileBlock(external_id=external_id, source=source, block_id=block_id)


def header_block(text: str, emoji: bool | None = None, block_id: str | None = None) -> HeaderBlock:
    return HeaderBlock(text=plain_text(text, emoji), block_id=block_id)


def image_block(
    image_url: str,
    alt_text: str,
    *,
    title: str | None = None,
    title_emoji: bool | None = None,
    block_id: str | None = None,
) -> ImageBlock:
    return ImageBlock(
        image_url=image_url,
        alt_text=alt_text,
        title=plain_text(title, title_emoji) if title is not None else None,
        block_id=block_id,
    )


def input_block(
    label: str,
    element: InteractiveElement,
    *,
    label_emoji: bool | None = None,
    dispatch_action: bool | None = None,
    block_id: str | None = None,
    hint: str | None = None,
    hint_emoji: bool | None = None,
    optional: bool | None = None,
) -> InputBlock:
    """inputブロックを生成する

    Args:
        label: 入力欄のラベル（最大2000文字）
        element: 入力に使う要素
        label_emoji: ラベルのemojiフラグ
        dispatch_action: 入力時にblock_actionsを送るか
        block_id: ブロックの識別子
        hint: 入力欄の下に表示するヒント
        hint_emoji: ヒントのemojiフラグ
        optional: 入力を任意にするか

    Returns:
        InputBlock
    """
    return InputBlock(
        label=plain_text(label, label_emoji),
        element=element,
        dispatch_action=dispatch_action,
        block_id=block_id,
        hint=plain_text(hint, hint_emoji) if hint is not None else None,
        optional=optional,
    )


def plain_text_section(
    text: str,
    *,
    emoji: bool | None = None,
    block_id: str | None = None,
    accessory: InteractiveElement | None = None,
) -> SectionBlock:
    return SectionBlock(text=plain_text(text, emoji), block_id=block_id, accessory=accessory)


def markdown_section(
    text: str,
    *,
    verbatim: bool | None = None,
    block_id: str | None = None,
    accessory: InteractiveElement | None = None,
) -> SectionBlock:
    return SectionBlock(text=markdown(text, verbatim), block_id=block_id, accessory=accessory)


def fields_section(
    fields: list[PlainText | MarkdownText],
    *,
    text: PlainText | MarkdownText | None = None,
    block_id: str | None = None,
    accessory: InteractiveElement | None = None,
) -> SectionBlock:
    """fieldsを2列表示するsectionブロックを生成する（最大10フィールド）"""
    return SectionBlock(text=text, block_id=block_id, fields=fields, accessory=accessory)
