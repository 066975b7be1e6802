"""Block Kit インタラクティブ要素の型定義

各要素は固定の `type` を持ち、union全体はその `type` で判別される。
select / multi-select はさらに5種類の下位unionに分かれる。
"""

import re
from datetime import date, datetime, time
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, StringConstraints, field_validator, model_validator

from chat_kit.blockkit.composition import (
    ConfirmationDialog,
    DispatchActionConfiguration,
    FilterForConversationList,
    Option,
    OptionGroup,
    PlainText,
    plain_text,
)

# ASCII数字のみ（全角数字は不可）
_DATE_PATTERN = r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$"
_TIME_PATTERN = r"^([01][0-9]|2[0-3]):[0-5][0-9]$"

DateString = Annotated[str, StringConstraints(pattern=_DATE_PATTERN)]
TimeString = Annotated[str, StringConstraints(pattern=_TIME_PATTERN)]


def format_date(value: date) -> str:
    """日付をYYYY-MM-DD形式にする（ロケール・タイムゾーン非依存）"""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_time(value: time | datetime) -> str:
    """時刻を24時間表記のHH:mm形式にする（ロケール・タイムゾーン非依存）"""
    return f"{value.hour:02d}:{value.minute:02d}"


def _check_option_source(options: list[Option] | None, option_groups: list[OptionGroup] | None) -> None:
    # optionsとoption_groupsはどちらか一方のみ
    if options is not None and option_groups is not None:
        msg = "options and option_groups are mutually exclusive"
        raise ValueError(msg)
    if options is None and option_groups is None:
        msg = "either options or option_groups is required"
        raise ValueError(msg)


class Button(BaseModel, frozen=True, extra="forbid"):
    type: Literal["button"] = "button"
    text: PlainText
    action_id: str
    url: str | None = None
    value: str | None = None
    style: Literal["primary", "danger"] | None = None
    confirm: ConfirmationDialog | None = None


class CheckboxGroup(BaseModel, frozen=True, extra="forbid"):
    type: Literal["checkboxes"] = "checkboxes"
    action_id: str
    options: list[Option]
    initial_options: list[Option] | None = None
    confirm: ConfirmationDialog | None = None


class DatePicker(BaseModel, frozen=True, extra="forbid"):
    """日付ピッカー

    initial_dateにはdate/datetimeも渡せ、構築時にYYYY-MM-DD文字列へ変換される。
    """

    type: Literal["datepicker"] = "datepicker"
    action_id: str
    placeholder: PlainText | None = None
    initial_date: DateString | None = None
    confirm: ConfirmationDialog | None = None

    @field_validator("initial_date", mode="before")
    @classmethod
    def _format_initial_date(cls, value: Any) -> Any:
        if isinstance(value, date):
            return format_date(value)
        if isinstance(value, str) and re.fullmatch(_DATE_PATTERN, value):
            # 形式が合っていても存在しない日付（2024-13-45など）は拒否する
            return format_date(date.fromisoformat(value))
        return value


class TimePicker(BaseModel, frozen=True, extra="forbid"):
    """時刻ピッカー

    initial_timeにはtime/datetimeも渡せ、構築時にHH:mm文字列へ変換される。
    """

    type: Literal["timepicker"] = "timepicker"
    action_id: str
    placeholder: PlainText | None = None
    initial_time: TimeString | None = None
    confirm: ConfirmationDialog | None = None

    @field_validator("initial_time", mode="before")
    @classmethod
    def _format_initial_time(cls, value: Any) -> Any:
        if isinstance(value, (time, datetime)):
            return format_time(value)
        return value


class ImageElement(BaseModel, frozen=True, extra="forbid"):
    type: Literal["image"] = "image"
    image_url: str
    alt_text: str


class OverflowMenu(BaseModel, frozen=True, extra="forbid"):
    type: Literal["overflow"] = "overflow"
    action_id: str
    options: list[Option]  # 2〜5個
    confirm: ConfirmationDialog | None = None


class PlainTextInput(BaseModel, frozen=True, extra="forbid"):
    type: Literal["plain_text_input"] = "plain_text_input"
    action_id: str
    placeholder: PlainText
    initial_value: str | None = None
    multiline: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    dispatch_action_config: DispatchActionConfiguration | None = None


class RadioButtonGroup(BaseModel, frozen=True, extra="forbid"):
    type: Literal["radio_buttons"] = "radio_buttons"
    action_id: str
    options: list[Option]
    initial_option: Option | None = None
    confirm: ConfirmationDialog | None = None


# --- select menu ---


class StaticSelect(BaseModel, frozen=True, extra="forbid"):
    """静的リストのselectメニュー

    with_options / with_option_groups のどちらかで構築する。
    """

    type: Literal["static_select"] = "static_select"
    action_id: str
    placeholder: PlainText
    options: list[Option] | None = None
    option_groups: list[OptionGroup] | None = None
    initial_option: Option | None = None
    confirm: ConfirmationDialog | None = None

    @model_validator(mode="after")
    def _check_options(self) -> "StaticSelect":
        _check_option_source(self.options, self.option_groups)
        return self

    @classmethod
    def with_options(
        cls,
        action_id: str,
        placeholder: PlainText,
        options: list[Option],
        *,
        initial_option: Option | None = None,
        confirm: ConfirmationDialog | None = None,
    ) -> "StaticSelect":
        return cls(
            action_id=action_id,
            placeholder=placeholder,
            options=options,
            initial_option=initial_option,
            confirm=confirm,
        )

    @classmethod
    def with_option_groups(
        cls,
        action_id: str,
        placeholder: PlainText,
        option_groups: list[OptionGroup],
        *,
        initial_option: Option | None = None,
        confirm: ConfirmationDialog | None = None,
    ) -> "StaticSelect":
        return cls(
            action_id=action_id,
            placeholder=placeholder,
            option_groups=option_groups,
            initial_option=initial_option,
            confirm=confirm,
        )


class ExternalSelect(BaseModel, frozen=True, extra="forbid"):
    """外部データソースから選択肢を読み込むselectメニュー"""

    type: Literal["external_select"] = "external_select"
    action_id: str
    placeholder: PlainText
    min_query_length: int | None = None
    initial_option: Option | None = None
    confirm: ConfirmationDialog | None = None


class UsersSelect(BaseModel, frozen=True, extra="forbid"):
    type: Literal["users_select"] = "users_select"
    action_id: str
    placeholder: PlainText
    initial_user: str | None = None
    confirm: ConfirmationDialog | None = None


class ConversationsSelect(BaseModel, frozen=True, extra="forbid"):
    type: Literal["conversations_select"] = "conversations_select"
    action_id: str
    placeholder: PlainText
    initial_conversation: str | None = None
    default_to_current_conversation: bool | None = None
    confirm: ConfirmationDialog | None = None
    response_url_enabled: bool | None = None  # inputブロック内のモーダルでのみ有効
    filter: FilterForConversationList | None = None


class ChannelsSelect(BaseModel, frozen=True, extra="forbid"):
    """パブリックチャンネルのselectメニュー"""

    type: Literal["channels_select"] = "channels_select"
    action_id: str
    placeholder: PlainText
    initial_channel: str | None = None
    confirm: ConfirmationDialog | None = None
    response_url_enabled: bool | None = None


SelectMenu = StaticSelect | ExternalSelect | UsersSelect | ConversationsSelect | ChannelsSelect


# --- multi-select menu ---


class MultiStaticSelect(BaseModel, frozen=True, extra="forbid"):
    """静的リストのmulti-selectメニュー

    with_options / with_option_groups のどちらかで構築する。
    """

    type: Literal["multi_static_select"] = "multi_static_select"
    action_id: str
    placeholder: PlainText
    options: list[Option] | None = None
    option_groups: list[OptionGroup] | None = None
    initial_options: list[Option] | None = None
    confirm: ConfirmationDialog | None = None
    max_selected_items: int | None = None

    @model_validator(mode="after")
    def _check_options(self) -> "MultiStaticSelect":
        _check_option_source(self.options, self.option_groups)
        return self

    @classmethod
    def with_options(
        cls,
        action_id: str,
        placeholder: PlainText,
        options: list[Option],
        *,
        initial_options: list[Option] | None = None,
        confirm: ConfirmationDialog | None = None,
        max_selected_items: int | None = None,
    ) -> "MultiStaticSelect":
        return cls(
            action_id=action_id,
            placeholder=placeholder,
            options=options,
            initial_options=initial_options,
            confirm=confirm,
            max_selected_items=max_selected_items,
        )

    @classmethod
    def with_option_groups(
        cls,
        action_id: str,
        placeholder: PlainText,
        option_groups: list[OptionGroup],
        *,
        initial_options: list[Option] | None = None,
        confirm: ConfirmationDialog | None = None,
        max_selected_items: int | None = None,
    ) -> "MultiStaticSelect":
        return cls(
            action_id=action_id,
            placeholder=placeholder,
            option_groups=option_groups,
            initial_options=initial_options,
            confirm=confirm,
            max_selected_items=max_selected_items,
        )


class MultiExternalSelect(BaseModel, frozen=True, extra="forbid"):
    type: Literal["multi_external_select"] = "multi_external_select"
    action_id: str
    placeholder: PlainText
    min_query_length: int | None = None
    initial_options: list[Option] | None = None
    confirm: ConfirmationDialog | None = None
    max_selected_items: int | None = None


class MultiUsersSelect(BaseModel, frozen=True, extra="forbid"):
    type: Literal["multi_users_select"] = "multi_users_select"
    action_id: str
    placeholder: PlainText
    initial_users: list[str] | None = None
    confirm: ConfirmationDialog | None = None
    max_selected_items: int | None = None


class MultiConversationsSelect(BaseModel, frozen=True, extra="forbid"):
    type: Literal["multi_conversations_select"] = "multi_conversations_select"
    action_id: str
    placeholder: PlainText
    initial_conversations: list[str] | None = None
    default_to_current_conversation: bool | None = None
    confirm: ConfirmationDialog | None = None
    max_selected_items: int | None = None
    filter: FilterForConversationList | None = None


class MultiChannelsSelect(BaseModel, frozen=True, extra="forbid"):
    type: Literal["multi_channels_select"] = "multi_channels_select"
    action_id: str
    placeholder: PlainText
    initial_channels: list[str] | None = None
    confirm: ConfirmationDialog | None = None
    max_selected_items: int | None = None


MultiSelectMenu = (
    MultiStaticSelect | MultiExternalSelect | MultiUsersSelect | MultiConversationsSelect | MultiChannelsSelect
)

InteractiveElement = (
    Button
    | CheckboxGroup
    | DatePicker
    | ImageElement
    | MultiSelectMenu
    | OverflowMenu
    | PlainTextInput
    | RadioButtonGroup
    | SelectMenu
    | TimePicker
)

BlockElement = Annotated[InteractiveElement, Field(discriminator="type")]


# --- helper constructors ---


def button(
    text: str,
    action_id: str,
    *,
    emoji: bool | None = None,
    url: str | None = None,
    value: str | None = None,
    style: Literal["primary", "danger"] | None = None,
    confirm: ConfirmationDialog | None = None,
) -> Button:
    """ボタン要素を生成する

    Args:
        text: ボタンのラベル（最大75文字）
        action_id: アクションの識別子（最大255文字）
        emoji: ラベルのemojiフラグ
        url: クリック時に開くURL
        value: interaction payloadに含める値
        style: primary（緑）またはdanger（赤）。省略時はデフォルトスタイル
        confirm: クリック後に表示する確認ダイアログ

    Returns:
        Button
    """
    return Button(
        text=plain_text(text, emoji),
        action_id=action_id,
        url=url,
        value=value,
        style=style,
        confirm=confirm,
    )


def checkbox_group(
    action_id: str,
    options: list[Option],
    *,
    initial_options: list[Option] | None = None,
    confirm: ConfirmationDialog | None = None,
) -> CheckboxGroup:
    return CheckboxGroup(action_id=action_id, options=options, initial_options=initial_options, confirm=confirm)


def date_picker(
    action_id: str,
    *,
    placeholder: str | None = None,
    placeholder_emoji: bool | None = None,
    initial_date: date | None = None,
    confirm: ConfirmationDialog | None = None,
) -> DatePicker:
    """日付ピッカーを生成する。initial_dateはYYYY-MM-DDに変換される"""
    return DatePicker(
        action_id=action_id,
        placeholder=plain_text(placeholder, placeholder_emoji) if placeholder is not None else None,
        initial_date=format_date(initial_date) if initial_date is not None else None,
        confirm=confirm,
    )


def time_picker(
    action_id: str,
    *,
    placeholder: str | None = None,
    placeholder_emoji: bool | None = None,
    initial_time: time | datetime | None = None,
    confirm: ConfirmationDialog | None = None,
) -> TimePicker:
    """時刻ピッカーを生成する。initial_timeはHH:mmに変換される"""
    return TimePicker(
        action_id=action_id,
        placeholder=plain_text(placeholder, placeholder_emoji) if placeholder is not None else None,
        initial_time=format_time(initial_time) if initial_time is not None else None,
        confirm=confirm,
    )


def image_element(image_url: str, alt_text: str) -> ImageElement:
    return ImageElement(image_url=image_url, alt_text=alt_text)


def overflow_menu(
    action_id: str,
    options: list[Option],
    *,
    confirm: ConfirmationDialog | None = None,
) -> OverflowMenu:
    return OverflowMenu(action_id=action_id, options=options, confirm=confirm)


def plain_text_input(
    action_id: str,
    placeholder: str,
    *,
    placeholder_emoji: bool | None = None,
    initial_value: str | None = None,
    multiline: bool | None = None,
    min_length: int | None = None,
    max_length: int | None = None,
    dispatch_action_config: DispatchActionConfiguration | None = None,
) -> PlainTextInput:
    return PlainTextInput(
        action_id=action_id,
        placeholder=plain_text(placeholder, placeholder_emoji),
        initial_value=initial_value,
        multiline=multiline,
        min_length=min_length,
        max_length=max_length,
        dispatch_action_config=dispatch_action_config,
    )


def radio_button_group(
    action_id: str,
    options: list[Option],
    *,
    initial_option: Option | None = None,
    confirm: ConfirmationDialog | None = None,
) -> RadioButtonGroup:
    return RadioButtonGroup(action_id=action_id, options=options, initial_option=initial_option, confirm=confirm)

