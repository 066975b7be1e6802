"""composition objectのテスト"""

import pytest
from pydantic import ValidationError

from chat_kit.blockkit.composition import (
    ConfirmationDialog,
    MarkdownText,
    Option,
    OptionGroup,
    PlainText,
    confirmation_dialog,
    dispatch_action_configuration,
    filter_for_conversation_list,
    markdown,
    markdown_option,
    option_group,
    plain_text,
    plain_text_option,
)
from chat_kit.codec import decode, encode


class TestText:
    """テキストオブジェクトのテスト"""

    def test_plain_text_serializes_type_and_text(self) -> None:
        """plain_textがtypeとtextを出力すること"""
        assert encode(plain_text("こんにちは")) == {"type": "plain_text", "text": "こんにちは"}

    def test_plain_text_with_emoji(self) -> None:
        """emoji指定時にemojiキーが出力されること"""
        assert encode(plain_text("hi :wave:", emoji=True)) == {
            "type": "plain_text",
            "text": "hi :wave:",
            "emoji": True,
        }

    def test_plain_text_never_has_verbatim(self) -> None:
        """plain_textはverbatimキーを出力しないこと"""
        assert "verbatim" not in encode(plain_text("a", emoji=False))

    def test_markdown_never_has_emoji(self) -> None:
        """mrkdwnはemojiキーを出力しないこと"""
        data = encode(markdown("*bold*", verbatim=True))
        assert data == {"type": "mrkdwn", "text": "*bold*", "verbatim": True}
        assert "emoji" not in data

    def test_plain_text_rejects_verbatim(self) -> None:
        """plain_textにverbatimを渡すとエラーになること"""
        with pytest.raises(ValidationError):
            PlainText(text="a", verbatim=True)  # type: ignore[call-arg]

    def test_markdown_rejects_emoji(self) -> None:
        """mrkdwnにemojiを渡すとエラーになること"""
        with pytest.raises(ValidationError):
            MarkdownText(text="a", emoji=True)  # type: ignore[call-arg]

    def test_type_is_fixed(self) -> None:
        """typeに別の値を渡すとエラーになること"""
        with pytest.raises(ValidationError):
            PlainText(type="mrkdwn", text="a")  # type: ignore[arg-type]

    def test_text_is_immutable(self) -> None:
        """テキストオブジェクトが変更できないこと"""
        text = plain_text("a")
        with pytest.raises(ValidationError):
            text.text = "b"  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        """同じ内容のテキストオブジェクトが等しいこと"""
        assert markdown("a", verbatim=True) == markdown("a", verbatim=True)
        assert markdown("a") != plain_text("a")


class TestOption:
    """Option / OptionGroupのテスト"""

    def test_plain_text_option_without_optional_fields(self) -> None:
        """任意フィールドがキーごと省略されること"""
        option = plain_text_option("赤", "red")
        assert encode(option) == {"text": {"type": "plain_text", "text": "赤"}, "value": "red"}

    def test_plain_text_option_with_description_and_url(self) -> None:
        """descriptionがplain_textで出力されること"""
        option = plain_text_option(
            "Docs",
            "docs",
            description="ドキュメント",
            description_emoji=True,
            url="https://example.com/docs",
        )
        assert encode(option) == {
            "text": {"type": "plain_text", "text": "Docs"},
            "value": "docs",
            "description": {"type": "plain_text", "text": "ドキュメント", "emoji": True},
            "url": "https://example.com/docs",
        }

    def test_markdown_option(self) -> None:
        """mrkdwnラベルの選択肢が生成できること"""
        option = markdown_option("*A*", "a", verbatim=False)
        assert encode(option)["text"] == {"type": "mrkdwn", "text": "*A*", "verbatim": False}

    def test_option_round_trip(self) -> None:
        """エンコードしたOptionをデコードすると元に戻ること"""
        option = markdown_option("*A*", "a", description="説明")
        assert decode(Option, encode(option)) == option

    def test_option_group(self) -> None:
        """OptionGroupのlabelがplain_textになること"""
        group = option_group("色", [plain_text_option("赤", "red")], emoji=True)
        assert isinstance(group, OptionGroup)
        assert encode(group) == {
            "label": {"type": "plain_text", "text": "色", "emoji": True},
            "options": [{"text": {"type": "plain_text", "text": "赤"}, "value": "red"}],
        }


class TestConfirmationDialog:
    """確認ダイアログのテスト"""

    def test_confirmation_dialog(self) -> None:
        """本文以外がplain_textで組み立てられること"""
        dialog = confirmation_dialog(
            "本当に削除しますか？",
            markdown("*元に戻せません*"),
            "削除",
            "キャンセル",
            confirm_emoji=True,
            style="danger",
        )
        assert encode(dialog) == {
            "title": {"type": "plain_text", "text": "本当に削除しますか？"},
            "text": {"type": "mrkdwn", "text": "*元に戻せません*"},
            "confirm": {"type": "plain_text", "text": "削除", "emoji": True},
            "deny": {"type": "plain_text", "text": "キャンセル"},
            "style": "danger",
        }

    def test_rejects_unknown_style(self) -> None:
        """primary/danger以外のstyleでエラーになること"""
        with pytest.raises(ValidationError):
            ConfirmationDialog(
                title=plain_text("t"),
                text=plain_text("b"),
                confirm=plain_text("y"),
                deny=plain_text("n"),
                style="warning",  # type: ignore[arg-type]
            )

    def test_title_must_be_plain_text(self) -> None:
        """titleにmrkdwnを渡すとエラーになること"""
        with pytest.raises(ValidationError):
            ConfirmationDialog(
                title=markdown("t"),  # type: ignore[arg-type]
                text=plain_text("b"),
                confirm=plain_text("y"),
                deny=plain_text("n"),
            )


class TestConfigurationObjects:
    """DispatchActionConfiguration / FilterForConversationListのテスト"""

    def test_dispatch_action_configuration(self) -> None:
        """trigger_actions_onが出力されること"""
        config = dispatch_action_configuration(["on_enter_pressed", "on_character_entered"])
        assert encode(config) == {"trigger_actions_on": ["on_enter_pressed", "on_character_entered"]}

    def test_empty_dispatch_action_configuration(self) -> None:
        """未指定の場合は空のオブジェクトになること"""
        assert encode(dispatch_action_configuration()) == {}

    def test_dispatch_action_configuration_rejects_unknown_trigger(self) -> None:
        """未知のトリガーでエラーになること"""
        with pytest.raises(ValidationError):
            dispatch_action_configuration(["on_blur"])  # type: ignore[list-item]

    def test_filter_for_conversation_list(self) -> None:
        """フィルタ条件が出力されること"""
        conversation_filter = filter_for_conversation_list(include=["public", "private"], exclude_bot_users=True)
        assert encode(conversation_filter) == {"include": ["public", "private"], "exclude_bot_users": True}
