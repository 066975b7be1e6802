"""例外クラスのテスト"""

from chat_kit.exceptions import ChatAPIError, ChatKitError, ResponseDecodeError


def test_chat_kit_error_is_exception() -> None:
    """ChatKitErrorがExceptionを継承していること"""
    assert issubclass(ChatKitError, Exception)


def test_response_decode_error_inherits_chat_kit_error() -> None:
    """ResponseDecodeErrorがChatKitErrorを継承していること"""
    assert issubclass(ResponseDecodeError, ChatKitError)


def test_chat_api_error_inherits_chat_kit_error() -> None:
    """ChatAPIErrorがChatKitErrorを継承していること"""
    assert issubclass(ChatAPIError, ChatKitError)


def test_chat_api_error_stores_error_code() -> None:
    """ChatAPIErrorがerror_codeを保持すること"""
    error = ChatAPIError("API error occurred", "channel_not_found")
    assert error.error_code == "channel_not_found"
    assert str(error) == "API error occurred"


def test_response_decode_error_stores_raw() -> None:
    """ResponseDecodeErrorが生のレスポンスを保持すること"""
    error = ResponseDecodeError("decode failed", b"<html>")
    assert error.raw == b"<html>"
    assert str(error) == "decode failed"
