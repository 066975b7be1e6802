"""ChatClientとTransportのテスト"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from chat_kit.api.client import AiohttpTransport, ChatClient, PreparedRequest, Transport, prepare_request
from chat_kit.api.operations import POST_MESSAGE, MessageResponse, PostMessageBody
from chat_kit.api.router import HTTPMethod
from chat_kit.blockkit import header_block
from chat_kit.config import Config
from chat_kit.exceptions import ResponseDecodeError


def _make_mock_response(body: bytes) -> AsyncMock:
    """モックされたaiohttpレスポンスを作成するヘルパー"""
    mock_response = AsyncMock()
    mock_response.raise_for_status = MagicMock()
    mock_response.read = AsyncMock(return_value=body)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=False)
    return mock_response


class TestPrepareRequest:
    """prepare_requestのテスト"""

    def test_builds_url_and_headers(self) -> None:
        """ベースURLとパスを結合し、Bearerトークンを付与すること"""
        body = PostMessageBody(channel="C1", text="hi")
        request = prepare_request(POST_MESSAGE, body, base_url="https://slack.com/api/", token="xoxb-1")

        assert request.method is HTTPMethod.POST
        assert request.url == "https://slack.com/api/chat.postMessage"
        assert request.headers["Authorization"] == "Bearer xoxb-1"
        assert request.headers["Content-Type"] == "application/json; charset=utf-8"
        assert request.json == {"channel": "C1", "text": "hi"}

    def test_without_token(self) -> None:
        """トークンがなければAuthorizationヘッダーを付けないこと"""
        body = PostMessageBody(channel="C1", text="hi")
        request = prepare_request(POST_MESSAGE, body, base_url="https://example.com/api")
        assert "Authorization" not in request.headers


class TestChatClient:
    """ChatClientのテスト"""

    async def test_call_returns_decoded_response(self) -> None:
        """送信したレスポンスがデコードされて返ること"""
        transport = AsyncMock()
        transport.send.return_value = b'{"ok": true, "ts": "1234.5678"}'
        client = ChatClient(transport, Config(token="xoxb-test", api_base_url="https://slack.example/api"))

        body = PostMessageBody(channel="C1", text="fallback", blocks=[header_block("見出し")])
        response = await client.call(POST_MESSAGE, body)

        assert response == MessageResponse(ok=True, ts="1234.5678")
        request = transport.send.call_args.args[0]
        assert isinstance(request, PreparedRequest)
        assert request.url == "https://slack.example/api/chat.postMessage"
        assert request.headers["Authorization"] == "Bearer xoxb-test"
        assert request.json["blocks"][0]["type"] == "header"

    async def test_call_returns_error_response_as_data(self) -> None:
        """ok: falseのレスポンスは例外にせず返すこと"""
        transport = AsyncMock()
        transport.send.return_value = b'{"ok": false, "error": "channel_not_found"}'
        client = ChatClient(transport, Config())

        response = await client.call(POST_MESSAGE, PostMessageBody(channel="C1", text="hi"))

        assert response.ok is False
        assert response.error == "channel_not_found"

    async def test_call_raises_on_malformed_response(self) -> None:
        """デコードできないレスポンスでResponseDecodeErrorになること"""
        transport = AsyncMock()
        transport.send.return_value = b"not json"
        client = ChatClient(transport, Config())

        with pytest.raises(ResponseDecodeError):
            await client.call(POST_MESSAGE, PostMessageBody(channel="C1", text="hi"))


class TestAiohttpTransport:
    """AiohttpTransportのテスト"""

    def test_satisfies_transport_protocol(self) -> None:
        """TransportのProtocolを満たすこと"""
        assert isinstance(AiohttpTransport(MagicMock()), Transport)

    async def test_send_posts_json(self) -> None:
        """セッションにJSONボディとヘッダーを渡し、レスポンスボディを返すこと"""
        payload = json.dumps({"ok": True}).encode()
        mock_response = _make_mock_response(payload)
        session = MagicMock()
        session.request = MagicMock(return_value=mock_response)

        transport = AiohttpTransport(session, timeout_seconds=5.0)
        request = PreparedRequest(
            method=HTTPMethod.POST,
            url="https://slack.com/api/chat.postMessage",
            json={"channel": "C1", "text": "hi"},
            headers={"Authorization": "Bearer xoxb-1"},
        )
        result = await transport.send(request)

        assert result == payload
        args, kwargs = session.request.call_args
        assert args == ("POST", "https://slack.com/api/chat.postMessage")
        assert kwargs["json"] == {"channel": "C1", "text": "hi"}
        assert kwargs["headers"] == {"Authorization": "Bearer xoxb-1"}
        assert kwargs["timeout"].total == 5.0
        mock_response.raise_for_status.assert_called_once()

    async def test_from_config_uses_configured_timeout(self) -> None:
        """設定のtimeout_secondsがリクエストのタイムアウトに使われること"""
        mock_response = _make_mock_response(b"{}")
        session = MagicMock()
        session.request = MagicMock(return_value=mock_response)

        transport = AiohttpTransport.from_config(session, Config(timeout_seconds=1.5))
        await transport.send(PreparedRequest(method=HTTPMethod.POST, url="https://slack.com/api/chat.update", json={}))

        _, kwargs = session.request.call_args
        assert kwargs["timeout"].total == 1.5

    async def test_send_propagates_http_errors(self) -> None:
        """HTTPエラーを握りつぶさずに送出すること"""
        mock_response = _make_mock_response(b"")
        mock_response.raise_for_status = MagicMock(side_effect=RuntimeError("429"))
        session = MagicMock()
        session.request = MagicMock(return_value=mock_response)

        transport = AiohttpTransport(session)
        request = PreparedRequest(method=HTTPMethod.POST, url="https://slack.com/api/chat.update", json={})

        with pytest.raises(RuntimeError, match="429"):
            await transport.send(request)
