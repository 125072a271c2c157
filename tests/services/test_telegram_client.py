"""Tests for the Telegram Bot API client."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from showscout.services.telegram_client import TelegramClient, TelegramError


def make_client_mock(post: AsyncMock) -> AsyncMock:
    mock_client = AsyncMock()
    mock_client.post = post
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client


def make_response(data: dict) -> MagicMock:
    response = MagicMock()
    response.json = MagicMock(return_value=data)
    return response


class TestTelegramClient:
    async def test_sends_markdown_message(self) -> None:
        client = TelegramClient(bot_token="123:abc", chat_id="42")
        post = AsyncMock(return_value=make_response({"ok": True, "result": {"message_id": 7}}))

        with patch("httpx.AsyncClient", return_value=make_client_mock(post)):
            result = await client.send_message("*Hello*")

        assert result == {"message_id": 7}
        url = post.call_args.args[0]
        payload = post.call_args.kwargs["json"]
        assert url == "https://api.telegram.org/bot123:abc/sendMessage"
        assert payload["chat_id"] == "42"
        assert payload["text"] == "*Hello*"
        assert payload["parse_mode"] == "Markdown"
        assert payload["disable_web_page_preview"] is False

    async def test_disable_preview(self) -> None:
        client = TelegramClient(bot_token="123:abc", chat_id="42")
        post = AsyncMock(return_value=make_response({"ok": True, "result": {}}))

        with patch("httpx.AsyncClient", return_value=make_client_mock(post)):
            await client.send_message("hi", disable_preview=True)

        assert post.call_args.kwargs["json"]["disable_web_page_preview"] is True

    async def test_raises_on_api_error(self) -> None:
        client = TelegramClient(bot_token="123:abc", chat_id="42")
        post = AsyncMock(return_value=make_response({"ok": False, "description": "chat not found"}))

        with patch("httpx.AsyncClient", return_value=make_client_mock(post)):
            with pytest.raises(TelegramError, match="chat not found"):
                await client.send_message("hi")

    async def test_propagates_transport_errors(self) -> None:
        client = TelegramClient(bot_token="123:abc", chat_id="42")
        post = AsyncMock(side_effect=httpx.ConnectError("Connection refused"))

        with patch("httpx.AsyncClient", return_value=make_client_mock(post)):
            with pytest.raises(httpx.ConnectError):
                await client.send_message("hi")

    async def test_raises_on_http_status_error(self) -> None:
        client = TelegramClient(bot_token="123:abc", chat_id="42")
        request = httpx.Request("POST", "https://api.telegram.org/bot123:abc/sendMessage")
        response = httpx.Response(502, text="<html>Bad Gateway</html>", request=request)
        post = AsyncMock(return_value=response)

        with patch("httpx.AsyncClient", return_value=make_client_mock(post)):
            with pytest.raises(httpx.HTTPStatusError):
                await client.send_message("hi")

    def test_uses_settings_by_default(self, monkeypatch) -> None:
        from showscout.config import settings

        monkeypatch.setattr(settings, "telegram_bot_token", "999:xyz")
        monkeypatch.setattr(settings, "telegram_chat_id", "-100")

        client = TelegramClient()

        assert client.bot_token == "999:xyz"
        assert client.chat_id == "-100"
