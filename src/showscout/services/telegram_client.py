"""Telegram Bot API client for sending notifications."""

import logging
from typing import Any

import httpx

from showscout.config import settings

logger = logging.getLogger(__name__)


class TelegramError(Exception):
    """Raised when the Telegram API rejects a message."""


class TelegramClient:
    """Client for the Telegram Bot API."""

    BASE_URL = "https://api.telegram.org"

    def __init__(self, bot_token: str | None = None, chat_id: str | None = None) -> None:
        """
        Initialize Telegram client.

        Args:
            bot_token: Bot token (uses settings if not provided)
            chat_id: Target chat id (uses settings if not provided)
        """
        self.bot_token = bot_token or settings.telegram_bot_token
        self.chat_id = chat_id or settings.telegram_chat_id
        if not self.bot_token or not self.chat_id:
            logger.warning("Telegram bot token or chat id not configured")

    async def send_message(self, text: str, disable_preview: bool = False) -> dict[str, Any]:
        """
        Send a Markdown message to the configured chat.

        Args:
            text: Message body (Telegram Markdown)
            disable_preview: Suppress the link preview

        Returns:
            The sent message object from the API

        Raises:
            TelegramError: If the API answers with ok=false
            httpx.HTTPError: On transport or HTTP status errors
            ValueError: If the response body is not JSON
        """
        payload = {
            "chat_id": self.chat_id,
            "text": text,
            "parse_mode": "Markdown",
            "disable_web_page_preview": disable_preview,
        }

        logger.info("Sending Telegram notification...")
        try:
            async with httpx.AsyncClient(timeout=settings.telegram_timeout) as client:
                response = await client.post(
                    f"{self.BASE_URL}/bot{self.bot_token}/sendMessage", json=payload
                )
                response.raise_for_status()
                data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to send Telegram notification: {e}", exc_info=True)
            raise

        if not data.get("ok"):
            description = data.get("description", "unknown error")
            logger.error(f"Telegram API response: {data}")
            raise TelegramError(f"Telegram API error: {description}")

        logger.info("Telegram notification sent successfully")
        return data.get("result", {})
