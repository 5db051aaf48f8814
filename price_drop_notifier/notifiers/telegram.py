"""Telegram Bot API: send new messages and edit the pinned health message."""

import logging

import requests

from price_drop_notifier.config import Settings
from price_drop_notifier.errors import ConfigError, NotificationDispatchError

logger = logging.getLogger(__name__)

TELEGRAM_API = "https://api.telegram.org/bot{token}/{method}"


class TelegramNotifier:
    """
    Form-encoded POSTs to the Bot API.

    Requires a bot token, a chat id and, for edits, the id of the pinned
    health-check message.
    """

    def __init__(
        self,
        token: str,
        chat_id: str,
        message_id: str,
        session: requests.Session | None = None,
        timeout: float = 10,
    ):
        if not token or not chat_id or not message_id:
            raise ConfigError("Telegram token, chat id and message id are all required")
        self.token = token
        self.chat_id = chat_id
        self.message_id = message_id
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings, session: requests.Session | None = None) -> "TelegramNotifier":
        return cls(
            token=settings.telegram_bot_token,
            chat_id=settings.telegram_chat_id,
            message_id=settings.telegram_message_id,
            session=session,
            timeout=settings.request_timeout,
        )

    def _post(self, method: str, form: dict) -> None:
        url = TELEGRAM_API.format(token=self.token, method=method)
        try:
            logger.debug("Telegram: %s", method)
            resp = self.session.post(url, data=form, timeout=self.timeout)
        except requests.RequestException as e:
            raise NotificationDispatchError(f"Telegram {method} request failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            raise NotificationDispatchError(
                f"Telegram {method} failed with status {resp.status_code}: {resp.text[:200]}"
            )

    def send_message(self, text: str) -> None:
        self._post("sendMessage", {"chat_id": self.chat_id, "text": text})
        logger.info("Telegram: message sent")

    def edit_message(self, text: str) -> None:
        """Replace the text of the pinned health-check message."""
        self._post(
            "editMessageText",
            {"chat_id": self.chat_id, "message_id": self.message_id, "text": text},
        )
        logger.info("Telegram: health message updated")
