"""Configuration loaded from environment variables (and `.env`)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from price_drop_notifier.errors import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def load_env() -> None:
    """Load `.env` from the project root without overriding the real environment."""
    load_dotenv(PROJECT_ROOT / ".env")


def _require(name: str) -> str:
    val = os.environ.get(name, "").strip()
    if not val:
        raise ConfigError(f"{name} is not set")
    return val


def _float(name: str, default: str) -> float:
    val = os.environ.get(name, default)
    try:
        return float(val)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {val!r}") from e


def _int(name: str, default: str) -> int:
    val = os.environ.get(name, default)
    try:
        return int(val)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {val!r}") from e


@dataclass(frozen=True)
class Settings:
    telegram_bot_token: str
    telegram_chat_id: str
    telegram_message_id: str
    target_price: float
    data_dir: Path = Path("data")
    error_log_path: Path = Path("price_drop_notifier_logs.txt")
    fetch_delay_seconds: float = 1.0
    request_timeout: float = 15.0
    check_interval_minutes: int = 60
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the environment.

        The three Telegram credentials and TARGET_PRICE are required; a missing
        one raises ConfigError before any request is made.
        """
        settings = cls(
            telegram_bot_token=_require("TELEGRAM_BOT_TOKEN"),
            telegram_chat_id=_require("TELEGRAM_CHAT_ID"),
            telegram_message_id=_require("TELEGRAM_MESSAGE_ID"),
            target_price=_float("TARGET_PRICE", _require("TARGET_PRICE")),
            data_dir=Path(os.environ.get("DATA_DIR", "data")),
            error_log_path=Path(
                os.environ.get("ERROR_LOG_PATH", "price_drop_notifier_logs.txt")
            ),
            fetch_delay_seconds=_float("FETCH_DELAY_SECONDS", "1"),
            request_timeout=_float("REQUEST_TIMEOUT", "15"),
            check_interval_minutes=_int("CHECK_INTERVAL_MINUTES", "60"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
        if settings.fetch_delay_seconds <= 0:
            raise ConfigError("FETCH_DELAY_SECONDS must be greater than 0")
        if settings.check_interval_minutes <= 0:
            raise ConfigError("CHECK_INTERVAL_MINUTES must be greater than 0")
        return settings
