from __future__ import annotations

from pathlib import Path

import pytest

from price_drop_notifier.config import Settings
from price_drop_notifier.errors import ConfigError

REQUIRED = {
    "TELEGRAM_BOT_TOKEN": "TOKEN",
    "TELEGRAM_CHAT_ID": "42",
    "TELEGRAM_MESSAGE_ID": "7",
    "TARGET_PRICE": "28000000",
}
OPTIONAL = [
    "DATA_DIR",
    "ERROR_LOG_PATH",
    "FETCH_DELAY_SECONDS",
    "REQUEST_TIMEOUT",
    "CHECK_INTERVAL_MINUTES",
    "LOG_LEVEL",
]


@pytest.fixture()
def env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in OPTIONAL:
        monkeypatch.delenv(name, raising=False)
    for name, value in REQUIRED.items():
        monkeypatch.setenv(name, value)
    return monkeypatch


def test_defaults(env: pytest.MonkeyPatch) -> None:
    settings = Settings.from_env()

    assert settings.telegram_bot_token == "TOKEN"
    assert settings.target_price == 28_000_000.0
    assert settings.data_dir == Path("data")
    assert settings.error_log_path == Path("price_drop_notifier_logs.txt")
    assert settings.fetch_delay_seconds == 1.0
    assert settings.check_interval_minutes == 60


def test_overrides(env: pytest.MonkeyPatch) -> None:
    env.setenv("DATA_DIR", "/var/lib/prices")
    env.setenv("FETCH_DELAY_SECONDS", "2.5")
    env.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.data_dir == Path("/var/lib/prices")
    assert settings.fetch_delay_seconds == 2.5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("name", sorted(REQUIRED))
def test_missing_required_fails_fast(env: pytest.MonkeyPatch, name: str) -> None:
    env.delenv(name)
    with pytest.raises(ConfigError, match=name):
        Settings.from_env()


def test_blank_credential_counts_as_missing(env: pytest.MonkeyPatch) -> None:
    env.setenv("TELEGRAM_CHAT_ID", "  ")
    with pytest.raises(ConfigError):
        Settings.from_env()


def test_non_numeric_target(env: pytest.MonkeyPatch) -> None:
    env.setenv("TARGET_PRICE", "cheap")
    with pytest.raises(ConfigError, match="TARGET_PRICE"):
        Settings.from_env()


def test_delay_must_be_positive(env: pytest.MonkeyPatch) -> None:
    env.setenv("FETCH_DELAY_SECONDS", "0")
    with pytest.raises(ConfigError):
        Settings.from_env()
