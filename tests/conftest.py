"""Shared fakes: HTTP session, notifier and settings. No network access."""

from __future__ import annotations

from pathlib import Path

import pytest
import requests

from price_drop_notifier.config import Settings
from price_drop_notifier.errors import NotificationDispatchError
from price_drop_notifier.models import Seller
from price_drop_notifier.storage import PriceStore


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Records calls; returns a canned response or raises a canned error."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response or FakeResponse()
        self.error = error
        self.calls: list[tuple[str, str, dict]] = []

    def _call(self, method: str, url: str, **kwargs) -> FakeResponse:
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def get(self, url: str, **kwargs) -> FakeResponse:
        return self._call("GET", url, **kwargs)

    def post(self, url: str, **kwargs) -> FakeResponse:
        return self._call("POST", url, **kwargs)


class FakeNotifier:
    def __init__(self, fail_edit: bool = False, fail_send: bool = False) -> None:
        self.fail_edit = fail_edit
        self.fail_send = fail_send
        self.sent: list[str] = []
        self.edits: list[str] = []

    def send_message(self, text: str) -> None:
        if self.fail_send:
            raise NotificationDispatchError("send failed")
        self.sent.append(text)

    def edit_message(self, text: str) -> None:
        if self.fail_edit:
            raise NotificationDispatchError("edit failed")
        self.edits.append(text)


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        telegram_bot_token="TOKEN",
        telegram_chat_id="42",
        telegram_message_id="7",
        target_price=28_000_000,
        data_dir=tmp_path / "data",
        error_log_path=tmp_path / "errors.txt",
        fetch_delay_seconds=1,
    )


@pytest.fixture()
def store(settings: Settings) -> PriceStore:
    return PriceStore(settings.data_dir)


@pytest.fixture()
def seeded_store(store: PriceStore) -> PriceStore:
    for seller in Seller:
        store.seed(seller, 30_000_000)
    return store


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
