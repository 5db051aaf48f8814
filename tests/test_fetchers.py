from __future__ import annotations

import pytest
import requests

from price_drop_notifier.errors import FetchError
from price_drop_notifier.fetchers import fetch_product_page
from price_drop_notifier.models import Seller
from price_drop_notifier.sellers import SELLERS
from tests.conftest import FakeResponse, FakeSession


def test_returns_status_and_body() -> None:
    session = FakeSession(FakeResponse(200, "<html></html>"))
    result = fetch_product_page(SELLERS[Seller.IBOX], session, timeout=3)

    assert result.ok
    assert result.body == "<html></html>"
    assert session.calls == [("GET", SELLERS[Seller.IBOX].url, {"timeout": 3})]


def test_error_status_is_returned_not_raised() -> None:
    result = fetch_product_page(SELLERS[Seller.DIGIMAP], FakeSession(FakeResponse(404, "nope")))
    assert not result.ok
    assert result.status_code == 404


def test_transport_error_raises_fetch_error(connection_error: requests.ConnectionError) -> None:
    with pytest.raises(FetchError, match="Eraspace"):
        fetch_product_page(SELLERS[Seller.ERASPACE], FakeSession(error=connection_error))
