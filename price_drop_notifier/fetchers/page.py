"""Plain GET of a seller's product page."""

import logging

import requests

from price_drop_notifier.errors import FetchError
from price_drop_notifier.models import FetchResult
from price_drop_notifier.sellers import SellerConfig

logger = logging.getLogger(__name__)


def fetch_product_page(
    config: SellerConfig,
    session: requests.Session,
    timeout: float = 15,
) -> FetchResult:
    """
    Fetch the seller's product page.

    A non-2xx status is returned, not raised; only transport failures raise
    FetchError. No retries.
    """
    try:
        logger.debug("%s: GET %s", config.display_name, config.url)
        resp = session.get(config.url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"{config.display_name} fetch failed: {e}") from e

    logger.info("%s: HTTP %d", config.display_name, resp.status_code)
    return FetchResult(status_code=resp.status_code, body=resp.text)
