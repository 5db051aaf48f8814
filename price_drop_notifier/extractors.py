"""Extract the current price from a raw product page."""

import logging
import math
import re

from price_drop_notifier.models import Seller
from price_drop_notifier.sellers import SELLERS

logger = logging.getLogger(__name__)


def _parse_price(text: str) -> float | None:
    """Coerce a captured JSON value like '1234.0' or '"1234"' to a finite float."""
    try:
        price = float(text.strip().strip('"'))
    except ValueError:
        return None
    return price if math.isfinite(price) else None


def extract_with(rule: tuple[re.Pattern, ...], body: str) -> float | None:
    """Return the first numeric match of the ordered patterns, or None."""
    for pattern in rule:
        match = pattern.search(body)
        if not match:
            continue
        price = _parse_price(match.group(1))
        if price is not None:
            return price
        logger.debug("Pattern %s matched non-numeric value %r", pattern.pattern, match.group(1))
    return None


def extract_price(seller: Seller, body: str) -> float | None:
    """
    Extract the price from a seller's page body.

    Returns None when no pattern yields a number; callers skip the drop
    decision in that case.
    """
    return extract_with(SELLERS[seller].price_rule, body)
