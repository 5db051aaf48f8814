"""Message text for health checks, fetch failures and price alerts."""

from collections.abc import Mapping
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from price_drop_notifier.models import HealthStatus, MessageKind, NotificationEvent, Seller
from price_drop_notifier.sellers import display_name


def format_timestamp(now: datetime) -> str:
    """e.g. '7 March 2024 09:05:01' (day without leading zero)."""
    return f"{now.day} {now:%B %Y %H:%M:%S}"


def format_price(price: float) -> str:
    """Integral prices drop the trailing '.0'."""
    price = float(price)
    if price.is_integer():
        return str(int(price))
    return str(price)


def drop_percentage(latest_price: float, current_price: float) -> int:
    """Percentage change from latest to current, rounded half away from zero."""
    ratio = abs((Decimal(str(current_price)) - Decimal(str(latest_price))) / Decimal(str(latest_price)))
    return int((ratio * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def health_check_text(statuses: Mapping[Seller, HealthStatus], now: datetime | None = None) -> str:
    """Pinned status message: last-run time and one glyph per seller."""
    now = now or datetime.now()
    lines = [f"{display_name(seller)}: {status.value}" for seller, status in statuses.items()]
    return f"Last run: {format_timestamp(now)}\n\n" + "\n".join(lines)


def fetch_failure_text(seller_name: str, response_code: int) -> str:
    """Message for a page fetch that returned a non-success status."""
    return f"Failed to perform request to check {seller_name} price with response code {response_code}"


def price_dropped_text(seller_name: str, percentage: int, price: float) -> str:
    """Message for a price drop still above the target price."""
    return (
        f"The {seller_name} price has been dropped {percentage}% "
        f"from its original price to Rp{format_price(price)}"
    )


def buy_now_text(seller_name: str, percentage: int, price: float) -> str:
    """Price-drop message with the buy-now banner, for prices at or below target."""
    return "IT'S TIME TO BUY!\n\n" + price_dropped_text(seller_name, percentage, price)


def render(event: NotificationEvent) -> str:
    """Render a fetch-failure, price-drop or buy-now event to message text."""
    if event.kind is MessageKind.FETCH_FAILURE:
        return fetch_failure_text(event.seller_name, event.response_code)
    if event.kind is MessageKind.PRICE_DROP:
        return price_dropped_text(event.seller_name, event.percentage, event.price)
    if event.kind is MessageKind.BUY_NOW:
        return buy_now_text(event.seller_name, event.percentage, event.price)
    raise ValueError(f"Cannot render {event.kind.value} event; use HealthTracker.summary()")
