"""Price comparison and target threshold logic."""

import logging

from price_drop_notifier.messages import drop_percentage
from price_drop_notifier.models import MessageKind, NotificationEvent, Seller
from price_drop_notifier.sellers import display_name
from price_drop_notifier.storage import PriceStore

logger = logging.getLogger(__name__)


def decide(
    seller: Seller,
    current_price: float,
    latest_price: float,
    target_price: float,
) -> NotificationEvent | None:
    """
    Choose the notification for a newly observed price.

    None when the price did not drop. Otherwise a buy-now event when the
    price is at or below target, else a price-drop event.
    """
    if current_price >= latest_price:
        return None

    kind = MessageKind.PRICE_DROP if current_price > target_price else MessageKind.BUY_NOW
    return NotificationEvent(
        seller_name=display_name(seller),
        kind=kind,
        percentage=drop_percentage(latest_price, current_price),
        price=current_price,
    )


def record_and_check(
    seller: Seller,
    current_price: float,
    store: PriceStore,
    target_price: float,
) -> NotificationEvent | None:
    """
    Compare against the last recorded price, appending it when lower.

    Raises StoreUnavailable when the seller's history has not been seeded.
    """
    latest_price = store.last_price(seller)
    event = decide(seller, current_price, latest_price, target_price)
    if event is None:
        logger.info(
            "%s: no drop (current %s, last %s)", display_name(seller), current_price, latest_price
        )
        return None

    store.append(seller, current_price)
    logger.info(
        "%s: dropped %d%% to %s (target %s)",
        event.seller_name, event.percentage, current_price, target_price,
    )
    return event
