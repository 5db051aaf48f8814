"""One run: health check, then fetch, extract, compare and notify per seller."""

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

from price_drop_notifier.comparator import record_and_check
from price_drop_notifier.config import Settings
from price_drop_notifier.error_log import ErrorLogger
from price_drop_notifier.errors import FetchError, PriceDropNotifierError
from price_drop_notifier.extractors import extract_price
from price_drop_notifier.health import HealthTracker
from price_drop_notifier.messages import render
from price_drop_notifier.models import FetchResult, MessageKind, NotificationEvent, Seller
from price_drop_notifier.sellers import SELLERS, SellerConfig
from price_drop_notifier.storage import PriceStore

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    def send_message(self, text: str) -> None: ...

    def edit_message(self, text: str) -> None: ...


class Outcome(str, Enum):
    """How a seller's processing ended in a run."""

    FETCH_ERROR = "fetch_error"
    FETCH_FAILED = "fetch_failed"
    PRICE_NOT_FOUND = "price_not_found"
    UNCHANGED = "unchanged"
    PRICE_DROP = "price_drop"
    BUY_NOW = "buy_now"
    ERROR = "error"


@dataclass
class RunReport:
    outcomes: dict[Seller, Outcome] = field(default_factory=dict)
    prices: dict[Seller, float] = field(default_factory=dict)
    health_published: bool = False


class RunOrchestrator:
    """
    Drives a single run over the seller table, strictly in order.

    Failures in one seller are logged and never stop the next one.
    """

    def __init__(
        self,
        settings: Settings,
        notifier: Notifier,
        store: PriceStore,
        fetch: Callable[[SellerConfig], FetchResult],
        error_logger: ErrorLogger,
        sellers: Mapping[Seller, SellerConfig] = SELLERS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings = settings
        self.notifier = notifier
        self.store = store
        self.fetch = fetch
        self.error_logger = error_logger
        self.sellers = sellers
        self.sleep = sleep

    def publish_health(self, health: HealthTracker) -> bool:
        """Best-effort edit of the pinned health message."""
        try:
            self.notifier.edit_message(health.summary())
            return True
        except PriceDropNotifierError as e:
            self.error_logger.log(e, context="health check")
            return False
        except Exception as e:
            self.error_logger.log(e, context="health check (unexpected)")
            return False

    def run(self) -> RunReport:
        health = HealthTracker(self.sellers)
        report = RunReport()
        report.health_published = self.publish_health(health)

        for seller, config in self.sellers.items():
            try:
                report.outcomes[seller] = self._process(seller, config, health, report)
            except PriceDropNotifierError as e:
                self.error_logger.log(e, context=config.display_name)
                report.outcomes[seller] = (
                    Outcome.FETCH_ERROR if isinstance(e, FetchError) else Outcome.ERROR
                )
            except Exception as e:
                # Any other failure stays confined to this seller.
                self.error_logger.log(e, context=f"{config.display_name} (unexpected)")
                report.outcomes[seller] = Outcome.ERROR

        logger.info(
            "Run finished: %s",
            ", ".join(f"{s.value}={o.value}" for s, o in report.outcomes.items()),
        )
        return report

    def _process(
        self,
        seller: Seller,
        config: SellerConfig,
        health: HealthTracker,
        report: RunReport,
    ) -> Outcome:
        self.sleep(self.settings.fetch_delay_seconds)

        result = self.fetch(config)
        if not result.ok:
            event = NotificationEvent(
                seller_name=config.display_name,
                kind=MessageKind.FETCH_FAILURE,
                response_code=result.status_code,
            )
            self.notifier.send_message(render(event))
            return Outcome.FETCH_FAILED

        health.mark_ok(seller)
        self.publish_health(health)

        price = extract_price(seller, result.body)
        if price is None:
            logger.info("%s: price not found on page", config.display_name)
            return Outcome.PRICE_NOT_FOUND
        report.prices[seller] = price

        event = record_and_check(seller, price, self.store, self.settings.target_price)
        if event is None:
            return Outcome.UNCHANGED

        self.notifier.send_message(render(event))
        return Outcome.BUY_NOW if event.kind is MessageKind.BUY_NOW else Outcome.PRICE_DROP
