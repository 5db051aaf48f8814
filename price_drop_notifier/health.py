"""Per-run seller health map."""

from collections.abc import Iterable
from datetime import datetime

from price_drop_notifier.messages import health_check_text
from price_drop_notifier.models import HealthStatus, Seller


class HealthTracker:
    """Every seller starts UNKNOWN; a successful fetch marks it OK for this run."""

    def __init__(self, sellers: Iterable[Seller]):
        self._statuses: dict[Seller, HealthStatus] = {s: HealthStatus.UNKNOWN for s in sellers}

    def mark_ok(self, seller: Seller) -> None:
        self._statuses[seller] = HealthStatus.OK

    def status(self, seller: Seller) -> HealthStatus:
        return self._statuses[seller]

    def summary(self, now: datetime | None = None) -> str:
        return health_check_text(self._statuses, now)
