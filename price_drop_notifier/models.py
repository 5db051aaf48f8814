"""Data models for price tracking."""

from dataclasses import dataclass
from enum import Enum


class Seller(str, Enum):
    """Tracked seller, in configuration order."""

    IBOX = "ibox"
    DIGIMAP = "digimap"
    ERASPACE = "eraspace"


class HealthStatus(str, Enum):
    """Per-run reachability of a seller, rendered as a glyph."""

    UNKNOWN = "🔴"
    OK = "🟢"


class MessageKind(str, Enum):
    HEALTH = "health"
    FETCH_FAILURE = "fetch_failure"
    PRICE_DROP = "price_drop"
    BUY_NOW = "buy_now"


@dataclass(frozen=True)
class FetchResult:
    """Status code and body of a fetched product page."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class NotificationEvent:
    """A message to render and dispatch. Never persisted."""

    seller_name: str
    kind: MessageKind
    percentage: int | None = None
    price: float | None = None
    response_code: int | None = None
