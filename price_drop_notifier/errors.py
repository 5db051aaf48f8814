"""Exception types raised by the notifier components."""


class PriceDropNotifierError(Exception):
    """Base class for expected failures, logged at the seller boundary."""


class ConfigError(PriceDropNotifierError):
    """Required configuration is missing or invalid."""


class FetchError(PriceDropNotifierError):
    """A seller's product page could not be reached."""


class StoreUnavailable(PriceDropNotifierError):
    """A seller's price history is missing, empty, or unreadable."""


class NotificationDispatchError(PriceDropNotifierError):
    """The messaging API could not be reached or rejected the request."""
