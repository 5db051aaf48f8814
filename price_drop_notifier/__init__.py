"""Price drop notifier: scrape seller pages and alert on price drops via Telegram."""

__version__ = "0.1.0"
