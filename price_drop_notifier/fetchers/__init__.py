"""Fetchers for seller product pages."""

from price_drop_notifier.fetchers.page import fetch_product_page

__all__ = ["fetch_product_page"]
