"""Notification backends."""

from price_drop_notifier.notifiers.telegram import TelegramNotifier

__all__ = ["TelegramNotifier"]
