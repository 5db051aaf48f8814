"""Entry point: run once (for cron), run on an interval, or seed price history."""

import argparse
import logging
import math
import os
import sys
from functools import partial

import requests
from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.interval import IntervalTrigger

from price_drop_notifier.config import Settings, load_env
from price_drop_notifier.error_log import ErrorLogger
from price_drop_notifier.errors import ConfigError
from price_drop_notifier.fetchers import fetch_product_page
from price_drop_notifier.models import Seller
from price_drop_notifier.notifiers import TelegramNotifier
from price_drop_notifier.runner import RunOrchestrator, RunReport
from price_drop_notifier.storage import PriceStore

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging to stdout."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def run_check(settings: Settings) -> RunReport:
    """One full pass over every seller with a fresh HTTP session."""
    error_logger = ErrorLogger(settings.error_log_path)
    try:
        with requests.Session() as session:
            orchestrator = RunOrchestrator(
                settings=settings,
                notifier=TelegramNotifier.from_settings(settings, session=session),
                store=PriceStore(settings.data_dir),
                fetch=partial(fetch_product_page, session=session, timeout=settings.request_timeout),
                error_logger=error_logger,
            )
            return orchestrator.run()
    finally:
        error_logger.close()


def schedule(settings: Settings) -> None:
    """Run once immediately, then every CHECK_INTERVAL_MINUTES."""
    logger.info("Scheduler: every %d min", settings.check_interval_minutes)
    run_check(settings)

    scheduler = BlockingScheduler()
    scheduler.add_job(
        run_check,
        trigger=IntervalTrigger(minutes=settings.check_interval_minutes),
        args=[settings],
        id="price_check",
        max_instances=1,          # Prevent overlapping runs
        misfire_grace_time=300,
    )
    scheduler.start()


def seed(data_dir: str, seller: Seller, price: float) -> int:
    """Bootstrap a seller's price history. Returns the process exit code."""
    if PriceStore(data_dir).seed(seller, price):
        logger.info("%s: seeded price history with %s", seller.value, price)
        return 0
    return 1


def positive_price(text: str) -> float:
    """argparse type: a finite price greater than 0."""
    try:
        price = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid price: {text!r}")
    if not math.isfinite(price) or price <= 0:
        raise argparse.ArgumentTypeError(f"price must be a finite number greater than 0, got {text!r}")
    return price


def build_parser() -> argparse.ArgumentParser:
    """Command-line arguments: --schedule and the seed subcommand."""
    parser = argparse.ArgumentParser(
        prog="price-drop-notifier",
        description="Check seller prices and notify on drops via Telegram.",
    )
    parser.add_argument(
        "--schedule",
        action="store_true",
        help="keep running and check every CHECK_INTERVAL_MINUTES",
    )
    sub = parser.add_subparsers(dest="command")
    seed_parser = sub.add_parser("seed", help="bootstrap a seller's price history")
    seed_parser.add_argument(
        "seller", type=Seller, choices=list(Seller), metavar="{" + ",".join(s.value for s in Seller) + "}"
    )
    seed_parser.add_argument("price", type=positive_price)
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    load_env()
    args = build_parser().parse_args(argv)

    if args.command == "seed":
        setup_logging()
        return seed(os.environ.get("DATA_DIR", "data"), args.seller, args.price)

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        setup_logging()
        logger.error("Configuration error: %s", e)
        return 2

    setup_logging(settings.log_level)
    logger.info("🚀 Price drop notifier started (target Rp%s)", settings.target_price)
    if args.schedule:
        schedule(settings)
    else:
        run_check(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
