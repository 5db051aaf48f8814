"""Append-only price history, one text file per seller."""

import logging
from pathlib import Path

from price_drop_notifier.errors import StoreUnavailable
from price_drop_notifier.models import Seller

logger = logging.getLogger(__name__)


class PriceStore:
    """
    Price history files under `data_dir`, named `<seller>_prices.txt`.

    Each entry is one decimal number per line. The last entry is the current
    known price. Entries are only ever appended.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)

    def path_for(self, seller: Seller) -> Path:
        """History file for a seller."""
        return self.data_dir / f"{seller.value}_prices.txt"

    def _read_lines(self, seller: Seller) -> list[str]:
        """Non-blank lines of the history file."""
        path = self.path_for(seller)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise StoreUnavailable(f"No price history at {path}; seed it first") from e
        except OSError as e:
            raise StoreUnavailable(f"Cannot read price history at {path}: {e}") from e
        return [line.strip() for line in text.splitlines() if line.strip()]

    def history(self, seller: Seller) -> list[float]:
        """Every recorded price for the seller, oldest first."""
        lines = self._read_lines(seller)
        try:
            return [float(line) for line in lines]
        except ValueError as e:
            raise StoreUnavailable(f"Corrupt price history at {self.path_for(seller)}: {e}") from e

    def last_price(self, seller: Seller) -> float:
        """Current known price: the last entry. Raises StoreUnavailable if unseeded."""
        lines = self._read_lines(seller)
        if not lines:
            raise StoreUnavailable(f"Price history at {self.path_for(seller)} is empty; seed it first")
        try:
            return float(lines[-1])
        except ValueError as e:
            raise StoreUnavailable(f"Corrupt last entry in {self.path_for(seller)}: {lines[-1]!r}") from e

    def append(self, seller: Seller, price: float) -> None:
        """Append `price` as the new last entry."""
        path = self.path_for(seller)
        path.parent.mkdir(parents=True, exist_ok=True)
        # A hand-written seed may lack a trailing newline.
        prefix = ""
        if path.exists() and path.stat().st_size > 0:
            with path.open("rb") as f:
                f.seek(-1, 2)
                if f.read(1) != b"\n":
                    prefix = "\n"
        with path.open("a", encoding="utf-8") as f:
            f.write(f"{prefix}{float(price)}\n")
        logger.info("%s: recorded new price %s", seller.value, price)

    def seed(self, seller: Seller, price: float) -> bool:
        """
        Create the seller's history with an initial price.

        Returns False (and writes nothing) when a non-empty history exists.
        """
        path = self.path_for(seller)
        if path.exists() and path.read_text(encoding="utf-8").strip():
            logger.warning("%s: price history already exists at %s", seller.value, path)
            return False
        self.append(seller, price)
        return True
