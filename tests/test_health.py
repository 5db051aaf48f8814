from __future__ import annotations

from datetime import datetime

from price_drop_notifier.health import HealthTracker
from price_drop_notifier.models import HealthStatus, Seller


def test_all_sellers_start_unknown() -> None:
    health = HealthTracker(Seller)
    assert all(health.status(s) is HealthStatus.UNKNOWN for s in Seller)


def test_mark_ok_is_idempotent_and_per_seller() -> None:
    health = HealthTracker(Seller)
    health.mark_ok(Seller.DIGIMAP)
    health.mark_ok(Seller.DIGIMAP)

    assert health.status(Seller.DIGIMAP) is HealthStatus.OK
    assert health.status(Seller.IBOX) is HealthStatus.UNKNOWN


def test_summary_reflects_current_state() -> None:
    health = HealthTracker(Seller)
    now = datetime(2024, 1, 2, 3, 4, 5)
    before = health.summary(now)
    health.mark_ok(Seller.IBOX)

    assert "iBox: 🔴" in before
    assert "iBox: 🟢" in health.summary(now)


def test_new_tracker_does_not_inherit_state() -> None:
    HealthTracker(Seller).mark_ok(Seller.IBOX)
    assert HealthTracker(Seller).status(Seller.IBOX) is HealthStatus.UNKNOWN
