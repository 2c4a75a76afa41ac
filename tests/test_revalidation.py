"""Tests for the cache invalidation bus."""

import logging

from invoicing.services.revalidation import InvalidationBus


def test_notifies_subscribers_in_order() -> None:
    seen = []
    bus = InvalidationBus()
    bus.subscribe(lambda path: seen.append(("a", path)))
    bus.subscribe(lambda path: seen.append(("b", path)))

    bus.revalidate_path("/dashboard/invoices")

    assert seen == [("a", "/dashboard/invoices"), ("b", "/dashboard/invoices")]


def test_subscribe_twice_notifies_once(recorder) -> None:
    bus = InvalidationBus()
    bus.subscribe(recorder)
    bus.subscribe(recorder)

    bus.revalidate_path("/x")

    assert recorder.paths == ["/x"]


def test_unsubscribe(recorder) -> None:
    bus = InvalidationBus()
    bus.subscribe(recorder)
    bus.unsubscribe(recorder)
    bus.unsubscribe(recorder)

    bus.revalidate_path("/x")

    assert recorder.paths == []


def test_failing_subscriber_is_logged_and_skipped(recorder, caplog) -> None:
    def explode(path: str) -> None:
        raise RuntimeError("cache offline")

    bus = InvalidationBus()
    bus.subscribe(explode)
    bus.subscribe(recorder)

    with caplog.at_level(logging.ERROR, logger="invoicing.services.revalidation"):
        bus.revalidate_path("/dashboard/invoices")

    assert recorder.paths == ["/dashboard/invoices"]
    assert any("subscriber failed" in r.getMessage() for r in caplog.records)
