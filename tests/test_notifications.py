"""Tests for notification sinks."""

import logging

from givingcircle.domain.notifications import (
    LoggingNotificationSink,
    NotificationSink,
    NullNotificationSink,
    deliver,
)


class ExplodingSink(NotificationSink):
    def notify_success(self, message):
        raise RuntimeError("sink down")

    def notify_failure(self, message):
        raise RuntimeError("sink down")


def test_logging_sink_levels(caplog):
    sink = LoggingNotificationSink()

    with caplog.at_level(logging.INFO, logger="givingcircle.notifications"):
        sink.notify_success("Donation added: $5.00 to WWF")
        sink.notify_failure("Failed to add donation: User not authenticated")

    levels = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert levels == [
        (logging.INFO, "Donation added: $5.00 to WWF"),
        (logging.WARNING, "Failed to add donation: User not authenticated"),
    ]


def test_null_sink_accepts_everything():
    sink = NullNotificationSink()
    assert sink.notify_success("x") is None
    assert sink.notify_failure("y") is None


def test_deliver_routes_by_outcome(notifier):
    deliver(notifier, "ok", success=True)
    deliver(notifier, "bad", success=False)
    assert notifier.successes == ["ok"]
    assert notifier.failures == ["bad"]


def test_deliver_swallows_sink_errors(caplog):
    with caplog.at_level(logging.ERROR, logger="givingcircle.domain.notifications"):
        deliver(ExplodingSink(), "Donation deleted", success=True)

    assert "failed to deliver" in caplog.text


def test_broken_sink_does_not_break_store(memory_db, red_cross):
    from givingcircle.domain.donation import DonationStore

    store = DonationStore(memory_db, notifier=ExplodingSink())
    donation = store.create("u1", red_cross)
    assert store.list_by_owner("u1") == [donation]
