"""Unit tests for the event bus."""

import pytest

from events import EventBus


def test_handlers_run_in_subscription_order():
    bus = EventBus()
    calls = []
    bus.subscribe("ping", lambda value: calls.append(("a", value)))
    bus.subscribe("ping", lambda value: calls.append(("b", value)))

    bus.publish("ping", value=1)

    assert calls == [("a", 1), ("b", 1)]


def test_unsubscribe():
    bus = EventBus()
    calls = []
    unsubscribe = bus.subscribe("ping", lambda: calls.append(1))

    unsubscribe()
    unsubscribe()
    bus.publish("ping")

    assert calls == []


def test_publish_without_subscribers():
    EventBus().publish("nobody-listens", value=1)


def test_handler_errors_reach_publisher():
    bus = EventBus()

    def broken():
        raise RuntimeError("boom")

    bus.subscribe("ping", broken)

    with pytest.raises(RuntimeError):
        bus.publish("ping")
