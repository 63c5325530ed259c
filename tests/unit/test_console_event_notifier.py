"""
Unit tests for ConsoleEventNotifier and SystemClock adapters.

Tests verify the adapters implement their protocols and that change
descriptors are logged in the expected format.
"""

import logging
import time

import pytest

from src.adapters.clock import SystemClock
from src.adapters.events.console import ConsoleEventNotifier
from src.domain.models import EventKind, RegistrationEvent
from src.domain.ports import Clock, EventNotifier


class TestConsoleEventNotifierProtocol:
    """Tests for EventNotifier protocol compliance."""

    def test_implements_event_notifier_protocol(self) -> None:
        notifier = ConsoleEventNotifier()
        assert callable(notifier.notify)

        def accepts_notifier(n: EventNotifier) -> None:
            pass

        accepts_notifier(notifier)

    def test_no_explicit_inheritance(self) -> None:
        """ConsoleEventNotifier uses structural subtyping, not inheritance."""
        assert ConsoleEventNotifier.__bases__ == (object,)


class TestNotify:
    """Tests for notify()."""

    def test_notify_logs_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        notifier = ConsoleEventNotifier()

        with caplog.at_level(logging.INFO):
            notifier.notify(RegistrationEvent(EventKind.REGISTER, "bob", "alice"))

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.INFO

    def test_register_format(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            ConsoleEventNotifier().notify(RegistrationEvent(EventKind.REGISTER, "bob", "alice"))

        assert "[REGISTER] address=bob referrer=alice" in caplog.text

    def test_update_format_without_referrer(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO):
            ConsoleEventNotifier().notify(RegistrationEvent(EventKind.UPDATE, "bob", None))

        assert "[UPDATE] address=bob referrer=None" in caplog.text

    def test_notify_returns_none(self) -> None:
        result = ConsoleEventNotifier().notify(RegistrationEvent(EventKind.UPDATE, "bob", None))
        assert result is None


class TestSystemClock:
    """Tests for SystemClock."""

    def test_implements_clock_protocol(self) -> None:
        def accepts_clock(c: Clock) -> None:
            pass

        accepts_clock(SystemClock())

    def test_now_is_epoch_milliseconds(self) -> None:
        before = int(time.time() * 1000)
        now = SystemClock().now()
        after = int(time.time() * 1000)

        assert isinstance(now, int)
        assert before - 1 <= now <= after + 1
