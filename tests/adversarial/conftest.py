"""
Shared fixtures for adversarial tests.

Provides a pool of identities and a recording notifier for invariant
tests that drive the service in arbitrary call orders.
"""

import pytest

from src.domain.models import RegistrationEvent

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial

IDENTITIES = ["alice", "bob", "charlie", "dave", "eve"]


class RecordingNotifier:
    """EventNotifier that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[RegistrationEvent] = []

    def notify(self, event: RegistrationEvent) -> None:
        self.events.append(event)


@pytest.fixture
def identities() -> list[str]:
    return list(IDENTITIES)


@pytest.fixture
def recording_notifier() -> RecordingNotifier:
    return RecordingNotifier()
