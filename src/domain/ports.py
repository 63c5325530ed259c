"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol

from .models import Config, Registration, RegistrationEvent


class RegistrationRepository(Protocol):
    """
    Port interface for registration persistence.

    A plain keyed store: put() is an unconditional upsert and delete()
    is idempotent. insert() is the create-only write used by register;
    the service decides which one applies.
    """

    def get(self, identity: str) -> Registration | None:
        """
        Look up a registration by exact key.

        Returns:
            The stored Registration, or None when absent
        """
        ...

    def insert(self, identity: str, record: Registration) -> bool:
        """
        Atomically store record only if identity has no registration yet.

        Returns:
            True if stored, False if a registration already existed
        """
        ...

    def put(self, identity: str, record: Registration) -> None:
        """Insert or overwrite the registration stored under identity."""
        ...

    def delete(self, identity: str) -> None:
        """Remove the registration for identity. Absent keys are a no-op."""
        ...


class ConfigRepository(Protocol):
    """Port interface for the singleton configuration record."""

    def load(self) -> Config | None:
        """
        Load the stored configuration.

        Returns:
            The Config, or None if it has never been initialized
        """
        ...

    def save(self, config: Config) -> None:
        """Persist the configuration, replacing any stored value."""
        ...


class EventNotifier(Protocol):
    """Port interface for delivering change descriptors to observers."""

    def notify(self, event: RegistrationEvent) -> None:
        """
        Deliver a change descriptor.

        Args:
            event: REGISTER or UPDATE descriptor with address and referrer
        """
        ...


class Clock(Protocol):
    """Port interface for the current timestamp."""

    def now(self) -> int:
        """Return the current time in epoch milliseconds."""
        ...
