"""
Domain models - Immutable value types for configuration and registrations.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Config:
    """
    Singleton service configuration.

    admin is fixed at initialization. deadline is a timestamp in epoch
    milliseconds; registration closes strictly after it.
    """

    admin: str
    deadline: int


@dataclass(frozen=True)
class Registration:
    """Registration record keyed by address. referrer never equals address."""

    address: str
    referrer: str | None = None


@dataclass(frozen=True)
class CallContext:
    """Caller identity and current timestamp for a single invocation."""

    caller: str
    timestamp: int


class EventKind(str, Enum):
    """Kinds of change descriptors forwarded to the event notifier."""

    REGISTER = "REGISTER"
    UPDATE = "UPDATE"


@dataclass(frozen=True)
class RegistrationEvent:
    """Change descriptor emitted after a successful register or update."""

    kind: EventKind
    address: str
    referrer: str | None
