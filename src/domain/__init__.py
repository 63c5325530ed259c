"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for event registration.
It defines its own port interfaces for infrastructure abstraction,
ensuring true hexagonal architecture decoupling.
"""

from .config import ConfigStore
from .exceptions import (
    ConfigNotInitialized,
    HostError,
    NotFound,
    RegistrationError,
    Unauthorized,
    Unprocessable,
)
from .models import CallContext, Config, EventKind, Registration, RegistrationEvent
from .ports import Clock, ConfigRepository, EventNotifier, RegistrationRepository
from .registration import RegistrationService

__all__ = [
    "CallContext",
    "Clock",
    "Config",
    "ConfigNotInitialized",
    "ConfigRepository",
    "ConfigStore",
    "EventKind",
    "EventNotifier",
    "HostError",
    "NotFound",
    "Registration",
    "RegistrationError",
    "RegistrationEvent",
    "RegistrationRepository",
    "RegistrationService",
    "Unauthorized",
    "Unprocessable",
]
