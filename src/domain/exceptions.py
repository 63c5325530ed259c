"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""

REGISTRATION_CLOSED = "registration closed"
SELF_REFERRAL = "self-referral"
ALREADY_REGISTERED = "already registered"


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class NotFound(RegistrationError):
    """Referenced registration does not exist."""

    def __init__(self, identity: str) -> None:
        super().__init__(identity)
        self.identity = identity


class Unauthorized(RegistrationError):
    """Caller lacks the admin privilege."""

    pass


class Unprocessable(RegistrationError):
    """Request is well-formed but violates a business rule."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class HostError(RegistrationError):
    """Failure raised by the storage or host layer, passed through as-is."""

    pass


class ConfigNotInitialized(RegistrationError):
    """Config was read before ConfigStore.initialize() ran."""

    pass
