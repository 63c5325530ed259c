"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends, Header, Request

from src.adapters.clock import SystemClock
from src.adapters.events.console import ConsoleEventNotifier
from src.config.settings import get_settings
from src.domain.config import ConfigStore
from src.domain.models import CallContext
from src.domain.ports import Clock, ConfigRepository, RegistrationRepository
from src.domain.registration import RegistrationService

# Module-level singletons - both adapters are stateless
_notifier = ConsoleEventNotifier()
_clock = SystemClock()


def get_registration_repository(request: Request) -> RegistrationRepository:
    """
    Get registration repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.registration_repository


def get_config_repository(request: Request) -> ConfigRepository:
    """Get config repository from app state."""
    return request.app.state.config_repository


def get_notifier() -> ConsoleEventNotifier:
    """Get console event notifier (singleton)."""
    return _notifier


def get_clock() -> Clock:
    """Get system clock (singleton)."""
    return _clock


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repositories and event notifier for the domain service.
    """
    return RegistrationService(
        config_store=ConfigStore(get_config_repository(request)),
        repository=get_registration_repository(request),
        notifier=get_notifier(),
        deadline_enabled=get_settings().deadline_enabled,
    )


def get_call_context(
    x_caller: str = Header(..., min_length=1, description="Authenticated caller identity"),
    clock: Clock = Depends(get_clock),
) -> CallContext:
    """
    Build the per-request call context.

    The caller identity is taken from the X-Caller header as already
    authenticated upstream; no verification happens here.
    """
    return CallContext(caller=x_caller, timestamp=clock.now())
