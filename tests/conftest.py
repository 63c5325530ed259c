"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory repositories (admin=alice, deadline=1000)
- A mocked event notifier
- A RegistrationService wired to them
"""

from unittest.mock import Mock

import pytest

from src.adapters.repository.memory import InMemoryConfigRepository, InMemoryRegistrationRepository
from src.domain.config import ConfigStore
from src.domain.models import Config
from src.domain.registration import RegistrationService


@pytest.fixture
def config_repository() -> InMemoryConfigRepository:
    return InMemoryConfigRepository(Config(admin="alice", deadline=1000))


@pytest.fixture
def registration_repository() -> InMemoryRegistrationRepository:
    return InMemoryRegistrationRepository()


@pytest.fixture
def notifier() -> Mock:
    return Mock()


@pytest.fixture
def service(
    config_repository: InMemoryConfigRepository,
    registration_repository: InMemoryRegistrationRepository,
    notifier: Mock,
) -> RegistrationService:
    """RegistrationService over in-memory stores."""
    return RegistrationService(
        config_store=ConfigStore(config_repository),
        repository=registration_repository,
        notifier=notifier,
    )
