"""Repository adapters - In-memory and database implementations."""

from .memory import InMemoryConfigRepository, InMemoryRegistrationRepository
from .postgres import PostgresConfigRepository, PostgresRegistrationRepository, run_migrations

__all__ = [
    "InMemoryConfigRepository",
    "InMemoryRegistrationRepository",
    "PostgresConfigRepository",
    "PostgresRegistrationRepository",
    "run_migrations",
]
