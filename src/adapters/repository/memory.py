"""
In-memory repository adapters - Dict-backed implementations of the ports.

Used for local development (STORAGE_BACKEND=memory) and tests.
"""

from src.domain.models import Config, Registration


class InMemoryRegistrationRepository:
    """
    Implements RegistrationRepository protocol with a plain dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._records: dict[str, Registration] = {}

    def get(self, identity: str) -> Registration | None:
        return self._records.get(identity)

    def insert(self, identity: str, record: Registration) -> bool:
        if identity in self._records:
            return False
        self._records[identity] = record
        return True

    def put(self, identity: str, record: Registration) -> None:
        self._records[identity] = record

    def delete(self, identity: str) -> None:
        self._records.pop(identity, None)

    def __len__(self) -> int:
        return len(self._records)


class InMemoryConfigRepository:
    """Implements ConfigRepository protocol holding a single Config."""

    def __init__(self, config: Config | None = None) -> None:
        self._config = config

    def load(self) -> Config | None:
        return self._config

    def save(self, config: Config) -> None:
        self._config = config
