"""
Configuration store - Admin identity and registration deadline.

Wraps the ConfigRepository port with the one business rule that applies
to configuration: only the admin may change the deadline.
"""

import logging
from dataclasses import dataclass, replace

from .exceptions import ConfigNotInitialized, Unauthorized
from .models import Config
from .ports import ConfigRepository

logger = logging.getLogger(__name__)


@dataclass
class ConfigStore:
    """Holds the singleton Config; reads are free, writes are admin-gated."""

    repository: ConfigRepository

    def initialize(self, admin: str, deadline: int) -> Config:
        """
        Create the configuration if it does not exist yet.

        An already stored config is returned untouched, so restarting
        the service never reassigns the admin.

        Args:
            admin: Identity of the initializer
            deadline: Initial registration deadline (epoch ms)

        Returns:
            The effective configuration
        """
        existing = self.repository.load()
        if existing is not None:
            return existing

        config = Config(admin=admin, deadline=deadline)
        self.repository.save(config)
        logger.info("Config initialized: admin=%s deadline=%s", admin, deadline)
        return config

    def read(self) -> Config:
        """
        Return the current configuration.

        initialize() must have run first; the application lifespan does
        this on startup.

        Raises:
            ConfigNotInitialized: If no config has been stored yet
        """
        config = self.repository.load()
        if config is None:
            raise ConfigNotInitialized("Config has not been initialized")
        return config

    def set_deadline(self, caller: str, new_deadline: int) -> None:
        """
        Replace the registration deadline.

        The value is not validated; a past deadline simply closes
        registration from now on.

        Raises:
            Unauthorized: If caller is not the admin
        """
        config = self.read()
        if caller != config.admin:
            raise Unauthorized(caller)

        self.repository.save(replace(config, deadline=new_deadline))
        logger.info("Deadline changed: %s -> %s", config.deadline, new_deadline)
