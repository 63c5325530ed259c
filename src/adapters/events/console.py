"""
Console event notifier adapter - Implements EventNotifier protocol.

This module provides a log-based implementation of the domain's
event notifier port, writing change descriptors to the application log.
"""

import logging

from src.domain.models import RegistrationEvent

logger = logging.getLogger(__name__)


class ConsoleEventNotifier:
    """
    Implements EventNotifier protocol via logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Stands in for a broadcast transport; events are logged at INFO.
    """

    def notify(self, event: RegistrationEvent) -> None:
        """
        Log a change descriptor.

        Args:
            event: REGISTER or UPDATE descriptor from the domain service
        """
        logger.info(
            "[%s] address=%s referrer=%s", event.kind.value, event.address, event.referrer
        )
