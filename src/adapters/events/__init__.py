"""Event notifier adapters."""

from .console import ConsoleEventNotifier

__all__ = ["ConsoleEventNotifier"]
