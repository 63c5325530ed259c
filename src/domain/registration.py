"""
Registration domain service - Per-identity registration state machine.

This module contains the core business logic for event registration:
creating, updating and removing one registration per identity, plus
the admin-gated configuration change.

Registration State Machine
==========================

States (per identity):
- absent: No record stored
- registered: Record stored, optionally carrying a referrer

Transitions:
    absent -> registered      (register)
    registered -> registered  (update, referrer only)
    registered -> absent      (destroy)

There is no per-record closed/expired state. The deadline is a global
gate on the register transition only.

register validation order is fixed:
    1. deadline   -> Unprocessable("registration closed")
    2. referrer   -> Unprocessable("self-referral")
    3. duplicate  -> Unprocessable("already registered")

Every check runs before any mutation, so a failed call leaves no state
change and emits no event. register writes through the create-only
insert(), so a concurrent claim that slips past the duplicate check
still fails as "already registered". If the notifier raises after a
write, the write is undone (delete after register, previous record
restored after update) and the error propagates.
"""

import logging
from dataclasses import dataclass, replace

from .config import ConfigStore
from .exceptions import (
    ALREADY_REGISTERED,
    REGISTRATION_CLOSED,
    SELF_REFERRAL,
    NotFound,
    Unprocessable,
)
from .models import CallContext, Config, EventKind, Registration, RegistrationEvent
from .ports import EventNotifier, RegistrationRepository

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for event registration.

    Owns the ConfigStore and the registration repository; nothing else
    mutates them. Successful register/update calls are forwarded to the
    event notifier.
    """

    config_store: ConfigStore
    repository: RegistrationRepository
    notifier: EventNotifier
    deadline_enabled: bool = True

    def config(self) -> Config:
        return self.config_store.read()

    def show(self, identity: str) -> Registration:
        """
        Fetch the registration for identity.

        Raises:
            NotFound: If no registration exists
        """
        registration = self.repository.get(identity)
        if registration is None:
            raise NotFound(identity)
        return registration

    def register(self, ctx: CallContext, referrer: str | None = None) -> Registration:
        """
        Register the caller, optionally recording who referred them.

        Args:
            ctx: Caller identity and current timestamp
            referrer: Identity of the referrer, if any

        Returns:
            The created Registration

        Raises:
            Unprocessable: Registration closed, self-referral, or
                caller already registered (checked in that order)
        """
        if self.deadline_enabled and ctx.timestamp > self.config_store.read().deadline:
            logger.debug("Register rejected for %s: %s", ctx.caller, REGISTRATION_CLOSED)
            raise Unprocessable(REGISTRATION_CLOSED)

        self._ensure_not_self_referral(ctx.caller, referrer)

        if self.repository.get(ctx.caller) is not None:
            logger.debug("Register rejected for %s: %s", ctx.caller, ALREADY_REGISTERED)
            raise Unprocessable(ALREADY_REGISTERED)

        registration = Registration(address=ctx.caller, referrer=referrer)
        if not self.repository.insert(ctx.caller, registration):
            logger.debug("Register lost claim for %s: %s", ctx.caller, ALREADY_REGISTERED)
            raise Unprocessable(ALREADY_REGISTERED)

        try:
            self._emit(EventKind.REGISTER, registration)
        except Exception:
            self.repository.delete(ctx.caller)
            raise

        logger.info("Registered %s (referrer=%s)", ctx.caller, referrer)
        return registration

    def update(self, ctx: CallContext, referrer: str | None = None) -> Registration:
        """
        Replace the referrer on the caller's registration.

        The address is immutable; only the referrer changes.

        Raises:
            NotFound: If the caller is not registered
            Unprocessable: If referrer equals the caller
        """
        registration = self.show(ctx.caller)
        self._ensure_not_self_referral(ctx.caller, referrer)

        updated = replace(registration, referrer=referrer)
        self.repository.put(ctx.caller, updated)

        try:
            self._emit(EventKind.UPDATE, updated)
        except Exception:
            self.repository.put(ctx.caller, registration)
            raise

        logger.info("Updated %s (referrer=%s)", ctx.caller, referrer)
        return updated

    def destroy(self, ctx: CallContext) -> None:
        """
        Remove the caller's registration.

        Unlike the repository's delete(), this is not idempotent.

        Raises:
            NotFound: If the caller is not registered
        """
        self.show(ctx.caller)
        self.repository.delete(ctx.caller)
        logger.info("Destroyed registration for %s", ctx.caller)

    def update_config(self, ctx: CallContext, deadline: int) -> None:
        """
        Change the registration deadline.

        Raises:
            Unauthorized: If the caller is not the admin
        """
        self.config_store.set_deadline(ctx.caller, deadline)

    def _ensure_not_self_referral(self, caller: str, referrer: str | None) -> None:
        if referrer is not None and referrer == caller:
            logger.debug("Rejected for %s: %s", caller, SELF_REFERRAL)
            raise Unprocessable(SELF_REFERRAL)

    def _emit(self, kind: EventKind, registration: Registration) -> None:
        self.notifier.notify(
            RegistrationEvent(
                kind=kind,
                address=registration.address,
                referrer=registration.referrer,
            )
        )
