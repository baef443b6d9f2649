"""Per-identity view over the donation store.

A DonationSession tracks which user is signed in and keeps that user's
donations and their summary in step with the store. It is a two-state
machine:

- ``UNBOUND``: no identity. No donations are visible and the summary is zero.
- ``BOUND``: an identity is set. The visible donations are the result of
  ``DonationStore.list_by_owner`` at the last transition.

Identity changes and completed mutations both go through :meth:`on_change`,
which always re-reads the store and recomputes the summary from scratch.
If that re-read fails after a mutation has already been applied, the
mutation still returns normally and the session is marked stale until the
next successful re-read.
"""

import logging
from collections.abc import Mapping
from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Iterator, Optional

from givingcircle.domain import errors
from givingcircle.domain.donation import DonationStore
from givingcircle.domain.entities import Donation, DonationSummary
from givingcircle.domain.notifications import deliver
from givingcircle.domain.summary import summarize

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """State of a donation session."""

    UNBOUND = "unbound"
    BOUND = "bound"


class ChangeEvent(str, Enum):
    """What triggered a session transition."""

    IDENTITY = "identity"
    MUTATION = "mutation"
    REFRESH = "refresh"


Observer = Callable[["DonationSession", ChangeEvent], None]


class DonationSession:
    """Visible donations and summary for the current identity."""

    def __init__(self, store: DonationStore, owner_id: Optional[str] = None):
        """Initialize a session.

        Args:
            store: Store holding the canonical donation collection
            owner_id: Identity to bind immediately, or None to start unbound
        """
        self.store = store
        self._owner_id: Optional[str] = None
        self._donations: tuple[Donation, ...] = ()
        self._summary: DonationSummary = summarize(())
        self._pending = 0
        self._stale = False
        self._observers: list[Observer] = []
        if owner_id:
            self.set_identity(owner_id)

    @property
    def owner_id(self) -> Optional[str]:
        return self._owner_id

    @property
    def state(self) -> SessionState:
        return SessionState.UNBOUND if self._owner_id is None else SessionState.BOUND

    @property
    def donations(self) -> tuple[Donation, ...]:
        return self._donations

    @property
    def summary(self) -> DonationSummary:
        return self._summary

    @property
    def is_stale(self) -> bool:
        """True when the last re-read after a mutation failed."""
        return self._stale

    @property
    def is_loading(self) -> bool:
        return self._pending > 0

    @contextmanager
    def _loading(self) -> Iterator[None]:
        self._pending += 1
        try:
            yield
        finally:
            self._pending -= 1

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register a callback run after every transition.

        Returns:
            Function that removes the callback again
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def set_identity(self, owner_id: Optional[str]) -> None:
        """Bind the session to an identity, or unbind it with None."""
        self._owner_id = owner_id or None
        logger.debug("Session identity changed to %s", self._owner_id)
        self.on_change(ChangeEvent.IDENTITY)

    def clear_identity(self) -> None:
        """Unbind the session, e.g. on logout."""
        self.set_identity(None)

    def refresh(self) -> None:
        """Re-read the store for the bound identity."""
        self.on_change(ChangeEvent.REFRESH)

    def on_change(self, event: ChangeEvent) -> None:
        """Re-derive the visible donations and summary.

        This is the single transition function for the session. It never
        patches the previous state; it rebuilds it from the store.
        """
        if self._owner_id is None:
            visible: tuple[Donation, ...] = ()
        else:
            with self._loading():
                visible = tuple(self.store.list_by_owner(self._owner_id))

        self._donations = visible
        self._summary = summarize(visible)
        self._stale = False
        logger.debug(
            "Session %s after %s: %d donation(s), total %s",
            self.state.value,
            event.value,
            len(visible),
            self._summary.total,
        )

        for observer in list(self._observers):
            observer(self, event)

    def _after_mutation(self) -> None:
        try:
            self.on_change(ChangeEvent.MUTATION)
        except errors.CollaboratorFailureError as e:
            self._stale = True
            logger.warning("Could not reload donations after a change: %s", e)
            deliver(self.store.notifier, f"Failed to reload donations: {e}", success=False)

    def _require_owned(self, donation_id: str, action: str) -> None:
        """Check that a donation belongs to the bound identity."""
        try:
            if self._owner_id is None:
                raise errors.NotAuthenticatedError(errors.not_authenticated())
            donation = self.store.get(donation_id)
            if donation is None or donation.user_id != self._owner_id:
                raise errors.NotFoundError(errors.donation_not_found(donation_id))
        except errors.DomainError as e:
            deliver(self.store.notifier, f"Failed to {action} donation: {e}", success=False)
            raise

    def add_donation(self, fields: Mapping[str, Any]) -> Donation:
        """Record a donation for the bound identity.

        Raises:
            NotAuthenticatedError: If the session is unbound
            InvalidInputError: If the fields fail validation
        """
        with self._loading():
            donation = self.store.create(self._owner_id, fields)
        self._after_mutation()
        return donation

    def edit_donation(self, donation_id: str, partial_fields: Mapping[str, Any]) -> Donation:
        """Update one of the bound identity's donations.

        Raises:
            NotAuthenticatedError: If the session is unbound
            NotFoundError: If the donation does not exist or belongs to someone else
            InvalidInputError: If the merged donation fails validation
        """
        with self._loading():
            self._require_owned(donation_id, "update")
            donation = self.store.update(donation_id, partial_fields)
        self._after_mutation()
        return donation

    def delete_donation(self, donation_id: str) -> None:
        """Delete one of the bound identity's donations.

        Raises:
            NotAuthenticatedError: If the session is unbound
            NotFoundError: If the donation does not exist or belongs to someone else
        """
        with self._loading():
            self._require_owned(donation_id, "delete")
            self.store.delete(donation_id)
        self._after_mutation()
