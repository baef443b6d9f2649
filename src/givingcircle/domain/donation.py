"""Donation domain service."""

import contextlib
import logging
import threading
from collections.abc import Mapping
from typing import Any, Optional

from givingcircle.database.base import Database
from givingcircle.domain import errors
from givingcircle.domain.entities import Donation
from givingcircle.domain.notifications import NotificationSink, NullNotificationSink, deliver
from givingcircle.domain.validation import merge_fields, validate_fields
from givingcircle.utils.formatting import format_currency

logger = logging.getLogger(__name__)


class DonationStore:
    """Service that owns the lifecycle of donation records.

    All reads and writes of the canonical collection go through this class.
    Failures are reported to the notification sink and then re-raised, so the
    caller always learns about them.
    """

    def __init__(
        self,
        db: Database,
        notifier: Optional[NotificationSink] = None,
        serialize_mutations: bool = False,
    ):
        """Initialize donation store.

        Args:
            db: Database instance holding the canonical collection
            notifier: Sink for success and failure notices
            serialize_mutations: If True, create/update/delete from concurrent
                callers run one at a time (guards against double-submits)
        """
        self.db = db
        self.notifier = notifier if notifier is not None else NullNotificationSink()
        self.serialize_mutations = serialize_mutations
        self._mutation_lock = threading.RLock()

    def _mutation_guard(self):
        if self.serialize_mutations:
            return self._mutation_lock
        return contextlib.nullcontext()

    def _fail(self, message: str, error: errors.DomainError) -> None:
        logger.info("%s: %s", message, error)
        deliver(self.notifier, f"{message}: {error}", success=False)

    def create(self, owner_id: Optional[str], fields: Mapping[str, Any]) -> Donation:
        """Record a new donation for a user.

        Args:
            owner_id: Identity of the acting user
            fields: amount, organizationName (or organization_name), date,
                frequency, and optional category and notes

        Returns:
            The stored Donation, with its assigned id and user_id

        Raises:
            NotAuthenticatedError: If owner_id is missing
            InvalidInputError: If the fields fail validation
            CollaboratorFailureError: If the backend fails to store the record
        """
        try:
            if not owner_id:
                raise errors.NotAuthenticatedError(errors.not_authenticated())
            validated = validate_fields(fields)
            with self._mutation_guard():
                donation = self.db.create_donation(owner_id, validated)
        except errors.DomainError as e:
            self._fail("Failed to add donation", e)
            raise

        logger.debug("Created donation %s for user %s", donation.id, owner_id)
        deliver(
            self.notifier,
            f"Donation added: {format_currency(donation.amount)} to {donation.organization_name}",
            success=True,
        )
        return donation

    def get(self, donation_id: str) -> Optional[Donation]:
        """Get donation by ID.

        Returns:
            Donation or None if not found
        """
        return self.db.get_donation(donation_id)

    def update(self, donation_id: str, partial_fields: Mapping[str, Any]) -> Donation:
        """Merge new values into an existing donation.

        Only the fields present in partial_fields change. The merged record
        must pass the same validation as a new one.

        Raises:
            NotFoundError: If no donation has that ID
            InvalidInputError: If the merged donation fails validation, or the
                input tries to change id or user_id
            CollaboratorFailureError: If the backend fails to store the change
        """
        try:
            with self._mutation_guard():
                existing = self.db.get_donation(donation_id)
                if existing is None:
                    raise errors.NotFoundError(errors.donation_not_found(donation_id))
                merged = merge_fields(existing, partial_fields)
                donation = self.db.update_donation(donation_id, merged)
                if donation is None:
                    # Removed by another caller between the read and the write
                    raise errors.NotFoundError(errors.donation_not_found(donation_id))
        except errors.DomainError as e:
            self._fail("Failed to update donation", e)
            raise

        logger.debug("Updated donation %s", donation_id)
        deliver(self.notifier, "Donation updated: your changes have been saved", success=True)
        return donation

    def delete(self, donation_id: str) -> None:
        """Delete a donation.

        Deleting an ID that does not exist leaves the collection unchanged but
        is reported, so callers can tell "nothing happened" from "deleted".

        Raises:
            NotFoundError: If no donation has that ID
            CollaboratorFailureError: If the backend fails to delete the record
        """
        try:
            with self._mutation_guard():
                if not self.db.delete_donation(donation_id):
                    raise errors.NotFoundError(errors.donation_not_found(donation_id))
        except errors.DomainError as e:
            self._fail("Failed to delete donation", e)
            raise

        logger.debug("Deleted donation %s", donation_id)
        deliver(self.notifier, "Donation deleted: donation has been removed", success=True)

    def list_by_owner(self, owner_id: str) -> list[Donation]:
        """List a user's donations in the order they were created."""
        return self.db.list_donations(owner_id)
