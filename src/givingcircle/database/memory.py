"""In-memory database implementation."""

import threading
import uuid
from dataclasses import replace
from typing import Iterable, Optional

from givingcircle.database.base import Database
from givingcircle.domain.entities import Donation, DonationFields


class InMemoryDatabase(Database):
    """Database that keeps the canonical donation collection in a list.

    Each mutation builds a new list and swaps it in under a lock, so readers
    always see either the state before a change or the state after it.
    """

    def __init__(self, donations: Iterable[Donation] = ()):
        """Initialize in-memory database.

        Args:
            donations: Optional records to seed the collection with
        """
        self._lock = threading.Lock()
        self._donations: tuple[Donation, ...] = tuple(donations)

    def connect(self) -> None:
        """Connect to the database."""
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    def _index_of(self, donations: tuple[Donation, ...], donation_id: str) -> Optional[int]:
        for index, donation in enumerate(donations):
            if donation.id == donation_id:
                return index
        return None

    def _new_id(self) -> str:
        donation_id = uuid.uuid4().hex
        while self._index_of(self._donations, donation_id) is not None:
            donation_id = uuid.uuid4().hex
        return donation_id

    # Donation operations
    def create_donation(self, user_id: str, fields: DonationFields) -> Donation:
        """Store a new donation for a user. Returns the stored entity."""
        with self._lock:
            donation = Donation(
                id=self._new_id(),
                user_id=user_id,
                amount=fields.amount,
                organization_name=fields.organization_name,
                date=fields.date,
                frequency=fields.frequency,
                category=fields.category,
                notes=fields.notes,
            )
            self._donations = self._donations + (donation,)
        return donation

    def get_donation(self, donation_id: str) -> Optional[Donation]:
        """Get donation by ID."""
        donations = self._donations
        index = self._index_of(donations, donation_id)
        return None if index is None else donations[index]

    def update_donation(self, donation_id: str, fields: DonationFields) -> Optional[Donation]:
        """Replace the mutable fields of a donation."""
        with self._lock:
            index = self._index_of(self._donations, donation_id)
            if index is None:
                return None
            updated = replace(
                self._donations[index],
                amount=fields.amount,
                organization_name=fields.organization_name,
                date=fields.date,
                frequency=fields.frequency,
                category=fields.category,
                notes=fields.notes,
            )
            donations = list(self._donations)
            donations[index] = updated
            self._donations = tuple(donations)
        return updated

    def delete_donation(self, donation_id: str) -> bool:
        """Delete a donation."""
        with self._lock:
            index = self._index_of(self._donations, donation_id)
            if index is None:
                return False
            self._donations = self._donations[:index] + self._donations[index + 1:]
        return True

    def list_donations(self, user_id: str) -> list[Donation]:
        """List a user's donations in insertion order."""
        donations = self._donations
        return [donation for donation in donations if donation.user_id == user_id]
