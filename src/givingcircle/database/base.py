"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from givingcircle.domain.entities import Donation, DonationFields


class Database(ABC):
    """Abstract database interface for givingcircle.

    Implementations own the canonical donation collection. Every method that
    changes it applies the whole change or none of it.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Donation operations
    @abstractmethod
    def create_donation(self, user_id: str, fields: DonationFields) -> Donation:
        """Store a new donation for a user. Returns the stored entity."""
        pass

    @abstractmethod
    def get_donation(self, donation_id: str) -> Optional[Donation]:
        """Get donation by ID."""
        pass

    @abstractmethod
    def update_donation(self, donation_id: str, fields: DonationFields) -> Optional[Donation]:
        """Replace the mutable fields of a donation.

        Returns the updated entity, or None if no donation has that ID.
        """
        pass

    @abstractmethod
    def delete_donation(self, donation_id: str) -> bool:
        """Delete a donation. Returns False if no donation has that ID."""
        pass

    @abstractmethod
    def list_donations(self, user_id: str) -> list[Donation]:
        """List a user's donations in insertion order."""
        pass
