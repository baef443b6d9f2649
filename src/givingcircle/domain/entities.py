"""Domain model entities for givingcircle.

These are pure data classes representing giving records and the values
derived from them, independent of how a backend stores them.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class Frequency(str, Enum):
    """Recurrence classification of a donation."""

    ONE_TIME = "one-time"
    MONTHLY = "monthly"
    ANNUAL = "annual"

    @property
    def label(self) -> str:
        return FREQUENCY_LABELS[self]


FREQUENCY_LABELS = {
    Frequency.ONE_TIME: "One-time",
    Frequency.MONTHLY: "Monthly",
    Frequency.ANNUAL: "Annual",
}

ZERO = Decimal("0")


@dataclass(frozen=True)
class Donation:
    """Donation domain entity."""

    id: str
    user_id: str
    amount: Decimal
    organization_name: str
    date: date
    frequency: Frequency
    category: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class DonationFields:
    """Validated mutable fields of a donation, before the store assigns ids."""

    amount: Decimal
    organization_name: str
    date: date
    frequency: Frequency
    category: Optional[str] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class DonationSummary:
    """Sums over one user's donations, grouped by frequency."""

    total: Decimal = ZERO
    monthly: Decimal = ZERO
    annual: Decimal = ZERO
    one_time: Decimal = ZERO

    def for_frequency(self, frequency: Frequency) -> Decimal:
        if frequency is Frequency.MONTHLY:
            return self.monthly
        if frequency is Frequency.ANNUAL:
            return self.annual
        return self.one_time


@dataclass(frozen=True)
class DistributionRow:
    """One slice of the frequency distribution chart."""

    frequency: Frequency
    label: str
    amount: Decimal
    share: Decimal


@dataclass(frozen=True)
class OrganizationCount:
    """Number of donations made to one organization."""

    organization_name: str
    count: int


@dataclass(frozen=True)
class ProfileStats:
    """Profile overview figures for a donor."""

    donation_count: int = 0
    organization_count: int = 0
    category_count: int = 0
    first_donation_date: Optional[date] = None
    top_organizations: tuple[OrganizationCount, ...] = field(default_factory=tuple)
