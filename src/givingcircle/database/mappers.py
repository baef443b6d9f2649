"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the table layout can change
without touching the domain entities.
"""

from decimal import Decimal

from givingcircle.domain import entities as domain
from givingcircle.database.models import Donation as ORMDonation


def donation_to_domain(orm_donation: ORMDonation) -> domain.Donation:
    """Convert SQLAlchemy Donation model to domain Donation entity."""
    return domain.Donation(
        id=orm_donation.id,
        user_id=orm_donation.user_id,
        amount=Decimal(orm_donation.amount),
        organization_name=orm_donation.organization_name,
        date=orm_donation.date,
        frequency=domain.Frequency(orm_donation.frequency),
        category=orm_donation.category,
        notes=orm_donation.notes,
    )


def apply_fields(orm_donation: ORMDonation, fields: domain.DonationFields) -> None:
    """Copy validated domain fields onto a SQLAlchemy Donation model."""
    orm_donation.amount = fields.amount
    orm_donation.organization_name = fields.organization_name
    orm_donation.date = fields.date
    orm_donation.frequency = fields.frequency.value
    orm_donation.category = fields.category
    orm_donation.notes = fields.notes
