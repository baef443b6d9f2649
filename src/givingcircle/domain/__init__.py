"""Domain layer for givingcircle application.

Services are imported from their own modules.
"""

from givingcircle.domain.entities import Donation, DonationSummary, Frequency
from givingcircle.domain.errors import (
    CollaboratorFailureError,
    DomainError,
    InvalidInputError,
    NotAuthenticatedError,
    NotFoundError,
)

__all__ = [
    "Donation",
    "DonationSummary",
    "Frequency",
    "DomainError",
    "InvalidInputError",
    "NotFoundError",
    "NotAuthenticatedError",
    "CollaboratorFailureError",
]
