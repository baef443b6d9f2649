"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class InvalidInputError(DomainError):
    """Missing or malformed donation fields."""


class NotFoundError(DomainError):
    """Requested donation does not exist."""


class NotAuthenticatedError(DomainError):
    """Operation requires a bound identity and none is present."""


class CollaboratorFailureError(DomainError):
    """The persistence backend failed to complete an operation."""


def donation_not_found(donation_id: str) -> str:
    """Return message for missing donation."""
    return f"Donation {donation_id} not found"


def not_authenticated() -> str:
    """Return message for an operation attempted without an identity."""
    return "User not authenticated"


def missing_fields(names: list[str]) -> str:
    """Return message for required fields that were not supplied."""
    return f"Missing required field{'s' if len(names) != 1 else ''}: {', '.join(names)}"


def invalid_amount(value: object) -> str:
    """Return message for an amount that is not a positive number."""
    return f"Amount must be a number greater than 0, got {value!r}"


def invalid_frequency(value: object) -> str:
    """Return message for an unrecognized frequency."""
    return f"Frequency must be one of one-time, monthly, annual, got {value!r}"


def invalid_date(value: object) -> str:
    """Return message for a date that is not ISO 8601."""
    return f"Date must be an ISO 8601 date (YYYY-MM-DD), got {value!r}"


def immutable_field(name: str) -> str:
    """Return message for an attempt to change id or owner."""
    return f"Field '{name}' cannot be changed"


def unknown_fields(names: list[str]) -> str:
    """Return message for fields that are not part of a donation."""
    return f"Unknown donation field{'s' if len(names) != 1 else ''}: {', '.join(names)}"
