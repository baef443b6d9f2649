"""Validation rules for donation input fields.

Input arrives as a mapping keyed either by the snake_case attribute names or
by the camelCase names used by other clients (``organizationName``). Both
``create`` and ``update`` funnel through :func:`validate_fields`, so a merged
update is checked against exactly the same rules as a new record.
"""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from dateutil.parser import isoparse

from givingcircle.domain import errors
from givingcircle.domain.entities import Donation, DonationFields, Frequency

CENTS = Decimal("0.01")

FIELD_ALIASES = {
    "amount": "amount",
    "organization_name": "organization_name",
    "organizationName": "organization_name",
    "date": "date",
    "frequency": "frequency",
    "category": "category",
    "notes": "notes",
}

IMMUTABLE_FIELDS = ("id", "user_id", "userId")

REQUIRED_FIELDS = ("amount", "organization_name", "date", "frequency")


def normalize_keys(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Map input keys onto attribute names, rejecting id/owner and unknown keys."""
    for name in IMMUTABLE_FIELDS:
        if name in fields:
            raise errors.InvalidInputError(errors.immutable_field(name))

    unknown = sorted(key for key in fields if key not in FIELD_ALIASES)
    if unknown:
        raise errors.InvalidInputError(errors.unknown_fields(unknown))

    return {FIELD_ALIASES[key]: value for key, value in fields.items()}


def parse_amount_value(value: Any) -> Decimal:
    """Coerce an amount to a positive Decimal rounded to cents."""
    if value is None or isinstance(value, bool):
        raise errors.InvalidInputError(errors.invalid_amount(value))

    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, float):
            amount = Decimal(str(value))
        elif isinstance(value, (int, str)):
            amount = Decimal(str(value).strip())
        else:
            raise errors.InvalidInputError(errors.invalid_amount(value))
    except InvalidOperation:
        raise errors.InvalidInputError(errors.invalid_amount(value)) from None

    if not amount.is_finite():
        raise errors.InvalidInputError(errors.invalid_amount(value))

    try:
        amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # More digits than the decimal context can hold at cent precision
        raise errors.InvalidInputError(errors.invalid_amount(value)) from None
    if amount <= 0:
        raise errors.InvalidInputError(errors.invalid_amount(value))
    return amount


def parse_date_value(value: Any) -> date:
    """Coerce a date or ISO 8601 string to a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return isoparse(value.strip()).date()
        except (ValueError, OverflowError):
            raise errors.InvalidInputError(errors.invalid_date(value)) from None
    raise errors.InvalidInputError(errors.invalid_date(value))


def parse_frequency_value(value: Any) -> Frequency:
    """Coerce a frequency tag to a Frequency."""
    if isinstance(value, Frequency):
        return value
    if isinstance(value, str):
        try:
            return Frequency(value.strip().lower())
        except ValueError:
            pass
    raise errors.InvalidInputError(errors.invalid_frequency(value))


def _optional_text(value: Any, name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise errors.InvalidInputError(f"Field '{name}' must be text, got {value!r}")
    value = value.strip()
    return value or None


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_fields(fields: Mapping[str, Any]) -> DonationFields:
    """Validate a complete set of donation fields.

    Args:
        fields: Mapping of field name to raw value

    Returns:
        DonationFields with normalized values

    Raises:
        InvalidInputError: If a required field is missing or a value is invalid
    """
    values = normalize_keys(fields)

    missing = [name for name in REQUIRED_FIELDS if _is_missing(values.get(name))]
    if missing:
        raise errors.InvalidInputError(errors.missing_fields(missing))

    organization_name = values["organization_name"]
    if not isinstance(organization_name, str):
        raise errors.InvalidInputError(
            f"Field 'organization_name' must be text, got {organization_name!r}"
        )

    return DonationFields(
        amount=parse_amount_value(values["amount"]),
        organization_name=organization_name.strip(),
        date=parse_date_value(values["date"]),
        frequency=parse_frequency_value(values["frequency"]),
        category=_optional_text(values.get("category"), "category"),
        notes=_optional_text(values.get("notes"), "notes"),
    )


def fields_of(donation: Donation) -> dict[str, Any]:
    """Return the mutable fields of a stored donation as a mapping."""
    return {
        "amount": donation.amount,
        "organization_name": donation.organization_name,
        "date": donation.date,
        "frequency": donation.frequency,
        "category": donation.category,
        "notes": donation.notes,
    }


def merge_fields(existing: Donation, partial: Mapping[str, Any]) -> DonationFields:
    """Overlay a partial update on a stored donation and validate the result."""
    merged = fields_of(existing)
    merged.update(normalize_keys(partial))
    return validate_fields(merged)
