"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"
    - "USD 50"

    Sign and range are not checked here; the donation validation rules
    reject amounts that are not greater than zero.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Remove currency symbols and codes
    amount_str = re.sub(r"[$€£¥]|\bUSD\b", "", amount_str, flags=re.IGNORECASE)

    # Remove commas
    amount_str = amount_str.replace(",", "")

    # Remove whitespace again
    amount_str = amount_str.strip()

    try:
        return Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e!r}")
