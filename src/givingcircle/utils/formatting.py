"""Currency and percentage formatting helpers."""

from decimal import Decimal, ROUND_HALF_UP

WHOLE = Decimal("1")
CENTS = Decimal("0.01")


def format_currency(amount: Decimal, cents: bool = True) -> str:
    """Format an amount as US dollars.

    Args:
        amount: Amount to format
        cents: If False, round to whole dollars (used on summary cards)

    Returns:
        String like "$1,234.50", or "$1,235" without cents
    """
    quantum = CENTS if cents else WHOLE
    value = Decimal(amount).quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,}"


def format_percent(share: Decimal) -> str:
    """Format a fraction as a whole-number percentage, e.g. "16%"."""
    value = (Decimal(share) * 100).quantize(WHOLE, rounding=ROUND_HALF_UP)
    return f"{value}%"
