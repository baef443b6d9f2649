"""Utility functions for givingcircle."""

from givingcircle.utils.date_parser import parse_date
from givingcircle.utils.amount_parser import parse_amount
from givingcircle.utils.formatting import format_currency, format_percent

__all__ = ["parse_date", "parse_amount", "format_currency", "format_percent"]
