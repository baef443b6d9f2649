"""Shareable donor profile links and messages."""

from givingcircle.domain.entities import DonationSummary
from givingcircle.utils.formatting import format_currency

DEFAULT_SHARE_BASE_URL = "http://localhost:8080"


def share_url(base_url: str, user_id: str) -> str:
    """Return the public profile link for a donor."""
    return f"{base_url.rstrip('/')}/donors/{user_id}"


def share_message(summary: DonationSummary) -> str:
    """Return the text posted alongside a shared profile link."""
    total = format_currency(summary.total, cents=False)
    return f"Check out my charitable giving profile with a total of {total} in donations!"
