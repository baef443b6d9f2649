"""Summary derivation over a user's donations.

Everything here is a pure function of its input: nothing is cached and no
input is mutated. Sums use Decimal arithmetic accumulated left to right over
the given sequence, so results are exact and reproducible.
"""

from collections import Counter
from typing import Iterable, Sequence

from givingcircle.domain.entities import (
    ZERO,
    DistributionRow,
    Donation,
    DonationSummary,
    Frequency,
    OrganizationCount,
    ProfileStats,
)

# Chart order used by the dashboard
DISTRIBUTION_ORDER = (Frequency.ONE_TIME, Frequency.MONTHLY, Frequency.ANNUAL)

TOP_ORGANIZATIONS = 3


def summarize(records: Iterable[Donation]) -> DonationSummary:
    """Compute total and per-frequency sums for a set of donations.

    Args:
        records: Donations belonging to a single user

    Returns:
        DonationSummary; all zero for an empty input
    """
    total = ZERO
    by_frequency = {frequency: ZERO for frequency in Frequency}

    for record in records:
        total += record.amount
        by_frequency[record.frequency] += record.amount

    return DonationSummary(
        total=total,
        monthly=by_frequency[Frequency.MONTHLY],
        annual=by_frequency[Frequency.ANNUAL],
        one_time=by_frequency[Frequency.ONE_TIME],
    )


def frequency_distribution(summary: DonationSummary) -> list[DistributionRow]:
    """Build the frequency distribution series for charts.

    Frequencies with no donations are left out. Each row's share is its
    fraction of the summary total.
    """
    if summary.total <= 0:
        return []

    rows = []
    for frequency in DISTRIBUTION_ORDER:
        amount = summary.for_frequency(frequency)
        if amount > 0:
            rows.append(
                DistributionRow(
                    frequency=frequency,
                    label=frequency.label,
                    amount=amount,
                    share=amount / summary.total,
                )
            )
    return rows


def build_profile_stats(records: Sequence[Donation]) -> ProfileStats:
    """Build profile overview figures for a donor's donations."""
    if not records:
        return ProfileStats()

    # Counter preserves first-seen order, and most_common() is a stable sort
    organization_counts = Counter(record.organization_name for record in records)
    categories = {record.category for record in records if record.category}

    top_organizations = tuple(
        OrganizationCount(organization_name=name, count=count)
        for name, count in organization_counts.most_common(TOP_ORGANIZATIONS)
    )

    return ProfileStats(
        donation_count=len(records),
        organization_count=len(organization_counts),
        category_count=len(categories),
        first_donation_date=min(record.date for record in records),
        top_organizations=top_organizations,
    )
