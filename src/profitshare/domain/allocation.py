"""Equal-split share allocation."""

from decimal import Decimal
from typing import Sequence

from profitshare.domain.entities import Stakeholder
from profitshare.domain.errors import ComputationError, no_active_stakeholders

ZERO = Decimal("0")


def split_ratio(stakeholder_count: int) -> Decimal:
    """Return each stakeholder's fraction of a period balance.

    Raises:
        ComputationError: If there are no stakeholders to split between
    """
    if stakeholder_count <= 0:
        raise ComputationError(no_active_stakeholders())
    return Decimal(1) / Decimal(stakeholder_count)


def allocate_period_shares(
    balance: Decimal, stakeholders: Sequence[Stakeholder]
) -> dict[int, Decimal]:
    """Split a period's net balance evenly across stakeholders.

    Losses are not distributed: a zero or negative balance gives every
    stakeholder a share of exactly zero.

    Args:
        balance: Net balance (profit - cost) for the period
        stakeholders: Active stakeholders taking part in the split

    Returns:
        Mapping of stakeholder ID to share, in stakeholder order

    Raises:
        ComputationError: If no stakeholders are given
    """
    ratio = split_ratio(len(stakeholders))
    share = balance * ratio if balance > 0 else ZERO
    return {stakeholder.id: share for stakeholder in stakeholders}
