"""Utility for resolving stakeholder names to IDs."""

from profitshare.domain.errors import NotFoundError
from profitshare.domain.stakeholder import StakeholderService


def resolve_stakeholder(stakeholder_service: StakeholderService, stakeholder: str | int) -> int:
    """Resolve stakeholder name or ID to stakeholder ID.

    A value that parses as an integer is treated as an ID first; if no
    stakeholder has that ID, it is tried as a name (names like "2024" are
    allowed).

    Args:
        stakeholder_service: StakeholderService instance
        stakeholder: Stakeholder name or ID

    Returns:
        Stakeholder ID

    Raises:
        NotFoundError: If no stakeholder matches
    """
    if isinstance(stakeholder, int):
        if stakeholder_service.get_stakeholder(stakeholder) is None:
            raise NotFoundError(f"Stakeholder ID {stakeholder} not found")
        return stakeholder

    try:
        stakeholder_id = int(stakeholder)
    except (ValueError, TypeError):
        stakeholder_id = None

    if stakeholder_id is not None and stakeholder_service.get_stakeholder(stakeholder_id) is not None:
        return stakeholder_id

    found = stakeholder_service.get_stakeholder_by_name(stakeholder)
    if found is not None:
        return found.id

    raise NotFoundError(f"Stakeholder '{stakeholder}' not found")
