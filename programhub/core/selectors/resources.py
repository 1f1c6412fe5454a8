# programhub/core/selectors/resources.py
from typing import Iterable, List, Optional

from programhub.core.domain.models import (
    ProgramResource,
    ResourceAvailabilityScope,
    ResourceOwnerRole,
)
from programhub.shared.timeutils import parse_timestamp


def _sort_by_updated_desc(resources: Iterable[ProgramResource]) -> List[ProgramResource]:
    return sorted(
        resources,
        key=lambda resource: parse_timestamp(resource.updated_at or resource.created_at),
        reverse=True,
    )


def resources_for_parent(resources: Iterable[ProgramResource]) -> List[ProgramResource]:
    """The parent organisation sees every resource, most recently touched first."""
    return _sort_by_updated_desc(resources)


def _visible_to_partner(resource: ProgramResource, partner_id: str) -> bool:
    if resource.owner_role == ResourceOwnerRole.PARTNER:
        return resource.owner_partner_id == partner_id
    if resource.availability_scope == ResourceAvailabilityScope.ALL_PARTNERS:
        return True
    if resource.availability_scope == ResourceAvailabilityScope.SPECIFIC_PARTNERS:
        return partner_id in (resource.target_partner_ids or [])
    return False


def resources_for_partner(
    resources: Iterable[ProgramResource],
    partner_id: Optional[str],
) -> List[ProgramResource]:
    """
    A partner sees its own uploads plus whatever the parent organisation
    shared with all partners or with this partner specifically.
    """
    if not partner_id:
        return []
    return _sort_by_updated_desc(r for r in resources if _visible_to_partner(r, partner_id))
