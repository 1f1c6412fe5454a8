# programhub/core/selectors/__init__.py
"""
Pure read-side functions over a loaded PrototypeDatabase.

Nothing here performs I/O: callers (use cases, or any embedding UI layer)
load the document through the record store and hand it in.
"""

from .catalog import build_catalog, build_catalog_item
from .metrics import aggregate_program_metrics
from .partner_context import resolve_partner_context, resolve_partner_id_from_session
from .programs import (
    activities_for_program,
    build_program_summary,
    co_partners_for_program,
    coordinators_for_program,
    find_summary_by_id,
    institutions_for_program,
    invitations_for_program,
    programs_for_partner,
    projects_for_program,
    summaries_for_partner,
    teachers_for_program,
    templates_for_program,
)
from .resources import resources_for_parent, resources_for_partner

__all__ = [
    "build_catalog",
    "build_catalog_item",
    "aggregate_program_metrics",
    "resolve_partner_context",
    "resolve_partner_id_from_session",
    "activities_for_program",
    "build_program_summary",
    "co_partners_for_program",
    "coordinators_for_program",
    "find_summary_by_id",
    "institutions_for_program",
    "invitations_for_program",
    "programs_for_partner",
    "projects_for_program",
    "summaries_for_partner",
    "teachers_for_program",
    "templates_for_program",
    "resources_for_parent",
    "resources_for_partner",
]
