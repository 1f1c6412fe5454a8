# programhub/core/selectors/catalog.py
"""
Catalog builder.

Projects programs into display-ready cards for discovery pages. This is the
one place that decides which partner is shown as a program's host, so callers
never re-derive it from the relationship rows themselves.
"""

from __future__ import annotations

from typing import List, Optional

from programhub.core.domain.database import PrototypeDatabase
from programhub.core.domain.models import CoPartnerRole, Partner, Program
from programhub.core.domain.views import (
    CatalogMetrics,
    ProgramCatalogItem,
    ProgramSummary,
)
from programhub.shared.timeutils import parse_iso

from .programs import build_program_summary


def resolve_host_partner(database: PrototypeDatabase, summary: ProgramSummary) -> Optional[Partner]:
    """The partner on the ``host`` relationship, else the program's owner."""
    for link in summary.co_partners:
        if link.relationship.role == CoPartnerRole.HOST and link.partner is not None:
            return link.partner

    owner_id = summary.program.partner_id
    return next((partner for partner in database.partners if partner.id == owner_id), None)


def resolve_supporting_partner(summary: ProgramSummary) -> Optional[Partner]:
    supporting_id = summary.program.supporting_partner_id
    if not supporting_id:
        return None

    for link in summary.co_partners:
        if link.relationship.partner_id == supporting_id:
            return link.partner
    return None


def resolve_cover_image(summary: ProgramSummary, host: Optional[Partner]) -> Optional[str]:
    for template in summary.templates:
        if template.hero_image_url:
            return template.hero_image_url
    if summary.program.logo:
        return summary.program.logo
    if host is not None and host.logo:
        return host.logo
    return None


def start_month_label(summary: ProgramSummary) -> Optional[str]:
    """First template's recommended month, else the month of the program start date."""
    if summary.templates and summary.templates[0].recommended_start_month:
        return summary.templates[0].recommended_start_month

    start = parse_iso(summary.program.start_date)
    if start is not None:
        return start.strftime("%B")
    return None


def build_catalog_item(database: PrototypeDatabase, program: Program) -> ProgramCatalogItem:
    summary = build_program_summary(database, program)
    host = resolve_host_partner(database, summary)
    metrics = summary.metrics

    return ProgramCatalogItem(
        id=program.id,
        name=program.name,
        display_title=program.display_title or program.name,
        marketing_tagline=program.marketing_tagline,
        description=program.description,
        status=program.status,
        is_public=program.is_public,
        host_partner=host,
        supporting_partner=resolve_supporting_partner(summary),
        supporting_partner_role=program.supporting_partner_role,
        cover_image_url=resolve_cover_image(summary, host),
        brand_color=program.brand_color,
        sdg_focus=list(program.sdg_focus),
        start_month_label=start_month_label(summary),
        metrics=CatalogMetrics(
            templates=metrics.template_count,
            active_projects=metrics.active_project_count,
            institutions=metrics.institution_count,
            countries=len(metrics.countries),
            students=metrics.student_count,
        ),
        templates=summary.templates,
    )


def build_catalog(database: PrototypeDatabase, include_private: bool = False) -> List[ProgramCatalogItem]:
    """
    Catalog items in document order. Private (``is_public = False``) programs
    are left out unless ``include_private`` is set.
    """
    return [
        build_catalog_item(database, program)
        for program in database.programs
        if include_private or program.is_public
    ]
