# programhub/core/selectors/programs.py
"""
Relationship resolver.

Pure functions over a loaded ``PrototypeDatabase``: they join collections
in memory by plain equality on foreign-key fields and never touch storage.
Dangling references are tolerated and simply produce empty related sets.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from programhub.core.domain.database import PrototypeDatabase
from programhub.core.domain.models import (
    CountryCoordinator,
    EducationalInstitution,
    InstitutionStatus,
    InstitutionTeacher,
    InvitationStatus,
    Program,
    ProgramActivity,
    ProgramInvitation,
    ProgramProject,
    ProgramProjectTemplate,
    ProgramStatus,
    RelationshipStatus,
)
from programhub.core.domain.views import CoPartnerLink, ProgramSummary, ProgramSummaryMetrics
from programhub.shared.timeutils import parse_timestamp


# ---------------------------------------------------------------------------
# Per-program lookups
# ---------------------------------------------------------------------------


def co_partners_for_program(database: PrototypeDatabase, program_id: str) -> List[CoPartnerLink]:
    partners = {partner.id: partner for partner in database.partners}
    return [
        CoPartnerLink(relationship=relationship, partner=partners.get(relationship.partner_id))
        for relationship in database.program_partners
        if relationship.program_id == program_id
    ]


def coordinators_for_program(database: PrototypeDatabase, program_id: str) -> List[CountryCoordinator]:
    return [c for c in database.coordinators if c.program_id == program_id]


def institutions_for_program(database: PrototypeDatabase, program_id: str) -> List[EducationalInstitution]:
    return [i for i in database.institutions if i.program_id == program_id]


def teachers_for_program(database: PrototypeDatabase, program_id: str) -> List[InstitutionTeacher]:
    return [t for t in database.institution_teachers if t.program_id == program_id]


def projects_for_program(database: PrototypeDatabase, program_id: str) -> List[ProgramProject]:
    return [p for p in database.program_projects if p.program_id == program_id]


def templates_for_program(database: PrototypeDatabase, program_id: str) -> List[ProgramProjectTemplate]:
    return [t for t in database.program_templates if t.program_id == program_id]


def activities_for_program(database: PrototypeDatabase, program_id: str) -> List[ProgramActivity]:
    return [a for a in database.activities if a.program_id == program_id]


def invitations_for_program(
    database: PrototypeDatabase,
    program_id: str,
    invitation_type: Optional[str] = None,
) -> List[ProgramInvitation]:
    return [
        invitation
        for invitation in database.invitations
        if invitation.program_id == program_id
        and (invitation_type is None or invitation.invitation_type == invitation_type)
    ]


# ---------------------------------------------------------------------------
# Partner -> programs
# ---------------------------------------------------------------------------


def _dedupe_newest_first(programs: Iterable[Program]) -> List[Program]:
    """Last occurrence of an id wins; result sorted by createdAt, newest first."""
    by_id: Dict[str, Program] = {}
    for program in programs:
        by_id[program.id] = program
    return sorted(by_id.values(), key=lambda p: parse_timestamp(p.created_at), reverse=True)


def programs_for_partner(
    database: PrototypeDatabase,
    partner_id: str,
    include_related: bool = False,
) -> List[Program]:
    """
    Programs a partner owns, optionally together with the ones it is linked to
    as a co-partner.

    Related programs are picked up from any ProgramPartner row for the partner,
    whatever its status (invited, declined and removed links included).
    """
    owned = [program for program in database.programs if program.partner_id == partner_id]

    if not include_related:
        return _dedupe_newest_first(owned)

    related_ids = {
        relationship.program_id
        for relationship in database.program_partners
        if relationship.partner_id == partner_id
    }
    related = [program for program in database.programs if program.id in related_ids]

    return _dedupe_newest_first(owned + related)


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------


def _collect_countries(
    program: Program,
    coordinators: List[CountryCoordinator],
    institutions: List[EducationalInstitution],
) -> List[str]:
    # dict keeps first-seen order while deduplicating
    countries: Dict[str, None] = dict.fromkeys(program.countries_in_scope)
    for coordinator in coordinators:
        if coordinator.country:
            countries.setdefault(coordinator.country)
    for institution in institutions:
        if institution.country:
            countries.setdefault(institution.country)
    return list(countries)


def compute_metrics(
    program: Program,
    co_partners: List[CoPartnerLink],
    coordinators: List[CountryCoordinator],
    institutions: List[EducationalInstitution],
    teachers: List[InstitutionTeacher],
    projects: List[ProgramProject],
    templates: List[ProgramProjectTemplate],
    invitations: List[ProgramInvitation],
) -> ProgramSummaryMetrics:
    return ProgramSummaryMetrics(
        student_count=sum(institution.student_count or 0 for institution in institutions),
        institution_count=len(institutions),
        active_institution_count=sum(
            1 for institution in institutions if institution.status == InstitutionStatus.ACTIVE
        ),
        teacher_count=len(teachers),
        coordinator_count=len(coordinators),
        co_partner_count=sum(
            1 for link in co_partners if link.relationship.status == RelationshipStatus.ACCEPTED
        ),
        project_count=len(projects),
        active_project_count=sum(1 for project in projects if project.status == ProgramStatus.ACTIVE),
        template_count=len(templates),
        pending_invitations=sum(
            1 for invitation in invitations if invitation.status == InvitationStatus.PENDING
        ),
        countries=_collect_countries(program, coordinators, institutions),
    )


def build_program_summary(database: PrototypeDatabase, program: Program) -> ProgramSummary:
    co_partners = co_partners_for_program(database, program.id)
    coordinators = coordinators_for_program(database, program.id)
    institutions = institutions_for_program(database, program.id)
    teachers = teachers_for_program(database, program.id)
    projects = projects_for_program(database, program.id)
    templates = templates_for_program(database, program.id)
    invitations = invitations_for_program(database, program.id)
    activities = activities_for_program(database, program.id)

    return ProgramSummary(
        program=program,
        co_partners=co_partners,
        coordinators=coordinators,
        institutions=institutions,
        teachers=teachers,
        projects=projects,
        templates=templates,
        invitations=invitations,
        activities=activities,
        metrics=compute_metrics(
            program,
            co_partners,
            coordinators,
            institutions,
            teachers,
            projects,
            templates,
            invitations,
        ),
    )


def summaries_for_partner(
    database: PrototypeDatabase,
    partner_id: str,
    include_related: bool = False,
) -> List[ProgramSummary]:
    return [
        build_program_summary(database, program)
        for program in programs_for_partner(database, partner_id, include_related=include_related)
    ]


def find_summary_by_id(database: PrototypeDatabase, program_id: str) -> Optional[ProgramSummary]:
    program = next((entry for entry in database.programs if entry.id == program_id), None)
    if program is None:
        return None
    return build_program_summary(database, program)
