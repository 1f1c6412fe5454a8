# programhub/core/selectors/metrics.py
from typing import Iterable, Set

from programhub.core.domain.models import ProgramStatus
from programhub.core.domain.views import PartnerProgramMetrics, ProgramSummary


def aggregate_program_metrics(summaries: Iterable[ProgramSummary]) -> PartnerProgramMetrics:
    """
    Fold program summaries into partner-wide totals.

    Counts are summed; countries are unioned, so a country active in several
    programs is counted once. No summaries gives an all-zero result.
    """
    totals = PartnerProgramMetrics()
    countries: Set[str] = set()

    for summary in summaries:
        metrics = summary.metrics
        totals.total_programs += 1
        if summary.program.status == ProgramStatus.ACTIVE:
            totals.active_programs += 1
        totals.co_partners += metrics.co_partner_count
        totals.coordinators += metrics.coordinator_count
        totals.institutions += metrics.institution_count
        totals.teachers += metrics.teacher_count
        totals.students += metrics.student_count
        totals.projects += metrics.project_count
        totals.active_projects += metrics.active_project_count
        totals.templates += metrics.template_count
        totals.pending_invitations += metrics.pending_invitations
        countries.update(metrics.countries)

    totals.country_count = len(countries)
    return totals
