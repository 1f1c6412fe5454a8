# programhub/core/use_cases/program_queries.py
from typing import List, Optional

import structlog

from programhub.core.domain.views import (
    PartnerContext,
    PartnerOverview,
    ProgramCatalogItem,
    ProgramSummary,
)
from programhub.core.ports.record_store import IRecordStore
from programhub.core.ports.session_provider import ISessionProvider
from programhub.core.selectors.catalog import build_catalog
from programhub.core.selectors.metrics import aggregate_program_metrics
from programhub.core.selectors.partner_context import resolve_partner_context
from programhub.core.selectors.programs import find_summary_by_id, summaries_for_partner
from programhub.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class GetProgramSummary:
    """
    Use Case: One program with all related records and derived metrics.
    """

    def __init__(self, store: IRecordStore):
        self.store = store

    def execute(self, program_id: str) -> Optional[ProgramSummary]:
        with tracer.start_as_current_span("use_case.get_program_summary") as span:
            span.set_attribute("app.program_id", program_id)
            summary = find_summary_by_id(self.store.load_database(), program_id)
            if summary is None:
                logger.info("program_summary_missing", program_id=program_id)
            return summary


class LoadPartnerOverview:
    """
    Use Case: The partner dashboard.

    Responsibilities:
    1. Works out which partner is asking (explicit id, else the session).
    2. Builds a summary per owned (and, by default, related) program.
    3. Folds the summaries into partner-wide metrics.

    A caller that cannot be tied to any partner gets an empty overview.
    """

    def __init__(self, store: IRecordStore, session_provider: ISessionProvider):
        self.store = store
        self.session_provider = session_provider

    def execute(self, partner_id: Optional[str] = None, include_related: bool = True) -> PartnerOverview:
        with tracer.start_as_current_span("use_case.load_partner_overview") as span:
            database = self.store.load_database()

            if partner_id is None:
                context = resolve_partner_context(self.session_provider.get_current_session(), database)
            else:
                partner = next((p for p in database.partners if p.id == partner_id), None)
                context = PartnerContext(partner_id=partner_id, partner=partner)

            if context.partner_id is None:
                logger.info("partner_overview_unresolved")
                return PartnerOverview(context=context)

            span.set_attribute("app.partner_id", context.partner_id)
            summaries = summaries_for_partner(database, context.partner_id, include_related=include_related)

            logger.info(
                "partner_overview_built",
                partner_id=context.partner_id,
                programs=len(summaries),
                include_related=include_related,
            )
            return PartnerOverview(
                context=context,
                summaries=summaries,
                metrics=aggregate_program_metrics(summaries),
            )


class BrowseProgramCatalog:
    """
    Use Case: Discovery listing of programs, public ones unless asked otherwise.
    """

    def __init__(self, store: IRecordStore):
        self.store = store

    def execute(self, include_private: bool = False) -> List[ProgramCatalogItem]:
        with tracer.start_as_current_span("use_case.browse_program_catalog") as span:
            span.set_attribute("app.include_private", include_private)
            items = build_catalog(self.store.load_database(), include_private=include_private)
            span.set_attribute("app.catalog_size", len(items))
            return items
