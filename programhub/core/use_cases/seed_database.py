# programhub/core/use_cases/seed_database.py
from typing import Optional

import structlog

from programhub.core.domain.database import TABLES, PrototypeDatabase
from programhub.core.domain.seeds import DEMO_SEED, SeedData
from programhub.core.ports.record_store import IRecordStore
from programhub.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class SeedPrototypeDatabase:
    """
    Use Case: Fill the store with demo data once.

    A store whose metadata already carries ``seededAt`` is left alone unless
    ``force`` is given, in which case it is wiped and seeded again.
    """

    def __init__(self, store: IRecordStore, seed: Optional[SeedData] = None):
        self.store = store
        self.seed = DEMO_SEED if seed is None else seed

    def execute(self, force: bool = False) -> PrototypeDatabase:
        with tracer.start_as_current_span("use_case.seed_prototype_database") as span:
            span.set_attribute("app.force", force)

            if force:
                self.store.reset_database()
            elif self.store.load_database().metadata.seeded_at:
                logger.info("seed_skipped", reason="already_seeded")
                return self.store.load_database()

            created = 0
            # Walk in collection order so owners exist before their dependents.
            for table in TABLES:
                for fields in self.seed.get(table, []):
                    self.store.create_record(table, fields)
                    created += 1

            self.store.touch_seed_metadata()
            span.set_attribute("app.records_created", created)
            logger.info("seed_completed", records=created, forced=force)

            return self.store.load_database()
