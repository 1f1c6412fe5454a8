# programhub/core/use_cases/delete_program.py
from typing import Callable, List, Optional, Tuple

import structlog

from programhub.core.domain.database import PROGRAM_DEPENDENT_TABLES, PrototypeDatabase, TableName
from programhub.core.domain.exceptions import CascadeDeleteError, ProgramNotFoundError
from programhub.core.domain.views import CascadeDeleteReport
from programhub.core.ports.record_store import IRecordStore
from programhub.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)

DeleteFn = Callable[[TableName, str], bool]


def plan_cascade(database: PrototypeDatabase, program_id: str) -> List[Tuple[TableName, List[str]]]:
    """Ids to remove per table, dependents first and the program itself last."""
    plan = []
    for table in PROGRAM_DEPENDENT_TABLES:
        record_ids = [record.id for record in database.table(table) if record.program_id == program_id]
        # Records the models cannot read still point at the program by their raw key.
        record_ids += [
            raw["id"] for raw in database.unparsed(table)
            if raw.get("programId") == program_id and raw.get("id")
        ]
        plan.append((table, record_ids))
    plan.append((TableName.PROGRAMS, [program_id]))
    return plan


def cascade_delete_program(
    database: Optional[PrototypeDatabase],
    program_id: str,
    delete_record: DeleteFn,
) -> CascadeDeleteReport:
    """
    Delete a program and every record whose ``program_id`` points at it.

    Dependents are found on the ``database`` snapshot and removed through
    ``delete_record`` one by one; the program row goes last so a reader never
    sees dependents without their program. A ``False`` from ``delete_record``
    means the record was already gone and is reported as skipped.

    Raises:
        CascadeDeleteError: ``delete_record`` raised. Nothing after the failing
            record is attempted (the program is kept); ``report`` on the error
            lists what had been removed.
    """
    report = CascadeDeleteReport(program_id=program_id)
    if database is None:
        return report

    for table, record_ids in plan_cascade(database, program_id):
        for record_id in record_ids:
            try:
                removed = delete_record(table, record_id)
            except Exception as e:
                logger.error(
                    "cascade_delete_failed",
                    program_id=program_id,
                    table=table.value,
                    record_id=record_id,
                    error=str(e),
                )
                raise CascadeDeleteError(program_id, table.value, record_id, report=report, cause=e) from e

            bucket = report.deleted if removed else report.skipped
            bucket.setdefault(table.value, []).append(record_id)

    report.program_deleted = program_id in report.deleted.get(TableName.PROGRAMS.value, [])
    return report


class DeleteProgram:
    """
    Use Case: Remove a program together with everything that references it.
    """

    def __init__(self, store: IRecordStore):
        self.store = store

    def execute(self, program_id: str) -> CascadeDeleteReport:
        with tracer.start_as_current_span("use_case.delete_program") as span:
            span.set_attribute("app.program_id", program_id)

            database = self.store.load_database()
            if program_id not in database.record_ids(TableName.PROGRAMS):
                raise ProgramNotFoundError(program_id)

            report = cascade_delete_program(database, program_id, self.store.delete_record)

            span.set_attribute("app.deleted_records", report.deleted_count)
            logger.info(
                "program_deleted",
                program_id=program_id,
                deleted_records=report.deleted_count,
                skipped=sum(len(ids) for ids in report.skipped.values()),
            )
            return report
