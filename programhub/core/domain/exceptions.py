# programhub/core/domain/exceptions.py
from typing import Optional


class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Addressing Errors ---

class UnknownTableError(DomainError):
    """Raised when a collection name is not part of the prototype document."""
    def __init__(self, table: str):
        self.table = table
        super().__init__(f"Table '{table}' is not a known collection.")

class ProgramNotFoundError(DomainError):
    """Raised by use cases that require an existing program."""
    def __init__(self, program_id: str):
        self.program_id = program_id
        super().__init__(f"Program '{program_id}' does not exist.")

# --- Validation Errors ---

class InvalidRecordError(DomainError):
    """Raised when fields handed to create/update do not fit the table's record model."""
    def __init__(self, table: str, detail: str):
        self.table = table
        self.detail = detail
        super().__init__(f"Invalid record for table '{table}': {detail}")

# --- Process Errors ---

class CascadeDeleteError(DomainError):
    """
    Raised when a delete step fails half-way through a cascade.

    The program itself is left in place; ``report`` lists what was already
    removed so the caller can decide how to recover.
    """
    def __init__(self, program_id: str, table: str, record_id: str, report=None, cause: Optional[BaseException] = None):
        self.program_id = program_id
        self.table = table
        self.record_id = record_id
        self.report = report
        reason = f": {cause}" if cause is not None else ""
        super().__init__(
            f"Cascade delete of program '{program_id}' stopped at {table}/{record_id}{reason}"
        )
