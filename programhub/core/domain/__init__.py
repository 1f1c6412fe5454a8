# programhub/core/domain/__init__.py
"""
Domain entities, the prototype document and the read models derived from it.
"""

from .database import (
    PROGRAM_DEPENDENT_TABLES,
    TABLES,
    PrototypeDatabase,
    PrototypeMetadata,
    TableName,
    empty_database,
    resolve_table,
)
from .exceptions import (
    CascadeDeleteError,
    DomainError,
    InvalidRecordError,
    ProgramNotFoundError,
    UnknownTableError,
)

__all__ = [
    "PROGRAM_DEPENDENT_TABLES",
    "TABLES",
    "PrototypeDatabase",
    "PrototypeMetadata",
    "TableName",
    "empty_database",
    "resolve_table",
    "CascadeDeleteError",
    "DomainError",
    "InvalidRecordError",
    "ProgramNotFoundError",
    "UnknownTableError",
]
