# programhub/core/ports/record_store.py
from typing import Any, List, Mapping, Optional, Protocol, Union

from programhub.core.domain.database import PrototypeDatabase, TableName
from programhub.core.domain.models import Record


TableRef = Union[TableName, str]


class IRecordStore(Protocol):
    """
    Port for generic CRUD over the prototype document.

    This is the single choke point for the serialized document: nothing else
    in the system parses or writes the storage format.
    """

    def load_database(self) -> PrototypeDatabase:
        """
        Returns the current document, or a structurally complete empty one.
        Never raises for storage problems.
        """
        ...

    def persist_database(self, database: PrototypeDatabase) -> None:
        """Stores the whole document. Storage failures are logged, not raised."""
        ...

    def get_all(self, table: TableRef) -> List[Record]:
        ...

    def get_by_id(self, table: TableRef, record_id: str) -> Optional[Record]:
        ...

    def create_record(self, table: TableRef, fields: Mapping[str, Any]) -> Record:
        """
        Adds a record, assigning ``id`` and ``createdAt`` when absent.

        Raises:
            InvalidRecordError: the fields do not fit the table's record model.
        """
        ...

    def update_record(self, table: TableRef, record_id: str, fields: Mapping[str, Any]) -> Optional[Record]:
        """
        Overwrites the given fields and re-stamps ``updatedAt``.
        Returns None, leaving storage untouched, when the id is unknown.
        """
        ...

    def delete_record(self, table: TableRef, record_id: str) -> bool:
        """Returns whether a record was removed."""
        ...

    def reset_database(self) -> None:
        ...

    def touch_seed_metadata(self) -> None:
        ...

    def health_check(self) -> bool:
        ...
