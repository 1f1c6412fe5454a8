# programhub/adapters/persistence/prototype_store.py
"""
Record store over a single serialized document.

The whole document is loaded on every read and written in full on every
change (last write wins, no partial patches, no locking). Storage problems
never reach the caller: a failed or corrupt read yields the empty default
document and a failed write is logged and dropped, so the application keeps
working in a non-persistent mode.
"""

import json
import uuid
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Type

import structlog
from pydantic import BaseModel, ValidationError

from programhub.core.domain.database import (
    DEFAULT_SCHEMA_VERSION,
    TABLES,
    PrototypeDatabase,
    PrototypeMetadata,
    TableName,
    empty_database,
    resolve_table,
)
from programhub.core.domain.exceptions import InvalidRecordError
from programhub.core.domain.models import Record
from programhub.core.ports.key_value_storage import IKeyValueStorage
from programhub.core.ports.record_store import TableRef
from programhub.shared.timeutils import to_iso, utc_now

logger = structlog.get_logger()

PROTOTYPE_STORAGE_KEY = "class2class_prototype_db_v1"


def _new_id() -> str:
    return str(uuid.uuid4())


def _to_aliases(model: Type[Record], fields: Any) -> Dict[str, Any]:
    """Normalize caller input (snake_case, camelCase or a model) to stored keys."""
    if isinstance(fields, BaseModel):
        return fields.model_dump(by_alias=True)

    normalized: Dict[str, Any] = {}
    for key, value in dict(fields).items():
        field = model.model_fields.get(key)
        normalized[(field.alias or key) if field is not None else key] = value
    return normalized


class PrototypeRecordStore:
    """
    Concrete implementation of IRecordStore on top of an IKeyValueStorage.
    """

    def __init__(
        self,
        storage: IKeyValueStorage,
        storage_key: str = PROTOTYPE_STORAGE_KEY,
        schema_version: int = DEFAULT_SCHEMA_VERSION,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self.storage = storage
        self.storage_key = storage_key
        self.schema_version = schema_version
        self._clock = clock or utc_now
        self._id_factory = id_factory or _new_id

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def _timestamp(self) -> str:
        return to_iso(self._clock())

    def merge_with_defaults(self, data: Any) -> PrototypeDatabase:
        """
        Build a complete document from whatever was stored.

        Collections missing from an older document (or stored as something
        other than a list) come back empty; records that no longer validate
        are set aside verbatim (see ``PrototypeDatabase.unparsed``) and written
        back on the next persist; metadata is layered over the defaults.
        """
        safe = empty_database(self.schema_version)

        if not isinstance(data, dict):
            return safe

        for table, spec in TABLES.items():
            raw_records = data.get(table.value)
            if not isinstance(raw_records, list):
                continue

            records: List[Record] = []
            for raw in raw_records:
                try:
                    records.append(spec.model.model_validate(raw))
                except ValidationError as e:
                    if not isinstance(raw, dict):
                        logger.warning("prototype_record_dropped", table=table.value, error=str(e))
                        continue
                    logger.warning(
                        "prototype_record_unparsed",
                        table=table.value,
                        record_id=raw.get("id"),
                        error=str(e),
                    )
                    safe.unparsed(table).append(raw)
            setattr(safe, spec.attribute, records)

        stored_metadata = data.get("metadata")
        if isinstance(stored_metadata, dict):
            merged = {**safe.metadata.model_dump(by_alias=True), **stored_metadata}
            try:
                safe.metadata = PrototypeMetadata.model_validate(merged)
            except ValidationError as e:
                logger.warning("prototype_metadata_ignored", error=str(e))

        return safe

    def load_database(self) -> PrototypeDatabase:
        try:
            raw = self.storage.get_item(self.storage_key)
            if not raw:
                return empty_database(self.schema_version)
            return self.merge_with_defaults(json.loads(raw))
        except Exception as e:
            logger.warning("prototype_db_load_failed", key=self.storage_key, error=str(e))
            return empty_database(self.schema_version)

    def persist_database(self, database: PrototypeDatabase) -> None:
        try:
            document = database.model_dump(mode="json", by_alias=True)
            for table in TABLES:
                document[table.value].extend(database.unparsed(table))
            payload = json.dumps(document, ensure_ascii=False)
            self.storage.set_item(self.storage_key, payload)
        except Exception as e:
            logger.warning("prototype_db_persist_failed", key=self.storage_key, error=str(e))

    def reset_database(self) -> None:
        self.persist_database(empty_database(self.schema_version))
        logger.info("prototype_db_reset", key=self.storage_key)

    def touch_seed_metadata(self) -> None:
        database = self.load_database()
        database.metadata.seeded_at = self._timestamp()
        self.persist_database(database)

    def health_check(self) -> bool:
        try:
            return bool(self.storage.health_check())
        except Exception:
            return False

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_all(self, table: TableRef) -> List[Record]:
        # Every load parses a fresh document, so the list is already a copy.
        return list(self.load_database().table(table))

    def get_by_id(self, table: TableRef, record_id: str) -> Optional[Record]:
        for record in self.load_database().table(table):
            if record.id == record_id:
                return record
        return None

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def _validate(self, table: TableName, data: Dict[str, Any]) -> Record:
        try:
            return TABLES[table].model.model_validate(data)
        except ValidationError as e:
            raise InvalidRecordError(table.value, str(e)) from e

    def create_record(self, table: TableRef, fields: Mapping[str, Any]) -> Record:
        name = resolve_table(table)
        spec = TABLES[name]
        now = self._timestamp()

        data = _to_aliases(spec.model, fields)
        data["id"] = data.get("id") or self._id_factory()
        if not data.get("createdAt"):
            data["createdAt"] = now
        if spec.is_mutable:
            data["updatedAt"] = now

        record = self._validate(name, data)

        database = self.load_database()
        if record.id in database.record_ids(name):
            raise InvalidRecordError(name.value, f"id '{record.id}' already exists")
        database.table(name).append(record)
        self.persist_database(database)

        logger.debug("record_created", table=name.value, record_id=record.id)
        return record.model_copy(deep=True)

    def update_record(self, table: TableRef, record_id: str, fields: Mapping[str, Any]) -> Optional[Record]:
        name = resolve_table(table)
        spec = TABLES[name]

        database = self.load_database()
        collection = database.table(name)
        index = next((i for i, item in enumerate(collection) if item.id == record_id), None)
        if index is None:
            return None

        updates = _to_aliases(spec.model, fields)
        # Identity and creation stamp are fixed for the record's lifetime.
        updates.pop("id", None)
        updates.pop("createdAt", None)

        merged = {**collection[index].model_dump(by_alias=True), **updates, "id": record_id}
        now = self._timestamp()
        if not merged.get("createdAt"):
            merged["createdAt"] = now
        if spec.is_mutable:
            merged["updatedAt"] = now

        record = self._validate(name, merged)
        collection[index] = record
        self.persist_database(database)

        logger.debug("record_updated", table=name.value, record_id=record_id, fields=sorted(updates))
        return record.model_copy(deep=True)

    def delete_record(self, table: TableRef, record_id: str) -> bool:
        name = resolve_table(table)
        spec = TABLES[name]

        database = self.load_database()
        collection = database.table(name)
        remaining = [item for item in collection if item.id != record_id]
        unparsed = database.unparsed(name)
        remaining_unparsed = [raw for raw in unparsed if raw.get("id") != record_id]

        if len(remaining) == len(collection) and len(remaining_unparsed) == len(unparsed):
            return False

        setattr(database, spec.attribute, remaining)
        unparsed[:] = remaining_unparsed
        self.persist_database(database)

        logger.debug("record_deleted", table=name.value, record_id=record_id)
        return True
