# programhub/adapters/persistence/__init__.py
"""
Persistence Adapters.

This package implements the storage ports defined in the Core Domain.
It handles the translation between Domain Entities and the serialized
prototype document.

Components:
- InMemoryKeyValueStorage / FileSystemKeyValueStorage: IKeyValueStorage backends.
- PrototypeRecordStore: IRecordStore over one JSON document in a key-value storage.
"""

from .key_value import FileSystemKeyValueStorage, InMemoryKeyValueStorage, build_key_value_storage
from .prototype_store import PROTOTYPE_STORAGE_KEY, PrototypeRecordStore

__all__ = [
    "FileSystemKeyValueStorage",
    "InMemoryKeyValueStorage",
    "build_key_value_storage",
    "PROTOTYPE_STORAGE_KEY",
    "PrototypeRecordStore",
]
