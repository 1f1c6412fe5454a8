# programhub/core/ports/__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the Infrastructure Adapters must
implement. They let the selectors and use cases work against "a record
store" and "a session" without knowing whether the document lives in
memory, on disk, or somewhere else.
"""

from .key_value_storage import IKeyValueStorage
from .record_store import IRecordStore
from .session_provider import ISessionProvider

__all__ = [
    "IKeyValueStorage",
    "IRecordStore",
    "ISessionProvider",
]
