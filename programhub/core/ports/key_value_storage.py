# programhub/core/ports/key_value_storage.py
from typing import Optional, Protocol


class IKeyValueStorage(Protocol):
    """
    Port for the raw storage medium behind the record store.
    Implementations could be an in-memory dict, a directory of JSON files,
    or a browser-like local storage bridge. Values are opaque strings.
    """

    def get_item(self, key: str) -> Optional[str]:
        """
        Returns the stored string for ``key`` or None when nothing is stored.
        May raise if the medium is unavailable; the record store contains that.
        """
        ...

    def set_item(self, key: str, value: str) -> None:
        """Stores ``value`` under ``key``, replacing anything already there."""
        ...

    def remove_item(self, key: str) -> None:
        """Removes ``key``. Removing a missing key is not an error."""
        ...

    def health_check(self) -> bool:
        """Returns True if the underlying storage is accessible."""
        ...
