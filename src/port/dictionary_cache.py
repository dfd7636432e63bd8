"""Port definition for the dictionary entry cache."""

from typing import Protocol


class DictionaryCachePort(Protocol):
    """Key-value store for serialized dictionary entries.

    Keys are used exactly as given. Implementations raise ``CacheError``
    when the backing store fails and must be safe for concurrent use.
    """

    async def get(self, key: str) -> str | None: ...
    async def set(self, key: str, value: str) -> None: ...
    async def ping(self) -> bool: ...
