"""Dictionary port: outbound interface for external dictionary sources."""

from typing import Protocol

from domain.model.dictionary_entry import DictionaryEntry
from domain.model.result import Outcome


class ExternalDictionaryPort(Protocol):
    """Port for looking a word up in an external dictionary.

    Implementations may do network I/O but must not raise: every failure
    comes back as a ``Failure``. A word the source does not know is a
    ``Success`` holding an empty entry (``entry.exists`` is False).
    """

    async def get_word(self, word: str) -> Outcome[DictionaryEntry]: ...
