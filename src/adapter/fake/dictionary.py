"""In-memory implementation of ExternalDictionaryPort for testing and offline use."""

from domain.model.dictionary_entry import DictionaryEntry
from domain.model.result import Outcome, Success


class InMemoryDictionary:
    """Dictionary that answers from preconfigured entries.

    Unknown words get an empty (not found) entry. Lookups are recorded in
    ``calls`` so tests can assert on provider access.
    """

    def __init__(self, entries: dict[str, DictionaryEntry] | None = None):
        self.entries = dict(entries or {})
        self.calls: list[str] = []

    async def get_word(self, word: str) -> Outcome[DictionaryEntry]:
        self.calls.append(word)
        return Success(self.entries.get(word, DictionaryEntry(word=word)))
