"""Dictionary entry domain models.

A ``DictionaryEntry`` is built by an external dictionary after parsing its
source data, or rebuilt from the JSON text stored in the dictionary cache.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from domain.model.errors import EntryDecodeError


class PartOfSpeech(str, Enum):
    """Grammatical category of a word."""

    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    NUMERAL = "numeral"
    INTERJECTION = "interjection"
    CONJUNCTION = "conjunction"
    ADPOSITION = "adposition"
    COMPLEMENT = "complement"

    @classmethod
    def from_label(cls, label: str) -> "PartOfSpeech | None":
        """Map a Sõnaveeb label (Estonian) or an English value to a member.

        Returns None for labels that name no known category.
        """
        normalized = label.strip().lower()
        if normalized in _ESTONIAN_LABELS:
            return _ESTONIAN_LABELS[normalized]
        try:
            return cls(normalized)
        except ValueError:
            return None


_ESTONIAN_LABELS: dict[str, PartOfSpeech] = {
    "nimisõna": PartOfSpeech.NOUN,
    "tegusõna": PartOfSpeech.VERB,
    "omadussõna": PartOfSpeech.ADJECTIVE,
    "määrsõna": PartOfSpeech.ADVERB,
    "asesõna": PartOfSpeech.PRONOUN,
    "arvsõna": PartOfSpeech.NUMERAL,
    "hüüdsõna": PartOfSpeech.INTERJECTION,
    "sidesõna": PartOfSpeech.CONJUNCTION,
    "kaassõna": PartOfSpeech.ADPOSITION,
    "eessõna": PartOfSpeech.ADPOSITION,
    "tagasõna": PartOfSpeech.ADPOSITION,
    "täiendsõna": PartOfSpeech.COMPLEMENT,
}


@dataclass(frozen=True)
class Meaning:
    """One sense of a word with optional usage examples."""
    definition: str
    examples: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "examples", tuple(self.examples))

    def to_dict(self) -> dict[str, Any]:
        return {"definition": self.definition, "examples": list(self.examples)}


@dataclass(frozen=True)
class DictionaryEntry:
    """Immutable result of looking a word up in a dictionary (Value Object).

    An entry with no part of speech, no word forms and no meanings is the
    "not found" marker, not an error.
    """

    word: str
    part_of_speech: tuple[PartOfSpeech, ...] = ()
    word_forms: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    meanings: tuple[Meaning, ...] = ()

    def __post_init__(self) -> None:
        # Freeze collections passed at construction time
        object.__setattr__(self, "part_of_speech", tuple(self.part_of_speech))
        object.__setattr__(self, "meanings", tuple(self.meanings))
        if not isinstance(self.word_forms, MappingProxyType):
            object.__setattr__(self, "word_forms", MappingProxyType(dict(self.word_forms)))

    @property
    def exists(self) -> bool:
        """True when the source had anything to say about the word."""
        return any((self.part_of_speech, self.meanings, self.word_forms))

    # ── Serialization ────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.word,
            "partOfSpeech": [pos.value for pos in self.part_of_speech],
            "wordForms": dict(self.word_forms),
            "meanings": [meaning.to_dict() for meaning in self.meanings],
        }

    def to_json(self) -> str:
        """Serialize for the dictionary cache."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DictionaryEntry":
        """Rebuild an entry from ``to_dict()`` output.

        Raises:
            EntryDecodeError: If the data does not describe an entry.
        """
        if not isinstance(data, dict) or not isinstance(data.get("word"), str):
            raise EntryDecodeError("Dictionary entry must be an object with a 'word' string")
        try:
            part_of_speech = tuple(PartOfSpeech(tag) for tag in data.get("partOfSpeech", []))
            word_forms = {str(slot): str(form) for slot, form in data.get("wordForms", {}).items()}
            meanings = tuple(
                Meaning(
                    definition=raw["definition"],
                    examples=tuple(raw.get("examples", [])),
                )
                for raw in data.get("meanings", [])
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise EntryDecodeError(f"Invalid dictionary entry for {data['word']!r}", cause=e) from e

        return cls(
            word=data["word"],
            part_of_speech=part_of_speech,
            word_forms=word_forms,
            meanings=meanings,
        )

    @classmethod
    def from_json(cls, text: str) -> "DictionaryEntry":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise EntryDecodeError("Cached dictionary entry is not valid JSON", cause=e) from e
        return cls.from_dict(data)


@dataclass(frozen=True)
class WordResult:
    """Service-facing projection of a ``DictionaryEntry``.

    ``additional_info`` and ``status`` are only set when the word was not
    found; callers that answer over HTTP use ``status`` as the response code.
    """

    word: str
    part_of_speech: tuple[PartOfSpeech, ...]
    word_forms: Mapping[str, str] = field(hash=False)
    meanings: tuple[Meaning, ...]
    additional_info: str | None = None
    status: int | None = None

    @classmethod
    def from_entry(cls, entry: DictionaryEntry) -> "WordResult":
        return cls(
            word=entry.word,
            part_of_speech=entry.part_of_speech,
            word_forms=entry.word_forms,
            meanings=entry.meanings,
        )
