"""Word form resolution for Sõnaveeb entries.

Uses the Strategy Pattern: one strategy per part of speech decides whether
it is responsible for a word and, if so, picks the principal parts from the
word's morphology paradigm. ``WordFormsFinder`` asks the strategies in order
and uses the first one that accepts, so list order is the tie-break when a
word has several parts of speech.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Protocol

from domain.model.dictionary_entry import PartOfSpeech

VARIANT_SEPARATOR = ", "


@dataclass(frozen=True)
class WordEvidence:
    """Grammatical evidence for one word, as parsed from the source.

    ``paradigm`` maps morphology codes (``SgN``, ``Sup``, ...) to the surface
    forms listed for that code.
    """

    word: str
    part_of_speech: tuple[PartOfSpeech, ...] = ()
    paradigm: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        object.__setattr__(self, "part_of_speech", tuple(self.part_of_speech))
        if isinstance(self.paradigm, dict):
            object.__setattr__(self, "paradigm", MappingProxyType(self.paradigm))

    def has(self, part_of_speech: PartOfSpeech) -> bool:
        return part_of_speech in self.part_of_speech


class WordFormStrategy(Protocol):
    """Protocol for per-category word form derivation."""

    def accepts(self, evidence: WordEvidence) -> bool: ...

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]: ...


# ── Principal parts per category ─────────────────────────────
# Slot name -> morphology code in the Sõnaveeb paradigm table.

NOUN_SLOTS: dict[str, str] = {
    "singular_nominative": "SgN",
    "singular_genitive": "SgG",
    "singular_partitive": "SgP",
    "plural_partitive": "PlP",
}

VERB_SLOTS: dict[str, str] = {
    "ma_infinitive": "Sup",
    "da_infinitive": "Inf",
    "present_third_person": "IndPrSg3",
    "past_participle_impersonal": "PtsPtIps",
}

DEGREE_SLOTS: dict[str, str] = {
    "comparative": "ComparSgN",
    "superlative": "SuperlSgN",
}

DECLENSION_SLOTS: dict[str, str] = {
    "singular_nominative": "SgN",
    "singular_genitive": "SgG",
    "singular_partitive": "SgP",
    "plural_nominative": "PlN",
    "plural_genitive": "PlG",
    "plural_partitive": "PlP",
}


def _pick(paradigm: Mapping[str, tuple[str, ...]], slots: Mapping[str, str]) -> dict[str, str]:
    """Collect the forms for ``slots`` that the paradigm actually lists."""
    forms: dict[str, str] = {}
    for slot, code in slots.items():
        values = [value for value in paradigm.get(code, ()) if value]
        if values:
            forms[slot] = VARIANT_SEPARATOR.join(values)
    return forms


def _base_form(word: str) -> dict[str, str]:
    return {"base_form": word}


# ── Strategies ───────────────────────────────────────────────


class NounStrategy:
    def accepts(self, evidence: WordEvidence) -> bool:
        return evidence.has(PartOfSpeech.NOUN)

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        return _pick(evidence.paradigm, NOUN_SLOTS)


class VerbStrategy:
    def accepts(self, evidence: WordEvidence) -> bool:
        return evidence.has(PartOfSpeech.VERB)

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        return _pick(evidence.paradigm, VERB_SLOTS)


class AdjectiveStrategy:
    """Adjectives decline like nouns and may also compare."""

    def accepts(self, evidence: WordEvidence) -> bool:
        return evidence.has(PartOfSpeech.ADJECTIVE)

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        return _pick(evidence.paradigm, {**NOUN_SLOTS, **DEGREE_SLOTS})


class AdverbStrategy:
    def accepts(self, evidence: WordEvidence) -> bool:
        return evidence.has(PartOfSpeech.ADVERB)

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        return {**_base_form(word), **_pick(evidence.paradigm, DEGREE_SLOTS)}


class PronounStrategy:
    def accepts(self, evidence: WordEvidence) -> bool:
        return evidence.has(PartOfSpeech.PRONOUN)

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        return _pick(evidence.paradigm, DECLENSION_SLOTS)


class NumberWordStrategy:
    def accepts(self, evidence: WordEvidence) -> bool:
        return evidence.has(PartOfSpeech.NUMERAL)

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        return _pick(evidence.paradigm, DECLENSION_SLOTS)


class ExclamationStrategy:
    def accepts(self, evidence: WordEvidence) -> bool:
        return evidence.has(PartOfSpeech.INTERJECTION)

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        return _base_form(word)


class ConjunctionStrategy:
    def accepts(self, evidence: WordEvidence) -> bool:
        return evidence.has(PartOfSpeech.CONJUNCTION)

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        return _base_form(word)


class PrePostPositionStrategy:
    def accepts(self, evidence: WordEvidence) -> bool:
        return evidence.has(PartOfSpeech.ADPOSITION)

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        return _base_form(word)


class ComplementStrategy:
    """Indeclinable attributive words (täiendsõna), e.g. "eri", "valmis"."""

    def accepts(self, evidence: WordEvidence) -> bool:
        return evidence.has(PartOfSpeech.COMPLEMENT)

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        return _base_form(word)


class DefaultStrategy:
    """Catch-all; must stay last in the chain."""

    def accepts(self, evidence: WordEvidence) -> bool:
        return True

    def derive_forms(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        return {}


class WordFormsFinder:
    """Resolves a word's forms with the first strategy that accepts it."""

    def __init__(self, strategies: list[WordFormStrategy]):
        self.strategies = list(strategies)

    def find(self, word: str, evidence: WordEvidence) -> dict[str, str]:
        for strategy in self.strategies:
            if strategy.accepts(evidence):
                return strategy.derive_forms(word, evidence)
        # Only reachable with a chain that has no DefaultStrategy
        return {}
