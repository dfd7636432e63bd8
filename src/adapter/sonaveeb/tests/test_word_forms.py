"""Tests for WordFormsFinder and the per-category word form strategies."""

import unittest

from adapter.factory import build_external_dictionary
from adapter.sonaveeb.word_forms import (
    AdjectiveStrategy,
    AdverbStrategy,
    ComplementStrategy,
    ConjunctionStrategy,
    DefaultStrategy,
    ExclamationStrategy,
    NounStrategy,
    NumberWordStrategy,
    PrePostPositionStrategy,
    PronounStrategy,
    VerbStrategy,
    WordEvidence,
    WordFormsFinder,
)
from domain.model.dictionary_entry import PartOfSpeech

KASS_PARADIGM = {
    "SgN": ("kass",),
    "SgG": ("kassi",),
    "SgP": ("kassi",),
    "PlN": ("kassid",),
    "PlP": ("kasse", "kassisid"),
}

TEGEMA_PARADIGM = {
    "Sup": ("tegema",),
    "Inf": ("teha",),
    "IndPrSg3": ("teeb",),
    "PtsPtIps": ("tehtud",),
    "IndPrSg1": ("teen",),
}


def _evidence(word, *tags, paradigm=None):
    return WordEvidence(word=word, part_of_speech=tags, paradigm=paradigm or {})


class TestStrategies(unittest.TestCase):
    """Each strategy accepts only its own category and picks its principal parts."""

    def test_noun_principal_parts(self):
        evidence = _evidence("kass", PartOfSpeech.NOUN, paradigm=KASS_PARADIGM)

        self.assertTrue(NounStrategy().accepts(evidence))
        self.assertEqual(NounStrategy().derive_forms("kass", evidence), {
            "singular_nominative": "kass",
            "singular_genitive": "kassi",
            "singular_partitive": "kassi",
            "plural_partitive": "kasse, kassisid",
        })

    def test_noun_rejects_other_categories(self):
        self.assertFalse(NounStrategy().accepts(_evidence("tegema", PartOfSpeech.VERB)))

    def test_verb_principal_parts(self):
        evidence = _evidence("tegema", PartOfSpeech.VERB, paradigm=TEGEMA_PARADIGM)

        self.assertTrue(VerbStrategy().accepts(evidence))
        self.assertEqual(VerbStrategy().derive_forms("tegema", evidence), {
            "ma_infinitive": "tegema",
            "da_infinitive": "teha",
            "present_third_person": "teeb",
            "past_participle_impersonal": "tehtud",
        })

    def test_missing_codes_are_skipped(self):
        evidence = _evidence("tegema", PartOfSpeech.VERB, paradigm={"Sup": ("tegema",)})

        self.assertEqual(VerbStrategy().derive_forms("tegema", evidence), {"ma_infinitive": "tegema"})

    def test_adjective_includes_degrees(self):
        paradigm = {
            "SgN": ("ilus",), "SgG": ("ilusa",), "SgP": ("ilusat",), "PlP": ("ilusaid",),
            "ComparSgN": ("ilusam",), "SuperlSgN": ("ilusaim",),
        }
        evidence = _evidence("ilus", PartOfSpeech.ADJECTIVE, paradigm=paradigm)

        forms = AdjectiveStrategy().derive_forms("ilus", evidence)

        self.assertEqual(forms["singular_genitive"], "ilusa")
        self.assertEqual(forms["comparative"], "ilusam")
        self.assertEqual(forms["superlative"], "ilusaim")

    def test_adverb_base_form_with_optional_comparative(self):
        evidence = _evidence("kiiresti", PartOfSpeech.ADVERB, paradigm={"ComparSgN": ("kiiremini",)})

        self.assertEqual(AdverbStrategy().derive_forms("kiiresti", evidence), {
            "base_form": "kiiresti",
            "comparative": "kiiremini",
        })

    def test_pronoun_and_number_word_decline_in_both_numbers(self):
        paradigm = {"SgN": ("mina",), "SgG": ("minu",), "PlN": ("meie",), "PlG": ("meie",)}

        pronoun = PronounStrategy().derive_forms("mina", _evidence("mina", PartOfSpeech.PRONOUN, paradigm=paradigm))
        number = NumberWordStrategy().derive_forms("mina", _evidence("mina", PartOfSpeech.NUMERAL, paradigm=paradigm))

        self.assertEqual(pronoun, {
            "singular_nominative": "mina",
            "singular_genitive": "minu",
            "plural_nominative": "meie",
            "plural_genitive": "meie",
        })
        self.assertEqual(number, pronoun)

    def test_indeclinable_categories_return_base_form(self):
        cases = [
            (ExclamationStrategy(), PartOfSpeech.INTERJECTION, "aitäh"),
            (ConjunctionStrategy(), PartOfSpeech.CONJUNCTION, "ja"),
            (PrePostPositionStrategy(), PartOfSpeech.ADPOSITION, "kaudu"),
            (ComplementStrategy(), PartOfSpeech.COMPLEMENT, "valmis"),
        ]
        for strategy, tag, word in cases:
            with self.subTest(tag=tag):
                evidence = _evidence(word, tag)
                self.assertTrue(strategy.accepts(evidence))
                self.assertEqual(strategy.derive_forms(word, evidence), {"base_form": word})

    def test_default_accepts_anything_and_returns_empty(self):
        evidence = _evidence("zzzzz")

        self.assertTrue(DefaultStrategy().accepts(evidence))
        self.assertEqual(DefaultStrategy().derive_forms("zzzzz", evidence), {})


class TestWordFormsFinder(unittest.TestCase):

    def setUp(self):
        self.finder = build_external_dictionary("sonaveeb").word_forms_finder

    def test_chain_order(self):
        self.assertEqual(
            [type(s) for s in self.finder.strategies],
            [
                NounStrategy, VerbStrategy, AdjectiveStrategy, AdverbStrategy,
                PronounStrategy, NumberWordStrategy, ExclamationStrategy,
                ConjunctionStrategy, PrePostPositionStrategy, ComplementStrategy,
                DefaultStrategy,
            ],
        )

    def test_resolves_with_matching_strategy(self):
        evidence = _evidence("tegema", PartOfSpeech.VERB, paradigm=TEGEMA_PARADIGM)

        self.assertEqual(self.finder.find("tegema", evidence)["da_infinitive"], "teha")

    def test_first_accepting_strategy_wins_without_merging(self):
        """A noun/verb homograph gets noun forms only."""
        paradigm = {**KASS_PARADIGM, **TEGEMA_PARADIGM}
        evidence = _evidence("kass", PartOfSpeech.VERB, PartOfSpeech.NOUN, paradigm=paradigm)

        forms = self.finder.find("kass", evidence)

        self.assertEqual(forms, NounStrategy().derive_forms("kass", evidence))
        self.assertNotIn("ma_infinitive", forms)

    def test_precedence_follows_list_order_not_evidence_order(self):
        verb_first = WordFormsFinder([VerbStrategy(), NounStrategy(), DefaultStrategy()])
        paradigm = {**KASS_PARADIGM, **TEGEMA_PARADIGM}
        evidence = _evidence("kass", PartOfSpeech.NOUN, PartOfSpeech.VERB, paradigm=paradigm)

        forms = verb_first.find("kass", evidence)

        self.assertEqual(forms, VerbStrategy().derive_forms("kass", evidence))

    def test_unrecognized_word_falls_through_to_default(self):
        self.assertEqual(self.finder.find("zzzzz", _evidence("zzzzz")), {})

    def test_chain_without_default_still_returns_mapping(self):
        finder = WordFormsFinder([NounStrategy()])

        self.assertEqual(finder.find("ja", _evidence("ja", PartOfSpeech.CONJUNCTION)), {})


if __name__ == '__main__':
    unittest.main()
