"""Unit tests for in-memory dictionary adapters: verifies Port contract compliance."""

import unittest

from adapter.fake.dictionary import InMemoryDictionary
from adapter.fake.dictionary_cache import InMemoryDictionaryCache
from domain.model.dictionary_entry import DictionaryEntry, Meaning, PartOfSpeech
from domain.model.result import Success


class TestInMemoryDictionary(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.entry = DictionaryEntry(
            word="maja",
            part_of_speech=(PartOfSpeech.NOUN,),
            meanings=(Meaning(definition="hoone"),),
        )
        self.dictionary = InMemoryDictionary({"maja": self.entry})

    async def test_known_word_returns_canned_entry(self):
        outcome = await self.dictionary.get_word("maja")

        self.assertIsInstance(outcome, Success)
        self.assertEqual(outcome.value, self.entry)

    async def test_unknown_word_returns_empty_entry(self):
        outcome = await self.dictionary.get_word("zzzzz")

        self.assertIsInstance(outcome, Success)
        self.assertEqual(outcome.value, DictionaryEntry(word="zzzzz"))
        self.assertFalse(outcome.value.exists)

    async def test_lookups_are_recorded(self):
        await self.dictionary.get_word("maja")
        await self.dictionary.get_word("Maja")

        self.assertEqual(self.dictionary.calls, ["maja", "Maja"])


class TestInMemoryDictionaryCache(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.cache = InMemoryDictionaryCache()

    async def test_get_missing_returns_none(self):
        self.assertIsNone(await self.cache.get("maja"))

    async def test_set_then_get(self):
        await self.cache.set("maja", '{"word": "maja"}')

        self.assertEqual(await self.cache.get("maja"), '{"word": "maja"}')
        self.assertEqual(self.cache.set_calls, [("maja", '{"word": "maja"}')])

    async def test_last_write_wins(self):
        await self.cache.set("maja", "first")
        await self.cache.set("maja", "second")

        self.assertEqual(await self.cache.get("maja"), "second")

    async def test_ping(self):
        self.assertTrue(await self.cache.ping())


if __name__ == '__main__':
    unittest.main()
