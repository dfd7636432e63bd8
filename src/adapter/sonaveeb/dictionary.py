"""Sõnaveeb adapter.

Implements ExternalDictionaryPort by scraping www.sonaveeb.ee: search for
the word, open the first homonym, parse its part of speech, meanings and
morphology paradigm, and resolve the principal word forms.
"""

import logging

import httpx

from adapter.sonaveeb.client import SonaVeebClient
from adapter.sonaveeb.parser import (
    parse_meanings,
    parse_paradigm,
    parse_part_of_speech,
    parse_word_ids,
)
from adapter.sonaveeb.word_forms import WordEvidence, WordFormsFinder
from domain.model.dictionary_entry import DictionaryEntry
from domain.model.errors import ProviderError
from domain.model.result import Failure, Outcome, Success

logger = logging.getLogger(__name__)


class DictionarySonaVeeb:
    """External dictionary backed by the live Sõnaveeb website."""

    def __init__(self, word_forms_finder: WordFormsFinder, client: SonaVeebClient):
        self.word_forms_finder = word_forms_finder
        self.client = client

    async def get_word(self, word: str) -> Outcome[DictionaryEntry]:
        try:
            return Success(await self._lookup(word))
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Sõnaveeb HTTP error",
                extra={"word": word, "statusCode": e.response.status_code},
            )
            return Failure(ProviderError("Sõnaveeb responded with an error", cause=e))
        except httpx.RequestError as e:
            logger.warning(
                "Sõnaveeb request error",
                extra={"word": word, "errorType": type(e).__name__},
            )
            return Failure(ProviderError("Sõnaveeb could not be reached", cause=e))
        except Exception as e:
            logger.error(
                "Unexpected error reading Sõnaveeb",
                extra={"word": word, "error": str(e)},
                exc_info=True,
            )
            return Failure(ProviderError("Sõnaveeb response could not be read", cause=e))

    async def _lookup(self, word: str) -> DictionaryEntry:
        search_html = await self.client.search(word)
        word_ids = parse_word_ids(search_html) if search_html else []
        if not word_ids:
            logger.debug("Word not found in Sõnaveeb", extra={"word": word})
            return DictionaryEntry(word=word)

        details_html = await self.client.word_details(word_ids[0])
        if not details_html:
            logger.debug(
                "Sõnaveeb word details missing",
                extra={"word": word, "wordId": word_ids[0]},
            )
            return DictionaryEntry(word=word)

        part_of_speech = parse_part_of_speech(details_html)
        evidence = WordEvidence(
            word=word,
            part_of_speech=part_of_speech,
            paradigm=parse_paradigm(details_html),
        )
        entry = DictionaryEntry(
            word=word,
            part_of_speech=part_of_speech,
            word_forms=self.word_forms_finder.find(word, evidence),
            meanings=parse_meanings(details_html),
        )
        logger.debug(
            "Sõnaveeb lookup successful",
            extra={
                "word": word,
                "wordId": word_ids[0],
                "homonymCount": len(word_ids),
                "partOfSpeech": [pos.value for pos in part_of_speech],
                "meaningCount": len(entry.meanings),
            },
        )
        return entry
