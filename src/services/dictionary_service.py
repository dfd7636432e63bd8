"""Dictionary lookup service: cache-aside orchestration of word lookups.

Pipeline: validate word → cache read → (miss) external dictionary →
cache write (found entries only) → WordResult.

Every failure below this service (cache, external dictionary, cached entry
decoding) leaves it as one of two errors: InvalidWordError for caller
mistakes, ApplicationError for everything else. A word the dictionary does
not know is a successful result carrying ``additional_info`` and
``status=400``.
"""

import logging
from dataclasses import replace

from domain.model.dictionary_entry import DictionaryEntry, WordResult
from domain.model.errors import (
    ApplicationError,
    CacheError,
    DomainError,
    EntryDecodeError,
    InvalidWordError,
)
from domain.model.result import Failure, Outcome, Success
from port.dictionary import ExternalDictionaryPort
from port.dictionary_cache import DictionaryCachePort

logger = logging.getLogger(__name__)

INVALID_WORD_MESSAGE = "The word must have a value"
APPLICATION_ERROR_MESSAGE = "An unexpected error occured"
NOT_FOUND_TEMPLATE = "www.sonaveeb.ee has no matching result for {word}"
NOT_FOUND_STATUS = 400


class DictionaryService:
    """Looks words up through the cache, falling back to the external dictionary.

    Holds no per-call state, so one instance can serve concurrent calls.
    Two concurrent misses for the same word both hit the dictionary and
    both write the cache; the writes carry equal content.
    """

    def __init__(
        self,
        external_dictionary: ExternalDictionaryPort,
        dictionary_cache: DictionaryCachePort,
    ):
        self.external_dictionary = external_dictionary
        self.dictionary_cache = dictionary_cache

    async def get_word(self, word: str | None) -> Outcome[WordResult]:
        """Look up ``word``.

        Returns:
            Success with a WordResult (also when the word is not found), or
            Failure with InvalidWordError / ApplicationError.
        """
        if not word:
            return Failure(InvalidWordError(INVALID_WORD_MESSAGE))

        outcome = await self._get_dictionary_entry(word)
        if isinstance(outcome, Failure):
            return Failure(self._application_error(word, outcome.error))

        entry = outcome.value
        result = WordResult.from_entry(entry)
        if not entry.exists:
            logger.info("Word not found", extra={"word": word})
            return Success(replace(
                result,
                additional_info=NOT_FOUND_TEMPLATE.format(word=word),
                status=NOT_FOUND_STATUS,
            ))

        return Success(result)

    # ------------------------------------------------------------------
    # Cache-aside lookup
    # ------------------------------------------------------------------

    async def _get_dictionary_entry(self, word: str) -> Outcome[DictionaryEntry]:
        try:
            cached = await self.dictionary_cache.get(word)
        except CacheError as e:
            return Failure(e)

        if cached:
            try:
                entry = DictionaryEntry.from_json(cached)
            except EntryDecodeError as e:
                return Failure(e)
            logger.debug("Dictionary cache hit", extra={"word": word})
            return Success(entry)

        outcome = await self.external_dictionary.get_word(word)
        if isinstance(outcome, Failure):
            return outcome

        entry = outcome.value
        if entry.exists:
            try:
                await self.dictionary_cache.set(word, entry.to_json())
            except CacheError as e:
                return Failure(e)
            logger.debug("Dictionary entry cached", extra={"word": word})

        return outcome

    # ------------------------------------------------------------------
    # Error helpers
    # ------------------------------------------------------------------

    def _application_error(self, word: str, cause: DomainError) -> ApplicationError:
        """Genericize a lower-level failure; the cause is logged, never returned as text."""
        logger.error(
            "Dictionary lookup failed",
            extra={
                "word": word,
                "errorType": type(cause).__name__,
                "error": cause.message,
            },
        )
        return ApplicationError(APPLICATION_ERROR_MESSAGE, cause=cause)
