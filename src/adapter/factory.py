"""Backend assembly: builds the configured dictionary and cache adapters."""

import logging

from adapter.cache.redis_dictionary_cache import RedisDictionaryCache
from adapter.fake.dictionary import InMemoryDictionary
from adapter.fake.dictionary_cache import InMemoryDictionaryCache
from adapter.sonaveeb.client import SonaVeebClient
from adapter.sonaveeb.dictionary import DictionarySonaVeeb
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
    WordFormsFinder,
)
from port.dictionary import ExternalDictionaryPort
from port.dictionary_cache import DictionaryCachePort
from utils.settings import API_TIMEOUT_SECONDS, SONAVEEB_BACKEND, SONAVEEB_BASE_URL

logger = logging.getLogger(__name__)


def build_external_dictionary(
    backend: str | None,
    base_url: str = SONAVEEB_BASE_URL,
    timeout: float = API_TIMEOUT_SECONDS,
) -> ExternalDictionaryPort:
    """Select the external dictionary by name.

    ``"sonaveeb"`` gives the live scraper; any other value, or None, gives
    the in-memory dictionary.
    """
    if backend == SONAVEEB_BACKEND:
        word_forms_finder = WordFormsFinder([
            NounStrategy(),
            VerbStrategy(),
            AdjectiveStrategy(),
            AdverbStrategy(),
            PronounStrategy(),
            NumberWordStrategy(),
            ExclamationStrategy(),
            ConjunctionStrategy(),
            PrePostPositionStrategy(),
            ComplementStrategy(),
            DefaultStrategy(),
        ])
        client = SonaVeebClient(base_url=base_url, timeout=timeout)
        logger.info("Using Sõnaveeb dictionary", extra={"baseUrl": base_url})
        return DictionarySonaVeeb(word_forms_finder, client)

    logger.info("Using in-memory dictionary", extra={"backend": backend})
    return InMemoryDictionary()


def build_dictionary_cache(redis_url: str | None) -> DictionaryCachePort:
    """Redis cache when a URL is configured, otherwise an in-memory cache."""
    if redis_url:
        return RedisDictionaryCache(redis_url)
    logger.warning("REDIS_URL not configured, using in-memory dictionary cache")
    return InMemoryDictionaryCache()
