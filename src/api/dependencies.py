from functools import lru_cache

from fastapi import Depends

from adapter.factory import build_dictionary_cache, build_external_dictionary
from port.dictionary import ExternalDictionaryPort
from port.dictionary_cache import DictionaryCachePort
from services.dictionary_service import DictionaryService
from utils.settings import Settings


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache
def get_external_dictionary() -> ExternalDictionaryPort:
    settings = get_settings()
    return build_external_dictionary(
        settings.dictionary_backend,
        base_url=settings.sonaveeb_base_url,
        timeout=settings.sonaveeb_timeout,
    )


@lru_cache
def get_dictionary_cache() -> DictionaryCachePort:
    return build_dictionary_cache(get_settings().redis_url)


def get_dictionary_service(
    external_dictionary: ExternalDictionaryPort = Depends(get_external_dictionary),
    dictionary_cache: DictionaryCachePort = Depends(get_dictionary_cache),
) -> DictionaryService:
    return DictionaryService(external_dictionary, dictionary_cache)
