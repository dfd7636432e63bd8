"""Dictionary API routes.

Endpoints:
- GET /dictionary/{word}: Look a word up (cache first, then the configured dictionary)
- GET /dictionary?word=<word>: Same lookup with the word as a query parameter
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from api.dependencies import get_dictionary_service
from api.models import WordResponse
from domain.model.errors import InvalidWordError
from domain.model.result import Failure
from services.dictionary_service import DictionaryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dictionary", tags=["dictionary"])


@router.get("/{word}", response_model=WordResponse)
async def get_word(
    word: str,
    service: DictionaryService = Depends(get_dictionary_service),
):
    """Look up a word.

    Returns 200 for found words. A word the dictionary does not know still
    returns the (empty) entry, with ``additional_info`` and status 400.
    """
    return await _lookup(word, service)


@router.get("", response_model=WordResponse)
async def get_word_by_query(
    word: str = Query("", description="Word to look up, used exactly as given"),
    service: DictionaryService = Depends(get_dictionary_service),
):
    """Look up a word given as the ``word`` query parameter."""
    return await _lookup(word, service)


async def _lookup(word: str, service: DictionaryService) -> JSONResponse:
    outcome = await service.get_word(word)

    if isinstance(outcome, Failure):
        if isinstance(outcome.error, InvalidWordError):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.error.message)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=outcome.error.message,
        )

    result = outcome.value
    response = WordResponse.from_result(result)
    return JSONResponse(
        content=response.model_dump(),
        status_code=result.status or status.HTTP_200_OK,
    )
