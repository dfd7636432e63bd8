"""Pydantic models for API request/response."""

from typing import Optional

from pydantic import BaseModel, Field

from domain.model.dictionary_entry import WordResult


class MeaningResponse(BaseModel):
    """One meaning of a word."""
    definition: str
    examples: list[str] = Field(default_factory=list)


class WordResponse(BaseModel):
    """Response model for a dictionary lookup."""
    word: str
    part_of_speech: list[str] = Field(default_factory=list, description="Part-of-speech tags")
    word_forms: dict[str, str] = Field(default_factory=dict, description="Inflection slot -> form")
    meanings: list[MeaningResponse] = Field(default_factory=list)
    additional_info: Optional[str] = Field(None, description="Set when the word was not found")
    status: Optional[int] = Field(None, description="Suggested HTTP status when the word was not found")

    @classmethod
    def from_result(cls, result: WordResult) -> "WordResponse":
        return cls(
            word=result.word,
            part_of_speech=[pos.value for pos in result.part_of_speech],
            word_forms=dict(result.word_forms),
            meanings=[
                MeaningResponse(definition=m.definition, examples=list(m.examples))
                for m in result.meanings
            ],
            additional_info=result.additional_info,
            status=result.status,
        )


class HealthResponse(BaseModel):
    status: str
    dictionary: str
    cache: str
