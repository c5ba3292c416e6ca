"""Query result data models."""

from pydantic import BaseModel, ConfigDict, Field


class QueryMatch(BaseModel):
    """A single ranked match returned by the vector store."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    score: float
    work: str
    speaker: str | None = None
    text: str
    text_length: int = Field(default=0, alias="textLength")
    word_count: int = Field(default=0, alias="wordCount")


class QueryResponse(BaseModel):
    """A complete query response: the query text and its ranked matches."""

    model_config = ConfigDict(populate_by_name=True)

    query: str
    results: list[QueryMatch] = Field(default_factory=list)
    total_results: int = Field(default=0, alias="totalResults")
