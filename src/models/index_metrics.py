"""Vector index metrics model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IndexMetrics(BaseModel):
    """Summary of a vector index's contents.

    ``namespaces`` is passed through from the store as reported, keyed by
    namespace name.
    """

    model_config = ConfigDict(populate_by_name=True)

    total_vectors: int = Field(default=0, alias="totalVectors")
    dimension: int = 1024
    index_fullness: float = Field(default=0.0, alias="indexFullness")
    namespaces: dict[str, Any] = Field(default_factory=dict)
