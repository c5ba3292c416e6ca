"""Contracts for the embedding and vector-store collaborators.

Concrete implementations live outside this package; the indexer only
depends on these two interfaces.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from src.models.query_result import QueryMatch


class VectorRecord(BaseModel):
    """One vector to upsert, keyed by the chunk id."""

    id: str
    values: list[float]
    metadata: dict[str, str | int | None] = Field(default_factory=dict)


class IEmbeddingProvider(ABC):
    """Turns text into fixed-dimension vectors."""

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Length of every vector returned by :meth:`embed`."""

    @abstractmethod
    def embed(self, text: str) -> list[float]:
        """Embed a single text."""


class IVectorStore(ABC):
    """Stores vectors with metadata and answers similarity queries."""

    @abstractmethod
    def upsert(self, records: list[VectorRecord]) -> None:
        """Insert or replace records by id."""

    @abstractmethod
    def delete_all(self) -> None:
        """Remove every record from the store.

        Must succeed on an already empty store.
        """

    @abstractmethod
    def describe_stats(self) -> dict[str, Any]:
        """Return the backend's raw index statistics.

        Recognized keys are ``totalVectorCount``, ``dimension``,
        ``indexFullness`` and ``namespaces`` (name to a dict holding
        ``vectorCount``). Any of them may be missing.
        """

    @abstractmethod
    def query(self, vector: list[float], top_k: int) -> list[QueryMatch]:
        """Return up to ``top_k`` matches ranked by similarity."""
