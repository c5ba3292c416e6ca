"""Loads cleaned chunks into a vector store and queries it."""

import logging
import math

from src.config import IndexingConfig
from src.indexing.interfaces import IEmbeddingProvider, IVectorStore, VectorRecord
from src.models.chunk import Chunk
from src.models.index_metrics import IndexMetrics
from src.models.query_result import QueryResponse

logger = logging.getLogger(__name__)


class IndexingError(RuntimeError):
    """Raised when a chunk or vector cannot be turned into a valid record."""


class VectorIndexer:
    """Embeds chunks and upserts them, keyed by chunk id, in batches.

    Failures raised by the embedding provider or the store propagate
    unchanged; nothing is retried here.

    Args:
        embedder: Embedding collaborator.
        store: Vector store collaborator.
        config: Batch size, vector dimension and query limits.
    """

    def __init__(
        self,
        embedder: IEmbeddingProvider,
        store: IVectorStore,
        config: IndexingConfig | None = None,
    ) -> None:
        self._embedder = embedder
        self._store = store
        self._config = config or IndexingConfig()

    def build_records(self, chunks: list[Chunk]) -> list[VectorRecord]:
        """Embed chunks into upsert records.

        Raises:
            IndexingError: If a chunk has no id or a vector has the wrong
                dimension.
        """
        records: list[VectorRecord] = []
        for chunk in chunks:
            if chunk.id is None:
                raise IndexingError("Chunk has no id; run clean_chunks first")
            values = self._embed(chunk.text)
            records.append(
                VectorRecord(id=str(chunk.id), values=values, metadata=chunk.to_metadata())
            )
        return records

    def reset(self, chunks: list[Chunk]) -> int:
        """Replace the store's contents with the given chunks.

        Args:
            chunks: Cleaned, numbered chunks.

        Returns:
            Number of chunks loaded.
        """
        logger.info("Clearing existing vectors")
        self._store.delete_all()

        batch_size = self._config.batch_size
        total_batches = math.ceil(len(chunks) / batch_size)
        for start in range(0, len(chunks), batch_size):
            batch = chunks[start : start + batch_size]
            self._store.upsert(self.build_records(batch))
            logger.info("Upserted batch %d/%d", start // batch_size + 1, total_batches)

        return len(chunks)

    def search(self, query: str, top_k: int | None = None) -> QueryResponse:
        """Run a similarity query.

        Args:
            query: Query text.
            top_k: Number of matches wanted; capped at ``max_top_k``.

        Raises:
            ValueError: If the query is empty.
        """
        if not query.strip():
            raise ValueError("Query is required")

        requested = top_k if top_k is not None else self._config.default_top_k
        limit = max(1, min(requested, self._config.max_top_k))

        matches = self._store.query(self._embed(query), limit)
        return QueryResponse(query=query, results=matches, total_results=len(matches))

    def metrics(self) -> IndexMetrics:
        """Summarize the store's statistics.

        The vector total is the sum over namespaces, raised to the
        backend's own ``totalVectorCount`` when that is larger. A missing
        dimension falls back to the configured one.
        """
        raw = self._store.describe_stats()
        namespaces = raw.get("namespaces") or {}

        total = sum(ns.get("vectorCount") or 0 for ns in namespaces.values())
        total = max(total, raw.get("totalVectorCount") or 0)

        metrics = IndexMetrics(
            total_vectors=total,
            dimension=raw.get("dimension") or self._config.dimension,
            index_fullness=raw.get("indexFullness") or 0.0,
            namespaces=namespaces,
        )
        logger.info("Index holds %d vectors", metrics.total_vectors)
        return metrics

    def _embed(self, text: str) -> list[float]:
        values = self._embedder.embed(text)
        if len(values) != self._config.dimension:
            raise IndexingError(
                f"Embedding has dimension {len(values)}, "
                f"expected {self._config.dimension}"
            )
        return values
