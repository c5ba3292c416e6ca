"""Vector indexing of cleaned chunks."""

from src.indexing.indexer import IndexingError, VectorIndexer
from src.indexing.interfaces import IEmbeddingProvider, IVectorStore, VectorRecord

__all__ = [
    "IEmbeddingProvider",
    "IVectorStore",
    "IndexingError",
    "VectorIndexer",
    "VectorRecord",
]
