"""Data models for the Folio segmenter."""

from src.models.chunk import UNKNOWN_WORK, Chunk
from src.models.index_metrics import IndexMetrics
from src.models.query_result import QueryMatch, QueryResponse
from src.models.stats import SegmentationResult, SegmentationStats

__all__ = [
    "Chunk",
    "IndexMetrics",
    "QueryMatch",
    "QueryResponse",
    "SegmentationResult",
    "SegmentationStats",
    "UNKNOWN_WORK",
]
