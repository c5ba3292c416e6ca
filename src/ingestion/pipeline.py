"""End-to-end segmentation: lines to cleaned chunks plus statistics."""

import logging
import math

from src.config import ChunkingConfig
from src.ingestion.classifier import LineClassifier
from src.ingestion.cleaner import clean_chunks
from src.ingestion.segmenter import Segmenter
from src.models.chunk import Chunk
from src.models.stats import SegmentationResult, SegmentationStats

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_stats(chunks: list[Chunk]) -> SegmentationStats:
    """Aggregate per-work and per-speaker counts and average sizes.

    Chunks without a speaker are not counted under ``speakers``. Both
    averages are ``None`` for an empty list.
    """
    works: dict[str, int] = {}
    speakers: dict[str, int] = {}
    total_length = 0
    total_words = 0

    for chunk in chunks:
        works[chunk.work] = works.get(chunk.work, 0) + 1
        if chunk.speaker:
            speakers[chunk.speaker] = speakers.get(chunk.speaker, 0) + 1
        total_length += chunk.text_length
        total_words += chunk.word_count

    if not chunks:
        return SegmentationStats(total_chunks=0, works=works, speakers=speakers)

    return SegmentationStats(
        total_chunks=len(chunks),
        works=works,
        speakers=speakers,
        avg_text_length=_round_half_up(total_length / len(chunks)),
        avg_word_count=_round_half_up(total_words / len(chunks)),
    )


class CorpusSegmenter:
    """Runs the segmenter and cleaner over a complete corpus text.

    Each call to :meth:`segment` starts from a fresh state, so one instance
    can serve many documents.

    Args:
        config: Chunk size limits. Defaults to ``ChunkingConfig()``.
        classifier: Optional line classifier override.
    """

    def __init__(
        self,
        config: ChunkingConfig | None = None,
        classifier: LineClassifier | None = None,
    ) -> None:
        self._config = config or ChunkingConfig()
        self._segmenter = Segmenter(
            classifier=classifier, max_chunk_chars=self._config.max_chunk_chars
        )

    def segment(self, text: str) -> SegmentationResult:
        """Segment a full corpus text.

        Args:
            text: The complete source text.

        Returns:
            Cleaned, numbered chunks and their statistics.
        """
        lines = (line.rstrip("\r") for line in text.split("\n"))
        raw_chunks = self._segmenter.run(lines)
        logger.info("Found %d raw chunks", len(raw_chunks))

        chunks = clean_chunks(raw_chunks, min_chars=self._config.min_chunk_chars)
        logger.info("%d chunks after cleaning", len(chunks))

        return SegmentationResult(chunks=chunks, stats=compute_stats(chunks))


def segment(text: str, config: ChunkingConfig | None = None) -> SegmentationResult:
    """Segment ``text`` with default or supplied chunking limits."""
    return CorpusSegmenter(config=config).segment(text)
