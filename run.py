"""Entry point: segment the anthology and write vectors.json."""

import logging
import sys

from src.config import load_config
from src.ingestion.pipeline import CorpusSegmenter
from src.ingestion.reader import CorpusReader
from src.models.stats import SegmentationResult
from src.storage.export import write_vectors

logger = logging.getLogger(__name__)

TOP_N = 10
SAMPLE_CHUNKS = 5
PREVIEW_CHARS = 100


def _log_top(title: str, counts: dict[str, int]) -> None:
    logger.info("Top %d %s by chunk count:", TOP_N, title)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    for name, count in ranked[:TOP_N]:
        logger.info("  %s: %d chunks", name, count)


def log_summary(result: SegmentationResult) -> None:
    """Log totals, the busiest works and speakers, and a few sample chunks."""
    stats = result.stats
    logger.info("Total chunks: %d", stats.total_chunks)
    logger.info("Total works: %d", stats.total_works)
    logger.info("Total speakers: %d", stats.total_speakers)
    if stats.total_chunks:
        logger.info("Average text length: %d characters", stats.avg_text_length)
        logger.info("Average word count: %d words", stats.avg_word_count)

    _log_top("works", stats.works)
    _log_top("speakers", stats.speakers)

    for chunk in result.chunks[:SAMPLE_CHUNKS]:
        preview = chunk.text[:PREVIEW_CHARS]
        if len(chunk.text) > PREVIEW_CHARS:
            preview += "..."
        logger.info(
            "Sample %d | %s | %s | %d chars, %d words | %r",
            chunk.id,
            chunk.work,
            chunk.speaker or "N/A",
            chunk.text_length,
            chunk.word_count,
            preview,
        )


def main(argv: list[str] | None = None) -> int:
    """Read the corpus, segment it and write the export file.

    Usage: ``python run.py [corpus_path] [output_path]``; missing arguments
    fall back to ``config.yaml``.
    """
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    args = sys.argv[1:] if argv is None else argv
    config = load_config()

    corpus_path = args[0] if len(args) > 0 else config.storage.corpus_path
    output_path = args[1] if len(args) > 1 else config.storage.output_path

    logger.info("Reading %s", corpus_path)
    text = CorpusReader().read(corpus_path)

    result = CorpusSegmenter(config=config.chunking).segment(text)
    write_vectors(result, output_path, source=str(corpus_path))
    log_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
