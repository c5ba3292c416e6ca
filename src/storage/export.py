"""JSON export of segmentation results for the indexing step."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from src.models.chunk import Chunk
from src.models.stats import SegmentationResult

logger = logging.getLogger(__name__)


def build_export(
    result: SegmentationResult,
    source: str,
    processed_at: datetime | None = None,
) -> dict[str, Any]:
    """Build the export document for a segmentation result.

    Args:
        result: The segmentation output.
        source: Path or name of the corpus the chunks came from.
        processed_at: Timestamp to record. Defaults to now (UTC).

    Returns:
        A JSON-serializable dict with ``metadata`` and ``chunks`` keys,
        using camelCase field names.
    """
    timestamp = processed_at or datetime.now(timezone.utc)
    return {
        "metadata": {
            "source": source,
            "processedAt": timestamp.isoformat(),
            "totalWorks": result.stats.total_works,
            "totalSpeakers": result.stats.total_speakers,
            "stats": result.stats.model_dump(by_alias=True),
        },
        "chunks": [chunk.model_dump(by_alias=True) for chunk in result.chunks],
    }


def write_vectors(result: SegmentationResult, output_path: str | Path, source: str) -> Path:
    """Write a segmentation result to a JSON file.

    Args:
        result: The segmentation output.
        output_path: Destination file; parent directories are created.
        source: Path or name of the corpus, recorded in the metadata.

    Returns:
        The path written.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    document = build_export(result, source)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2, ensure_ascii=False)

    logger.info("Wrote %d chunks to %s", len(result.chunks), path)
    return path


def load_chunks(input_path: str | Path) -> list[Chunk]:
    """Load the chunks of a previously written export file.

    Raises:
        FileNotFoundError: If input_path does not exist.
    """
    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, encoding="utf-8") as f:
        document = json.load(f)

    return [Chunk.model_validate(item) for item in document.get("chunks", [])]
