"""Filtering of degenerate chunks and final numbering."""

import re
from typing import Any

from src.ingestion.catalog import HEADER_PREFIXES
from src.models.chunk import Chunk

DEFAULT_MIN_CHUNK_CHARS = 10

SINGLE_BRACKETED_PATTERN = re.compile(r"^\s*\[[^\[\]]*\]\s*$")
NUMERALS_ONLY_PATTERN = re.compile(r"^[\s0-9IVXivx]+$")


def count_words(text: Any) -> int:
    """Count whitespace-delimited tokens that contain a letter or digit.

    Returns 0 for empty or non-string input.
    """
    if not isinstance(text, str) or not text:
        return 0
    return sum(1 for token in text.split() if any(ch.isalnum() for ch in token))


def is_degenerate(text: str, min_chars: int = DEFAULT_MIN_CHUNK_CHARS) -> bool:
    """Return True if a chunk with this text carries no retrievable content."""
    stripped = text.strip()
    if len(stripped) < min_chars:
        return True
    if SINGLE_BRACKETED_PATTERN.match(stripped):
        return True
    if stripped.startswith(HEADER_PREFIXES):
        return True
    if not any(ch.isalnum() for ch in stripped):
        return True
    return bool(NUMERALS_ONLY_PATTERN.match(stripped))


def clean_chunks(
    chunks: list[Chunk], min_chars: int = DEFAULT_MIN_CHUNK_CHARS
) -> list[Chunk]:
    """Drop degenerate chunks and number the survivors.

    Survivors keep their relative order and are returned as copies with
    ``id`` set to ``0..n-1`` and ``text_length``/``word_count`` filled in.

    Args:
        chunks: Raw chunks, in emission order.
        min_chars: Minimum trimmed text length to keep.

    Returns:
        The cleaned, numbered chunks.
    """
    survivors = [chunk for chunk in chunks if not is_degenerate(chunk.text, min_chars)]
    return [
        chunk.model_copy(
            update={
                "id": index,
                "text_length": len(chunk.text),
                "word_count": count_words(chunk.text),
            }
        )
        for index, chunk in enumerate(survivors)
    ]
