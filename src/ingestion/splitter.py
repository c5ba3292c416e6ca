"""Sentence-aware splitting of oversized chunks."""

import logging
import re

from src.models.chunk import Chunk

logger = logging.getLogger(__name__)

DEFAULT_MAX_CHUNK_CHARS = 800

# Whitespace that immediately follows sentence-ending punctuation.
SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def split_sentences(text: str) -> list[str]:
    """Split text into sentences at whitespace following ``.``, ``!`` or ``?``."""
    return [sentence for sentence in SENTENCE_BOUNDARY.split(text) if sentence]


def split_chunk(chunk: Chunk, max_size: int = DEFAULT_MAX_CHUNK_CHARS) -> list[Chunk]:
    """Split a chunk whose text exceeds ``max_size`` characters.

    Sentences are packed greedily, joined by a single space, and a part is
    sealed once the next sentence would push it past ``max_size``. Every
    part keeps the source chunk's work; parts after the first get a
    ``" (Part N)"`` speaker suffix starting at 2.

    A single sentence longer than ``max_size`` is never cut. It becomes its
    own part and stays oversized.

    Args:
        chunk: The chunk to split.
        max_size: Maximum part length in characters.

    Returns:
        ``[chunk]`` if it already fits, otherwise the list of parts.
    """
    if len(chunk.text) <= max_size:
        return [chunk]

    parts: list[str] = []
    current = ""
    for sentence in split_sentences(chunk.text):
        candidate = f"{current} {sentence}" if current else sentence
        if len(candidate) > max_size and current:
            parts.append(current)
            current = sentence
        else:
            current = candidate
    if current:
        parts.append(current)

    result: list[Chunk] = []
    for index, text in enumerate(parts):
        if len(text) > max_size:
            logger.debug(
                "Oversized sentence kept whole (%d chars) in %s", len(text), chunk.work
            )
        speaker = chunk.speaker
        if speaker and index > 0:
            speaker = f"{speaker} (Part {index + 1})"
        result.append(chunk.model_copy(update={"text": text, "speaker": speaker}))

    return result
