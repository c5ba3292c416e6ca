"""Single-line classification for anthology text."""

import re
from enum import Enum
from typing import NamedTuple, Protocol

from src.ingestion.catalog import (
    KNOWN_WORKS,
    NON_SPEAKER_MARKERS,
    NON_SPEAKER_SUBSTRINGS,
    STAGE_DIRECTION_PREFIXES,
)

SONNET_NUMBER_PATTERN = re.compile(r"^[0-9]+$")

# All-caps words with an optional trailing period, e.g. "HAMLET." or
# "FIRST CITIZEN".
SPEAKER_PATTERN = re.compile(r"^([A-Z][A-Z\s,'.-]+?)\.?\s*$")
NUMERIC_PATTERN = re.compile(r"^[0-9]+$")
ROMAN_NUMERAL_PATTERN = re.compile(r"^[IVX]+$")

STAGE_DIRECTION_PATTERN = re.compile(
    r"^(?:" + "|".join(STAGE_DIRECTION_PREFIXES) + r")"
)
BRACKETED_PATTERN = re.compile(r"^\[.*\]$")

MAX_SPEAKER_LENGTH = 50


class LineKind(str, Enum):
    """Structural role of a single line."""

    WORK_TITLE = "work_title"
    SONNET_NUMBER = "sonnet_number"
    SPEAKER_CUE = "speaker_cue"
    STAGE_DIRECTION = "stage_direction"
    BODY = "body"


class ClassifiedLine(NamedTuple):
    """A classified line.

    ``value`` carries the matched title, the sonnet number, or the speaker
    label; it is ``None`` for stage directions and body text.
    """

    kind: LineKind
    value: str | None = None


class TitleMatcher(Protocol):
    """Finds the catalog title a line announces, if any."""

    def match(self, line: str) -> str | None: ...


class SubstringTitleMatcher:
    """Matches a line equal to, or containing, a catalog title.

    Titles are tried in catalog order and the first hit wins. A line that
    quotes a title mid-sentence also matches.
    """

    def __init__(self, titles: tuple[str, ...] = KNOWN_WORKS) -> None:
        self._titles = titles

    def match(self, line: str) -> str | None:
        for title in self._titles:
            if line == title or title in line:
                return title
        return None


class ExactTitleMatcher:
    """Matches only lines that are exactly a catalog title."""

    def __init__(self, titles: tuple[str, ...] = KNOWN_WORKS) -> None:
        self._titles = frozenset(titles)

    def match(self, line: str) -> str | None:
        return line if line in self._titles else None


def is_sonnet_number(line: str) -> bool:
    """Return True if the trimmed line is a bare decimal integer."""
    return bool(SONNET_NUMBER_PATTERN.match(line.strip()))


def match_speaker(line: str) -> str | None:
    """Return the speaker label announced by a line, or None.

    Args:
        line: A single line of text.

    Returns:
        The label without its trailing period, or None if the line is not a
        speaker cue.
    """
    match = SPEAKER_PATTERN.match(line.strip())
    if not match:
        return None

    speaker = match.group(1).strip().removesuffix(".")
    if not 1 < len(speaker) < MAX_SPEAKER_LENGTH:
        return None
    if any(speaker.startswith(marker) for marker in NON_SPEAKER_MARKERS):
        return None
    if NUMERIC_PATTERN.match(speaker) or ROMAN_NUMERAL_PATTERN.match(speaker):
        return None
    if any(fragment in speaker for fragment in NON_SPEAKER_SUBSTRINGS):
        return None

    return speaker


def is_stage_direction(line: str) -> bool:
    """Return True for keyword-prefixed or fully bracketed stage directions."""
    stripped = line.strip()
    return bool(
        STAGE_DIRECTION_PATTERN.match(stripped) or BRACKETED_PATTERN.match(stripped)
    )


class LineClassifier:
    """Classifies lines in fixed priority order.

    Order: work title, sonnet number, speaker cue, stage direction, body.
    The result depends only on the line and the title matcher.

    Args:
        title_matcher: Strategy for recognizing work titles. Defaults to
            substring matching against the known-works catalog.
    """

    def __init__(self, title_matcher: TitleMatcher | None = None) -> None:
        self._title_matcher = title_matcher or SubstringTitleMatcher()

    def classify(self, line: str) -> ClassifiedLine:
        stripped = line.strip()

        title = self._title_matcher.match(stripped)
        if title is not None:
            return ClassifiedLine(LineKind.WORK_TITLE, title)

        if is_sonnet_number(stripped):
            return ClassifiedLine(LineKind.SONNET_NUMBER, stripped)

        speaker = match_speaker(stripped)
        if speaker is not None:
            return ClassifiedLine(LineKind.SPEAKER_CUE, speaker)

        if is_stage_direction(stripped):
            return ClassifiedLine(LineKind.STAGE_DIRECTION)

        return ClassifiedLine(LineKind.BODY)
