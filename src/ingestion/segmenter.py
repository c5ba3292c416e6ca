"""Line-by-line segmentation of anthology text into raw chunks."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from src.ingestion.catalog import SONNETS_TITLE
from src.ingestion.classifier import ClassifiedLine, LineClassifier, LineKind
from src.ingestion.splitter import DEFAULT_MAX_CHUNK_CHARS, split_chunk
from src.models.chunk import UNKNOWN_WORK, Chunk


class SegmenterState(BaseModel):
    """Immutable snapshot of the segmenter between two lines.

    ``current_work`` is the nearest preceding title; ``chunk_text`` and
    ``sonnet_text`` accumulate the dialogue chunk and sonnet in progress.
    """

    model_config = ConfigDict(frozen=True)

    current_work: str = UNKNOWN_WORK
    current_speaker: str | None = None
    chunk_text: str = ""
    sonnet_number: str | None = None
    sonnet_text: str = ""

    @property
    def in_sonnets(self) -> bool:
        return self.current_work == SONNETS_TITLE


class Segmenter:
    """Folds classified lines into raw (unnumbered) chunks.

    Inside a play, body lines are collected under the most recent speaker
    cue. Inside THE SONNETS, lines are collected under the most recent
    sonnet number and labelled ``"SONNET <n>"``. Every flushed chunk goes
    through :func:`split_chunk` before it is emitted.

    Body text seen before the first speaker cue of a work is dropped.

    Args:
        classifier: Line classifier to use. Defaults to the catalog-backed
            substring matcher.
        max_chunk_chars: Size bound handed to the splitter.
    """

    def __init__(
        self,
        classifier: LineClassifier | None = None,
        max_chunk_chars: int = DEFAULT_MAX_CHUNK_CHARS,
    ) -> None:
        self._classifier = classifier or LineClassifier()
        self._max_chunk_chars = max_chunk_chars

    def run(self, lines: Iterable[str]) -> list[Chunk]:
        """Segment a sequence of lines.

        Args:
            lines: Source lines without line terminators.

        Returns:
            Raw chunks in emission order, already split to size.
        """
        state = SegmenterState()
        chunks: list[Chunk] = []
        for line in lines:
            state, emitted = self.step(state, line)
            chunks.extend(emitted)
        chunks.extend(self.finish(state))
        return chunks

    def step(
        self, state: SegmenterState, line: str
    ) -> tuple[SegmenterState, list[Chunk]]:
        """Consume one line and return the next state plus any emitted chunks."""
        classified = self._classifier.classify(line)

        if classified.kind is LineKind.WORK_TITLE:
            emitted = self._flush_dialogue(state) + self._flush_sonnet(state)
            return self.enter_work(str(classified.value)), emitted

        if state.in_sonnets:
            return self._step_sonnet(state, line, classified)
        return self._step_dialogue(state, line, classified)

    def finish(self, state: SegmenterState) -> list[Chunk]:
        """Flush whatever is still in progress at end of input."""
        return self._flush_dialogue(state) + self._flush_sonnet(state)

    @staticmethod
    def enter_work(title: str) -> SegmenterState:
        """Start a new work with speaker and sonnet state cleared."""
        return SegmenterState(current_work=title)

    def _step_sonnet(
        self, state: SegmenterState, line: str, classified: ClassifiedLine
    ) -> tuple[SegmenterState, list[Chunk]]:
        if classified.kind is LineKind.SONNET_NUMBER:
            emitted = self._flush_sonnet(state)
            return (
                state.model_copy(
                    update={"sonnet_number": classified.value, "sonnet_text": ""}
                ),
                emitted,
            )

        if state.sonnet_number is not None and line.strip():
            return (
                state.model_copy(update={"sonnet_text": state.sonnet_text + line + "\n"}),
                [],
            )
        return state, []

    def _step_dialogue(
        self, state: SegmenterState, line: str, classified: ClassifiedLine
    ) -> tuple[SegmenterState, list[Chunk]]:
        if classified.kind is LineKind.SPEAKER_CUE:
            emitted = self._flush_dialogue(state)
            return (
                state.model_copy(
                    update={"current_speaker": classified.value, "chunk_text": ""}
                ),
                emitted,
            )

        if classified.kind is LineKind.STAGE_DIRECTION:
            return state, []

        # A bare number inside a play is ordinary body text.
        if state.current_speaker is not None and line.strip():
            return (
                state.model_copy(update={"chunk_text": state.chunk_text + line + "\n"}),
                [],
            )
        return state, []

    def _flush_dialogue(self, state: SegmenterState) -> list[Chunk]:
        return self._emit(state.current_work, state.current_speaker, state.chunk_text)

    def _flush_sonnet(self, state: SegmenterState) -> list[Chunk]:
        if not state.in_sonnets:
            return []
        return self._emit(
            state.current_work, f"SONNET {state.sonnet_number}", state.sonnet_text
        )

    def _emit(self, work: str, speaker: str | None, text: str) -> list[Chunk]:
        trimmed = text.strip()
        if not trimmed:
            return []
        chunk = Chunk(work=work, speaker=speaker, text=trimmed)
        return split_chunk(chunk, max_size=self._max_chunk_chars)
