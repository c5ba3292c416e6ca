"""Tests for sentence-aware chunk splitting."""

from src.ingestion.splitter import split_chunk, split_sentences
from src.models.chunk import Chunk

SENTENCE = "This is sentence number {:02d} of the speech."


def _speech(count: int) -> str:
    return " ".join(SENTENCE.format(i) for i in range(count))


def _chunk(text: str, speaker: str | None = "HAMLET") -> Chunk:
    return Chunk(work="THE TRAGEDY OF HAMLET, PRINCE OF DENMARK", speaker=speaker, text=text)


class TestSplitSentences:
    def test_splits_after_terminal_punctuation(self) -> None:
        assert split_sentences("Stay! Speak, speak. I charge thee, speak? Yes.") == [
            "Stay!",
            "Speak, speak.",
            "I charge thee, speak?",
            "Yes.",
        ]

    def test_newline_counts_as_boundary_whitespace(self) -> None:
        assert split_sentences("Go.\nCome back.") == ["Go.", "Come back."]

    def test_no_boundary_inside_sentence(self) -> None:
        assert split_sentences("Mr.Smith went home") == ["Mr.Smith went home"]


class TestSplitChunk:
    def test_short_chunk_unchanged(self) -> None:
        chunk = _chunk("Good night, sweet prince.")
        assert split_chunk(chunk) == [chunk]

    def test_exactly_max_size_unchanged(self) -> None:
        chunk = _chunk("x" * 800)
        assert split_chunk(chunk) == [chunk]

    def test_long_chunk_split_into_parts(self) -> None:
        # 30 sentences of 41 characters each: 19 fit in 800 characters.
        chunk = _chunk(_speech(30))
        parts = split_chunk(chunk)
        assert len(parts) == 2
        assert len(parts[0].text) == 797
        assert all(len(part.text) <= 800 for part in parts)

    def test_part_labels(self) -> None:
        parts = split_chunk(_chunk(_speech(60)))
        assert parts[0].speaker == "HAMLET"
        assert [p.speaker for p in parts[1:]] == [
            f"HAMLET (Part {n})" for n in range(2, len(parts) + 1)
        ]

    def test_parts_inherit_work(self) -> None:
        parts = split_chunk(_chunk(_speech(60)))
        assert {p.work for p in parts} == {"THE TRAGEDY OF HAMLET, PRINCE OF DENMARK"}

    def test_no_speaker_stays_none(self) -> None:
        parts = split_chunk(_chunk(_speech(30), speaker=None))
        assert len(parts) > 1
        assert all(p.speaker is None for p in parts)

    def test_sentences_reconstruct_original(self) -> None:
        chunk = _chunk(_speech(45))
        parts = split_chunk(chunk)
        rebuilt = [s for part in parts for s in split_sentences(part.text)]
        assert rebuilt == split_sentences(chunk.text)

    def test_custom_max_size(self) -> None:
        parts = split_chunk(_chunk(_speech(10)), max_size=100)
        assert len(parts) == 5
        assert all(len(p.text) <= 100 for p in parts)

    def test_oversized_sentence_kept_whole(self) -> None:
        # Known oversize exception: a sentence is never cut.
        long_sentence = "A" * 900 + "."
        parts = split_chunk(_chunk(long_sentence + " Short one."))
        assert [p.text for p in parts] == [long_sentence, "Short one."]
        assert len(parts[0].text) > 800

    def test_text_without_boundaries_returned_whole(self) -> None:
        text = "word " * 300
        parts = split_chunk(_chunk(text.strip()))
        assert len(parts) == 1
        assert parts[0].speaker == "HAMLET"
