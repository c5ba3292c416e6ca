"""Chunk data model."""

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_WORK = "UNKNOWN"


class Chunk(BaseModel):
    """A retrieval-ready passage with work and speaker provenance.

    ``id``, ``text_length`` and ``word_count`` are only meaningful after the
    cleaner has numbered the surviving chunks.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    work: str = UNKNOWN_WORK
    speaker: str | None = None  # "HAMLET", "SONNET 18", "HAMLET (Part 2)", None
    text: str
    text_length: int = Field(default=0, alias="textLength")
    word_count: int = Field(default=0, alias="wordCount")

    def to_metadata(self) -> dict[str, str | int | None]:
        """Return the metadata payload stored alongside the chunk's vector."""
        return {
            "work": self.work,
            "speaker": self.speaker,
            "text": self.text,
            "textLength": self.text_length,
            "wordCount": self.word_count,
        }
