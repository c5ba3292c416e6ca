"""Segmentation result and statistics models."""

from pydantic import BaseModel, ConfigDict, Field

from src.models.chunk import Chunk


class SegmentationStats(BaseModel):
    """Aggregate counts over a list of cleaned chunks.

    Averages are ``None`` when there are no chunks.
    """

    model_config = ConfigDict(populate_by_name=True)

    total_chunks: int = Field(default=0, alias="totalChunks")
    works: dict[str, int] = Field(default_factory=dict)
    speakers: dict[str, int] = Field(default_factory=dict)
    avg_text_length: int | None = Field(default=None, alias="avgTextLength")
    avg_word_count: int | None = Field(default=None, alias="avgWordCount")

    @property
    def total_works(self) -> int:
        return len(self.works)

    @property
    def total_speakers(self) -> int:
        return len(self.speakers)


class SegmentationResult(BaseModel):
    """Output of one segmentation run."""

    chunks: list[Chunk] = Field(default_factory=list)
    stats: SegmentationStats = Field(default_factory=SegmentationStats)
