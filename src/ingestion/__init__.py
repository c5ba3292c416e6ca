"""Corpus ingestion: reading, classification, segmentation and cleaning."""

from src.ingestion.classifier import LineClassifier, LineKind
from src.ingestion.cleaner import clean_chunks, count_words
from src.ingestion.pipeline import CorpusSegmenter, compute_stats, segment
from src.ingestion.reader import CorpusReader
from src.ingestion.segmenter import Segmenter, SegmenterState
from src.ingestion.splitter import split_chunk

__all__ = [
    "CorpusReader",
    "CorpusSegmenter",
    "LineClassifier",
    "LineKind",
    "Segmenter",
    "SegmenterState",
    "clean_chunks",
    "compute_stats",
    "count_words",
    "segment",
    "split_chunk",
]
