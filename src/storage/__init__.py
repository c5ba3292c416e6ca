"""Persistence of segmentation output."""

from src.storage.export import build_export, load_chunks, write_vectors

__all__ = ["build_export", "load_chunks", "write_vectors"]
