"""Configuration loader for the Folio segmenter."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Environment variables that override storage paths, by field name.
STORAGE_ENV_OVERRIDES: dict[str, str] = {
    "corpus_path": "FOLIO_CORPUS_PATH",
    "output_path": "FOLIO_OUTPUT_PATH",
}


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Folio Segmenter"
    version: str = "1.0.0"
    language: str = "en"


class ChunkingConfig(BaseModel):
    """Chunk size limits for segmentation."""

    max_chunk_chars: int = 800
    min_chunk_chars: int = 10


class IndexingConfig(BaseModel):
    """Vector loading and query limits."""

    dimension: int = 1024
    batch_size: int = 100
    default_top_k: int = 5
    max_top_k: int = 100


class StorageConfig(BaseModel):
    """Corpus input and chunk export paths."""

    corpus_path: str = "./data/shakespeare-complete-works.txt"
    output_path: str = "./vectors.json"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    chunking: ChunkingConfig = Field(default_factory=ChunkingConfig)
    indexing: IndexingConfig = Field(default_factory=IndexingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Build the configuration from YAML, then apply path overrides.

    A ``.env`` file is loaded first, so ``FOLIO_CORPUS_PATH`` and
    ``FOLIO_OUTPUT_PATH`` may come from either the process environment or
    that file. A missing or empty YAML file yields the defaults.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    settings: dict = {}
    config_file = Path(config_path)
    if config_file.is_file():
        settings = yaml.safe_load(config_file.read_text(encoding="utf-8")) or {}

    config = AppConfig.model_validate(settings)

    for field_name, env_var in STORAGE_ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            setattr(config.storage, field_name, value)

    return config
