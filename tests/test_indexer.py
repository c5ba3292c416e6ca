"""Tests for the vector indexer."""

import pytest

from src.config import IndexingConfig
from src.indexing.indexer import IndexingError, VectorIndexer
from src.indexing.interfaces import IEmbeddingProvider, IVectorStore, VectorRecord
from src.models.chunk import Chunk
from src.models.query_result import QueryMatch

DIMENSION = 4


class FakeEmbedder(IEmbeddingProvider):
    def __init__(self, dimension: int = DIMENSION) -> None:
        self._dimension = dimension
        self.calls: list[str] = []

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        return [float(len(text))] * self._dimension


class FakeStore(IVectorStore):
    def __init__(self) -> None:
        self.events: list[str] = []
        self.batches: list[list[VectorRecord]] = []
        self.query_args: tuple[list[float], int] | None = None
        self.stats: dict = {}

    def upsert(self, records: list[VectorRecord]) -> None:
        self.events.append("upsert")
        self.batches.append(records)

    def delete_all(self) -> None:
        self.events.append("delete_all")

    def describe_stats(self) -> dict:
        return self.stats

    def query(self, vector: list[float], top_k: int) -> list[QueryMatch]:
        self.query_args = (vector, top_k)
        return [
            QueryMatch(
                id="0",
                score=0.91,
                work="THE TEMPEST",
                speaker="MIRANDA",
                text="O brave new world",
                text_length=16,
                word_count=4,
            )
        ]


def _chunks(count: int) -> list[Chunk]:
    return [
        Chunk(id=i, work="THE TEMPEST", speaker="ARIEL", text=f"Full fathom five {i}", text_length=18, word_count=4)
        for i in range(count)
    ]


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def indexer(store: FakeStore) -> VectorIndexer:
    return VectorIndexer(FakeEmbedder(), store, IndexingConfig(dimension=DIMENSION))


# ── Records ──────────────────────────────────────────────────────────────────


class TestBuildRecords:
    def test_record_shape(self, indexer: VectorIndexer) -> None:
        record = indexer.build_records(_chunks(1))[0]
        assert record.id == "0"
        assert len(record.values) == DIMENSION
        assert record.metadata == {
            "work": "THE TEMPEST",
            "speaker": "ARIEL",
            "text": "Full fathom five 0",
            "textLength": 18,
            "wordCount": 4,
        }

    def test_unnumbered_chunk_rejected(self, indexer: VectorIndexer) -> None:
        with pytest.raises(IndexingError, match="no id"):
            indexer.build_records([Chunk(text="Full fathom five")])

    def test_wrong_dimension_rejected(self, store: FakeStore) -> None:
        indexer = VectorIndexer(FakeEmbedder(dimension=3), store, IndexingConfig(dimension=DIMENSION))
        with pytest.raises(IndexingError, match="dimension 3"):
            indexer.build_records(_chunks(1))


# ── Reset ────────────────────────────────────────────────────────────────────


class TestReset:
    def test_clears_then_upserts_in_batches(self, indexer: VectorIndexer, store: FakeStore) -> None:
        loaded = indexer.reset(_chunks(250))
        assert loaded == 250
        assert store.events == ["delete_all", "upsert", "upsert", "upsert"]
        assert [len(batch) for batch in store.batches] == [100, 100, 50]
        assert store.batches[2][-1].id == "249"

    def test_custom_batch_size(self, store: FakeStore) -> None:
        config = IndexingConfig(dimension=DIMENSION, batch_size=2)
        VectorIndexer(FakeEmbedder(), store, config).reset(_chunks(5))
        assert [len(batch) for batch in store.batches] == [2, 2, 1]

    def test_empty_reset_only_clears(self, indexer: VectorIndexer, store: FakeStore) -> None:
        assert indexer.reset([]) == 0
        assert store.events == ["delete_all"]

    def test_logs_batches(
        self, indexer: VectorIndexer, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("INFO", logger="src.indexing.indexer"):
            indexer.reset(_chunks(150))
        assert "Upserted batch 2/2" in caplog.text

    def test_store_failure_propagates(self, indexer: VectorIndexer, store: FakeStore) -> None:
        def fail(records: list[VectorRecord]) -> None:
            raise ConnectionError("index unavailable")

        store.upsert = fail  # type: ignore[method-assign]
        with pytest.raises(ConnectionError):
            indexer.reset(_chunks(1))

    def test_clear_failure_stops_before_upsert(self, indexer: VectorIndexer, store: FakeStore) -> None:
        def fail() -> None:
            raise ConnectionError("404 namespace not found")

        store.delete_all = fail  # type: ignore[method-assign]
        with pytest.raises(ConnectionError, match="404"):
            indexer.reset(_chunks(1))
        assert store.batches == []


# ── Search ───────────────────────────────────────────────────────────────────


class TestSearch:
    def test_returns_response(self, indexer: VectorIndexer, store: FakeStore) -> None:
        response = indexer.search("brave new world", top_k=3)
        assert response.query == "brave new world"
        assert response.total_results == 1
        assert response.results[0].speaker == "MIRANDA"
        assert store.query_args is not None
        assert store.query_args[1] == 3

    def test_default_top_k(self, indexer: VectorIndexer, store: FakeStore) -> None:
        indexer.search("tempest")
        assert store.query_args is not None
        assert store.query_args[1] == 5

    def test_top_k_capped(self, indexer: VectorIndexer, store: FakeStore) -> None:
        indexer.search("tempest", top_k=500)
        assert store.query_args is not None
        assert store.query_args[1] == 100

    def test_empty_query_rejected(self, indexer: VectorIndexer) -> None:
        with pytest.raises(ValueError, match="Query is required"):
            indexer.search("   ")


# ── Metrics ──────────────────────────────────────────────────────────────────


class TestMetrics:
    def test_sums_namespace_counts(self, indexer: VectorIndexer, store: FakeStore) -> None:
        store.stats = {
            "dimension": 1024,
            "indexFullness": 0.25,
            "namespaces": {"": {"vectorCount": 30}, "tragedies": {"vectorCount": 12}},
        }
        metrics = indexer.metrics()
        assert metrics.total_vectors == 42
        assert metrics.dimension == 1024
        assert metrics.index_fullness == 0.25
        assert metrics.namespaces["tragedies"] == {"vectorCount": 12}

    def test_top_level_total_wins_when_larger(self, indexer: VectorIndexer, store: FakeStore) -> None:
        store.stats = {"totalVectorCount": 100, "namespaces": {"": {"vectorCount": 40}}}
        assert indexer.metrics().total_vectors == 100

    def test_namespace_sum_wins_when_larger(self, indexer: VectorIndexer, store: FakeStore) -> None:
        store.stats = {"totalVectorCount": 5, "namespaces": {"": {"vectorCount": 40}}}
        assert indexer.metrics().total_vectors == 40

    def test_empty_stats_fall_back_to_defaults(self, indexer: VectorIndexer) -> None:
        metrics = indexer.metrics()
        assert metrics.total_vectors == 0
        assert metrics.dimension == DIMENSION
        assert metrics.index_fullness == 0.0
        assert metrics.namespaces == {}

    def test_serializes_with_camel_case_keys(self, indexer: VectorIndexer, store: FakeStore) -> None:
        store.stats = {"totalVectorCount": 7}
        dumped = indexer.metrics().model_dump(by_alias=True)
        assert dumped["totalVectors"] == 7
        assert dumped["indexFullness"] == 0.0

    def test_store_failure_propagates(self, indexer: VectorIndexer, store: FakeStore) -> None:
        def fail() -> dict:
            raise ConnectionError("index unavailable")

        store.describe_stats = fail  # type: ignore[method-assign]
        with pytest.raises(ConnectionError):
            indexer.metrics()
