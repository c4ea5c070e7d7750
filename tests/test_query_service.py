# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: test_query_service.py
# -----------------------------------------------------------------------------
import numpy as np
import pytest

from conftest import random_records
from embedding.EmbeddingRecord import QueryResult
from embedding.EmbeddingStore import EmbeddingStore
from services.W2VQueryService import W2VQueryService, resolve_count
from utility.exceptions import DimensionMismatch, InvalidVectorError, NotFoundError
from vectorstore.IndexFactory import build_index


class RecordingIndex:
    """Minimal AnnIndex stand-in that records the k it was asked for."""

    def __init__(self):
        self.calls = []

    def build(self, vectors):
        pass

    def insert(self, item_id, vector):
        pass

    def nearest(self, query, k):
        self.calls.append(k)
        return [(0.0, 0)]

    def stats(self):
        return {"backend": "recording"}


@pytest.fixture
def service(fruit_store, fruit_index) -> W2VQueryService:
    return W2VQueryService(store=fruit_store, index=fruit_index)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 128),
        ("", 128),
        ("abc", 128),
        ("2.5", 128),
        ("10", 10),
        (10, 10),
        (" 7 ", 7),
        ("512", 512),
        ("513", 512),
        (100000, 512),
        ("0", 1),
        (-4, 1),
    ],
)
def test_resolve_count(raw, expected):
    assert resolve_count(raw) == expected


def test_query_by_word_fruit_scenario(service):
    results = service.query_by_word("apple", 2)

    assert [r.word for r in results] == ["apple", "orange"]
    assert results[0].distance == pytest.approx(0.0, abs=1e-6)
    assert results[1].distance > 0.0


def test_query_by_word_unknown(service):
    with pytest.raises(NotFoundError) as excinfo:
        service.query_by_word("kiwi")
    assert excinfo.value.word == "kiwi"


def test_get_vector_unknown(service):
    with pytest.raises(NotFoundError):
        service.get_vector("kiwi")


def test_count_policy_lives_in_service(fruit_store):
    index = RecordingIndex()
    svc = W2VQueryService(store=fruit_store, index=index)

    svc.query_by_word("apple")
    svc.query_by_word("apple", "9999")
    svc.query_by_word("apple", "nope")
    svc.query_by_vector([1.0, 0.0], 3)

    assert index.calls == [128, 512, 128, 3]


def test_default_count_returns_128_on_large_store():
    store = EmbeddingStore.build(random_records(400, 8), 8)
    svc = W2VQueryService(store=store, index=build_index(store, backend="brute"))

    assert len(svc.query_by_word("w0")) == 128
    assert len(svc.query_by_word("w0", 1000)) == 400


def test_query_by_vector_normalizes_raw_input(service):
    results = service.query_by_vector([10.0, 0.0], 1)

    assert results == [QueryResult(distance=pytest.approx(0.0, abs=1e-6), word="apple")]


def test_query_by_vector_dimension_mismatch(service):
    with pytest.raises(DimensionMismatch) as excinfo:
        service.query_by_vector([1.0, 0.0, 0.0])
    assert (excinfo.value.expected, excinfo.value.actual) == (2, 3)


def test_query_by_vector_near_float32_max_is_normalized(fruit_store):
    svc = W2VQueryService(store=fruit_store, index=build_index(fruit_store, backend="brute"))

    results = svc.query_by_vector([3e38, 3e38], 3)

    assert [r.word for r in results] == ["orange", "apple", "banana"]
    assert results[1].distance == pytest.approx(1.0 - 2 ** -0.5, abs=1e-6)


@pytest.mark.parametrize("bad", [[float("nan"), 0.0], [float("inf"), 1.0], [0.0, float("-inf")]])
def test_query_by_vector_rejects_non_finite(service, bad):
    with pytest.raises(InvalidVectorError):
        service.query_by_vector(bad)


def test_query_by_vector_zero_vector_is_searched_as_is(fruit_store):
    svc = W2VQueryService(store=fruit_store, index=build_index(fruit_store, backend="brute"))

    results = svc.query_by_vector(np.zeros(2), 3)
    assert [r.distance for r in results] == [1.0, 1.0, 1.0]
    assert [r.word for r in results] == ["apple", "orange", "banana"]


def test_to_hits(service):
    hits = service.to_hits(service.query_by_word("apple", 1))
    assert hits == [{"distance": pytest.approx(0.0, abs=1e-6), "word": "apple"}]
