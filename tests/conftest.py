# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: conftest.py
# -----------------------------------------------------------------------------

import gzip
import sys
from pathlib import Path
from typing import Callable, Dict, Sequence, Tuple

import numpy as np
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from embedding.EmbeddingStore import EmbeddingStore  # noqa: E402
from vectorstore.HyperplaneLSHIndex import HyperplaneLSHIndex  # noqa: E402

FRUIT = [
    ("apple", [1.0, 0.0]),
    ("orange", [0.9, 0.1]),
    ("banana", [-1.0, 0.0]),
]


def encode_binary(records: Sequence[Tuple[str, Sequence[float]]], dimension: int, vocab_size: int | None = None) -> bytes:
    """word2vec .bin layout: header line, then word + space + little-endian float32s + newline."""
    vocab = len(records) if vocab_size is None else vocab_size
    out = bytearray(f"{vocab} {dimension}\n".encode("ascii"))
    for word, vector in records:
        out += word.encode("utf-8") + b" "
        out += np.asarray(vector, dtype="<f4").tobytes()
        out += b"\n"
    return bytes(out)


def encode_text(records: Sequence[Tuple[str, Sequence[float]]], dimension: int, vocab_size: int | None = None) -> bytes:
    vocab = len(records) if vocab_size is None else vocab_size
    lines = [f"{vocab} {dimension}"]
    lines += [" ".join([word] + [repr(float(v)) for v in vector]) for word, vector in records]
    return ("\n".join(lines) + "\n").encode("utf-8")


def random_records(n: int, dimension: int, seed: int = 7) -> list:
    rng = np.random.default_rng(seed)
    data = rng.standard_normal((n, dimension)).astype(np.float32)
    return [(f"w{i}", data[i]) for i in range(n)]


@pytest.fixture
def write_vectors(tmp_path) -> Callable[..., Path]:
    """Factory writing a vectors file to tmp_path and returning its path."""

    def _write(
        records: Sequence[Tuple[str, Sequence[float]]],
        dimension: int,
        *,
        binary: bool = True,
        compressed: bool = False,
        name: str = "vectors",
    ) -> Path:
        payload = encode_binary(records, dimension) if binary else encode_text(records, dimension)
        suffix = ".bin" if binary else ".txt"
        path = tmp_path / f"{name}{suffix}{'.gz' if compressed else ''}"
        path.write_bytes(gzip.compress(payload) if compressed else payload)
        return path

    return _write


@pytest.fixture
def fruit_store() -> EmbeddingStore:
    return EmbeddingStore.build(FRUIT, 2)


@pytest.fixture
def fruit_index(fruit_store) -> HyperplaneLSHIndex:
    index = HyperplaneLSHIndex(fruit_store, 2, n_tables=8, n_planes=1, seed=1)
    index.build(fruit_store.vectors)
    return index


@pytest.fixture
def random_store() -> EmbeddingStore:
    return EmbeddingStore.build(random_records(300, 16), 16)


def brute_force_top_k(store: EmbeddingStore, query: np.ndarray, k: int) -> Dict[int, float]:
    sims = store.vectors.astype(np.float64) @ np.asarray(query, dtype=np.float64)
    dists = np.clip(1.0 - sims, 0.0, 2.0)
    order = np.lexsort((np.arange(dists.size), dists))[:k]
    return {int(i): float(dists[i]) for i in order}
