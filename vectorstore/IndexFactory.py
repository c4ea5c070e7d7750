# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-03
# Description: IndexFactory
# -----------------------------------------------------------------------------
from typing import Optional

from embedding.EmbeddingStore import EmbeddingStore
from vectorstore.AnnIndex import AnnIndex
from vectorstore.BruteForceIndex import BruteForceIndex
from vectorstore.HyperplaneLSHIndex import HyperplaneLSHIndex


def build_index(
        store: EmbeddingStore,
        *,
        backend: str = "lsh",
        n_tables: int = 16,
        n_planes: int = 10,
        seed: Optional[int] = None,
) -> AnnIndex:
    """Create the requested backend over ``store`` and build it from the store's vectors."""
    if backend == "lsh":
        index: AnnIndex = HyperplaneLSHIndex(
            store,
            store.dimension(),
            n_tables=n_tables,
            n_planes=n_planes,
            seed=seed,
        )
    elif backend == "brute":
        index = BruteForceIndex(store, store.dimension())
    else:
        raise ValueError(f"unknown index backend {backend!r}")

    index.build(store.vectors)
    return index
