#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: server.py
# -----------------------------------------------------------------------------
"""
CLI for running the word vector server.

Usage:
    python -m api.server --vectors GoogleNews-vectors-negative300.bin.gz --compressed
    python -m api.server --vectors glove.txt --text --port 8080 --seed 42
"""

import argparse
import sys
from typing import List, Optional

import uvicorn

from api.AppContainer import AppContainer
from api.main import create_app
from config.Config import Config, INDEX_BACKENDS
from utility.exceptions import W2VError
from utility.logging_utils import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serves Word2Vec embeddings")
    parser.add_argument("-v", "--vectors", help="Path to load word vectors from (env W2V_VECTORS)")
    parser.add_argument("-c", "--compressed", action="store_true", default=None,
                        help="Vectors file is gzip compressed")
    parser.add_argument("--text", action="store_true",
                        help="Vectors file is in the word2vec text format")
    parser.add_argument("-p", "--port", type=int, help="Port to listen on (default 3000)")
    parser.add_argument("--host", help="Interface to bind (default ::)")
    parser.add_argument("--limit", type=int, help="Maximum number of vectors to load (0 = all)")
    parser.add_argument("--backend", choices=INDEX_BACKENDS, help="Nearest-neighbour index backend")
    parser.add_argument("--tables", type=int, help="Number of LSH hash tables")
    parser.add_argument("--planes", type=int, help="Hyperplanes per LSH table")
    parser.add_argument("--seed", type=int, help="Seed for hyperplane sampling")
    return parser


def parse_config(argv: Optional[List[str]] = None) -> Config:
    args = build_parser().parse_args(argv)
    return Config.from_env(
        vectors_path=args.vectors,
        compressed=args.compressed,
        binary=False if args.text else None,
        port=args.port,
        host=args.host,
        limit=args.limit,
        index_backend=args.backend,
        n_tables=args.tables,
        n_planes=args.planes,
        seed=args.seed,
    )


def main(argv: Optional[List[str]] = None) -> int:
    try:
        cfg = parse_config(argv)
    except (ValueError, RuntimeError) as e:
        logger.error("%s", e)
        return 2

    logger.info("## Loading Word Vectors...")
    try:
        container = AppContainer.from_config(cfg)
    except W2VError as e:
        logger.error("Failed to load word vectors: %s", e)
        return 1
    logger.info(" - Loaded %d!", container.store.count())

    app = create_app(container_factory=lambda: container)
    uvicorn.run(app, host=cfg.host, port=cfg.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
