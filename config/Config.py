# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: Config
# -----------------------------------------------------------------------------

from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv, find_dotenv

import settings

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=False)

INDEX_BACKENDS = ("lsh", "brute")
ZERO_NORM_POLICIES = ("reject", "zero")


@dataclass(frozen=True)
class Config:
    # Embedding file
    vectors_path: str
    compressed: bool = False
    binary: bool = True
    limit: Optional[int] = settings.DEFAULT_INGEST_LIMIT
    zero_norm_policy: str = "reject"

    # ANN index
    index_backend: str = "lsh"
    n_tables: int = settings.DEFAULT_INDEX_TABLES
    n_planes: int = settings.DEFAULT_INDEX_PLANES
    seed: Optional[int] = None

    # HTTP
    host: str = "::"
    port: int = 3000

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "vectors_path": "W2V_VECTORS",
        "compressed": "W2V_COMPRESSED",
        "binary": "W2V_BINARY",
        "limit": "W2V_LIMIT",
        "zero_norm_policy": "W2V_ZERO_NORM_POLICY",
        "index_backend": "W2V_INDEX_BACKEND",
        "n_tables": "W2V_TABLES",
        "n_planes": "W2V_PLANES",
        "seed": "W2V_SEED",
        "host": "W2V_HOST",
        "port": "W2V_PORT",
    }

    @staticmethod
    def from_env(**overrides: Any) -> "Config":
        """
        Build Config object from environment variables.
        Keyword overrides (e.g. from the CLI) win over the environment;
        None means "not given".
        """
        env = Config.ENV_VARS
        limit = settings._env_optional_int(env["limit"])
        kwargs: Dict[str, Any] = {
            "vectors_path": settings._env(env["vectors_path"]),
            "compressed": settings._env_bool(env["compressed"], False),
            "binary": settings._env_bool(env["binary"], True),
            "limit": settings.DEFAULT_INGEST_LIMIT if limit is None else limit,
            "zero_norm_policy": settings._env(env["zero_norm_policy"], "reject").lower(),
            "index_backend": settings._env(env["index_backend"], "lsh").lower(),
            "n_tables": settings._env_int(env["n_tables"], settings.DEFAULT_INDEX_TABLES),
            "n_planes": settings._env_int(env["n_planes"], settings.DEFAULT_INDEX_PLANES),
            "seed": settings._env_optional_int(env["seed"]),
            "host": settings._env(env["host"], "::"),
            "port": settings._env_int(env["port"], 3000),
        }
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return Config(**kwargs)

    def __post_init__(self):
        """Fail fast on missing or out-of-range configuration."""
        problems = []
        if not self.vectors_path:
            problems.append(f"{self.ENV_VARS['vectors_path']} (vectors path) is required")
        if self.limit is not None and self.limit < 0:
            problems.append(f"limit must be >= 0, got {self.limit}")
        if self.zero_norm_policy not in ZERO_NORM_POLICIES:
            problems.append(f"zero_norm_policy must be one of {ZERO_NORM_POLICIES}, got {self.zero_norm_policy!r}")
        if self.index_backend not in INDEX_BACKENDS:
            problems.append(f"index_backend must be one of {INDEX_BACKENDS}, got {self.index_backend!r}")
        if self.n_tables < 1:
            problems.append(f"n_tables must be >= 1, got {self.n_tables}")
        if not 1 <= self.n_planes <= 64:
            problems.append(f"n_planes must be in [1, 64], got {self.n_planes}")
        if not 0 < self.port < 65536:
            problems.append(f"port must be in [1, 65535], got {self.port}")

        if problems:
            raise ValueError(f"Invalid configuration: {problems}")

    def summary(self) -> dict:
        """Return a summary for logging."""
        return {
            "vectors_path": self.vectors_path,
            "compressed": self.compressed,
            "binary": self.binary,
            "limit": self.limit,
            "zero_norm_policy": self.zero_norm_policy,
            "index_backend": self.index_backend,
            "n_tables": self.n_tables,
            "n_planes": self.n_planes,
            "seed": self.seed,
            "host": self.host,
            "port": self.port,
        }
