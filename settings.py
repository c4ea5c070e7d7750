# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: settings.py
# -----------------------------------------------------------------------------
import os
from typing import Optional


def _env(name: str, default: str = "") -> str:
    """Read env var safely and strip whitespace."""
    return (os.getenv(name) or default).strip()


def _env_int(name: str, default: int) -> int:
    v = _env(name, "")
    if v == "":
        return default
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_optional_int(name: str) -> Optional[int]:
    v = _env(name, "")
    if v == "":
        return None
    try:
        return int(v)
    except ValueError as e:
        raise RuntimeError(f"Env var {name} must be an int, got {v!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    v = _env(name, "")
    if v == "":
        return default
    v = v.lower()
    if v in ("1", "true", "t", "yes", "y", "on"):
        return True
    if v in ("0", "false", "f", "no", "n", "off"):
        return False
    raise RuntimeError(f"Env var {name} must be a boolean, got {v!r}")


# -----------------------------------------------------------------------------
# Result counts for similarity queries
# -----------------------------------------------------------------------------
DEFAULT_RESULT_COUNT = 128
MAX_RESULT_COUNT = 512
MIN_RESULT_COUNT = 1


# -----------------------------------------------------------------------------
# Ingestion / index defaults
# -----------------------------------------------------------------------------
DEFAULT_INGEST_LIMIT = 250000
DEFAULT_INDEX_TABLES = 16
DEFAULT_INDEX_PLANES = 10

# Tolerance used by health checks when verifying unit norms
NORM_TOLERANCE = 1e-4
