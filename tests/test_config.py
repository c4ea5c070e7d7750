# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: test_config.py
# -----------------------------------------------------------------------------
import pytest

from config.Config import Config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for env_name in Config.ENV_VARS.values():
        monkeypatch.delenv(env_name, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("W2V_VECTORS", "/data/vectors.bin")
    cfg = Config.from_env()

    assert cfg.vectors_path == "/data/vectors.bin"
    assert cfg.compressed is False
    assert cfg.binary is True
    assert cfg.limit == 250000
    assert (cfg.index_backend, cfg.n_tables, cfg.n_planes, cfg.seed) == ("lsh", 16, 10, None)
    assert cfg.zero_norm_policy == "reject"
    assert cfg.port == 3000


def test_env_values(monkeypatch):
    monkeypatch.setenv("W2V_VECTORS", "v.bin.gz")
    monkeypatch.setenv("W2V_COMPRESSED", "yes")
    monkeypatch.setenv("W2V_LIMIT", "0")
    monkeypatch.setenv("W2V_INDEX_BACKEND", "BRUTE")
    monkeypatch.setenv("W2V_SEED", "42")
    monkeypatch.setenv("W2V_ZERO_NORM_POLICY", "zero")

    cfg = Config.from_env()

    assert cfg.compressed is True
    assert cfg.limit == 0
    assert cfg.index_backend == "brute"
    assert cfg.seed == 42
    assert cfg.zero_norm_policy == "zero"


def test_overrides_win_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("W2V_VECTORS", "env.bin")
    monkeypatch.setenv("W2V_PORT", "4000")

    cfg = Config.from_env(vectors_path="cli.bin", port=None, n_planes=12)

    assert cfg.vectors_path == "cli.bin"
    assert cfg.port == 4000
    assert cfg.n_planes == 12


def test_missing_vectors_path():
    with pytest.raises(ValueError, match="W2V_VECTORS"):
        Config.from_env()


@pytest.mark.parametrize(
    "overrides",
    [
        {"n_planes": 65},
        {"n_planes": 0},
        {"n_tables": 0},
        {"index_backend": "annoy"},
        {"zero_norm_policy": "skip"},
        {"limit": -1},
        {"port": 70000},
    ],
)
def test_invalid_values(overrides):
    with pytest.raises(ValueError):
        Config(vectors_path="v.bin", **overrides)


def test_malformed_env_int(monkeypatch):
    monkeypatch.setenv("W2V_VECTORS", "v.bin")
    monkeypatch.setenv("W2V_TABLES", "many")

    with pytest.raises(RuntimeError, match="W2V_TABLES"):
        Config.from_env()


def test_summary_round_trips_fields():
    cfg = Config(vectors_path="v.bin", seed=7)
    assert cfg.summary()["seed"] == 7
    assert set(cfg.summary()) == set(Config.ENV_VARS)
