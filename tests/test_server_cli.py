# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-05
# Description: test_server_cli.py
# -----------------------------------------------------------------------------
import pytest

from api import server
from config.Config import Config
from conftest import FRUIT


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for env_name in Config.ENV_VARS.values():
        monkeypatch.delenv(env_name, raising=False)


def test_parse_config_from_arguments():
    cfg = server.parse_config(
        ["--vectors", "vectors.txt.gz", "--compressed", "--text", "--port", "8080",
         "--backend", "brute", "--tables", "4", "--planes", "6", "--seed", "3", "--limit", "100"]
    )

    assert cfg.vectors_path == "vectors.txt.gz"
    assert cfg.compressed is True
    assert cfg.binary is False
    assert cfg.port == 8080
    assert (cfg.index_backend, cfg.n_tables, cfg.n_planes, cfg.seed, cfg.limit) == ("brute", 4, 6, 3, 100)


def test_parse_config_falls_back_to_env(monkeypatch):
    monkeypatch.setenv("W2V_VECTORS", "env.bin")
    monkeypatch.setenv("W2V_COMPRESSED", "1")

    cfg = server.parse_config([])

    assert cfg.vectors_path == "env.bin"
    assert cfg.compressed is True
    assert cfg.binary is True


def test_main_without_vectors_exits_2():
    assert server.main([]) == 2


@pytest.mark.parametrize("name, value", [("W2V_PORT", "abc"), ("W2V_COMPRESSED", "maybe")])
def test_main_with_malformed_env_exits_2(monkeypatch, tmp_path, name, value):
    monkeypatch.setenv("W2V_VECTORS", str(tmp_path / "vectors.bin"))
    monkeypatch.setenv(name, value)

    assert server.main([]) == 2


def test_main_with_missing_file_exits_1(tmp_path):
    assert server.main(["--vectors", str(tmp_path / "nope.bin")]) == 1


def test_main_runs_uvicorn_with_loaded_model(monkeypatch, write_vectors):
    calls = {}

    def fake_run(app, host, port):
        calls.update(app=app, host=host, port=port)

    monkeypatch.setattr(server.uvicorn, "run", fake_run)
    path = write_vectors(FRUIT, 2)

    assert server.main(["--vectors", str(path), "--port", "3100", "--seed", "1"]) == 0
    assert calls["port"] == 3100
    assert calls["host"] == "::"
    assert calls["app"].title == "W2V Server"
