import importlib
import os
import sys
import types
from pathlib import Path

import pytest


def _reload_config():
    sys.modules.pop("wordcrawl.config", None)
    return importlib.import_module("wordcrawl.config")


@pytest.fixture(autouse=True)
def _restore_config_module():
    original = sys.modules.get("wordcrawl.config")
    yield
    if original is not None:
        sys.modules["wordcrawl.config"] = original


def test_dotenv_present_but_fails_to_load(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("USER_AGENT=FromFile")
    monkeypatch.chdir(tmp_path)

    fake = types.SimpleNamespace(load_dotenv=lambda: False)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    with pytest.raises(RuntimeError):
        _reload_config()


def test_dotenv_loads_sets_variables(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("USER_AGENT=DotenvAgent")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("USER_AGENT", raising=False)

    def fake_load():
        # emulate dotenv behavior: read .env and set os.environ
        p = Path(".env")
        for line in p.read_text().splitlines():
            if "=" in line:
                k, v = line.split("=", 1)
                monkeypatch.setenv(k, v)
        return True

    fake = types.SimpleNamespace(load_dotenv=fake_load)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    cfg = _reload_config()
    assert cfg.get_str_env("USER_AGENT", "WordCrawl/0.1") == "DotenvAgent"


def test_env_helpers(monkeypatch):
    from wordcrawl import config as cfg

    monkeypatch.setenv("WC_INT", "12")
    monkeypatch.setenv("WC_BAD_INT", "twelve")
    monkeypatch.setenv("WC_FLOAT", "0.5")
    monkeypatch.setenv("WC_EMPTY", "")
    monkeypatch.setenv("WORDCRAWL_LOG_LEVEL", " debug ")

    assert cfg.get_int_env("WC_INT", 1) == 12
    assert cfg.get_int_env("WC_BAD_INT", 1) == 1
    assert cfg.get_float_env("WC_FLOAT", 1.0) == 0.5
    assert cfg.get_str_env("WC_EMPTY", "fallback") == "fallback"
    assert cfg.get_optional_str_env("WC_EMPTY") is None
    assert cfg.get_optional_str_env("WC_INT") == "12"
    assert cfg.log_level() == "DEBUG"
    assert os.environ["WC_INT"] == "12"
