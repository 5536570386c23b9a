import json
import logging

import pytest

from vectors3d import R3
from vectors3d.config import (
    DEFAULTS, ENV_CONFIG, ENV_LOG_LEVEL, get_config, load_config, reset_config,
)
from vectors3d.logger import get_logger


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    monkeypatch.delenv(ENV_CONFIG, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    reset_config()
    yield
    reset_config()


def write_config(tmp_path, values):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(values))
    return path


def test_defaults():
    assert get_config() == DEFAULTS


def test_env_overrides_log_level(monkeypatch):
    monkeypatch.setenv(ENV_LOG_LEVEL, "debug")
    assert get_config()["log_level"] == "DEBUG"
    get_logger("vectors3d.test_env")
    assert logging.getLogger("vectors3d").level == logging.DEBUG


def test_load_config_merges_over_defaults(tmp_path):
    config = load_config(write_config(tmp_path, {"atol": 1e-6}))
    assert config["atol"] == 1e-6
    assert config["rtol"] == DEFAULTS["rtol"]
    assert get_config()["atol"] == 1e-6


def test_loaded_tolerance_drives_isclose(tmp_path):
    assert not R3().isclose(R3(0.1, 0., 0.))
    load_config(write_config(tmp_path, {"atol": 0.5}))
    assert R3().isclose(R3(0.1, 0., 0.))
    reset_config()
    assert not R3().isclose(R3(0.1, 0., 0.))


def test_config_file_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv(ENV_CONFIG, str(write_config(tmp_path, {"rtol": 0.25})))
    assert get_config()["rtol"] == 0.25
    assert R3(1., 1., 1.).isclose(R3(1.2, 1., 1.), atol=0.)


def test_unknown_keys_are_rejected(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_config(tmp_path, {"tolerance": 1}))


def test_module_loggers_share_package_handler():
    logger = get_logger("vectors3d.test_handlers")
    get_logger("test_handlers")
    assert logger.name == "vectors3d.test_handlers"
    assert get_logger("test_handlers") is logger
    assert logger.handlers == []
    assert len(logging.getLogger("vectors3d").handlers) == 1
