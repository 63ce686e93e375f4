from __future__ import annotations

import io
import json
import logging

import pytest

from numkit.core.config import LibraryConfig, get_config, load_config, set_config
from numkit.core.logging import ROOT_LOGGER_NAME, configure_logging, get_logger
from numkit.core.types import SMALL_NUMBER


def test_default_config() -> None:
    config = LibraryConfig()
    assert config.tolerance == SMALL_NUMBER
    assert config.log_level == "WARNING"


@pytest.mark.parametrize("tolerance", [-1.0, float("nan"), float("inf")])
def test_config_rejects_bad_tolerance(tolerance: float) -> None:
    with pytest.raises(ValueError):
        LibraryConfig(tolerance=tolerance)


def test_config_rejects_unknown_log_level() -> None:
    with pytest.raises(ValueError):
        LibraryConfig(log_level="chatty")


def test_load_config_overrides_replace_file_values(tmp_path) -> None:
    path = tmp_path / "numkit.json"
    path.write_text(json.dumps({"tolerance": 0.5, "log_level": "INFO"}))
    config = load_config(path, ["tolerance=1e-3", "log_level=ERROR"])
    assert config.tolerance == 0.001
    assert config.log_level == "ERROR"


@pytest.mark.parametrize("override", ["invalid", "=3"])
def test_load_config_rejects_malformed_override(override: str) -> None:
    with pytest.raises(ValueError):
        load_config(overrides=[override])


def test_load_config_rejects_nested_override_keys() -> None:
    with pytest.raises(ValueError):
        load_config(overrides=["logging.level=DEBUG"])


def test_load_config_from_file_and_overrides(tmp_path) -> None:
    path = tmp_path / "numkit.json"
    path.write_text(json.dumps({"tolerance": 0.001}))
    config = load_config(path, ["log_level=DEBUG"])
    assert config.tolerance == 0.001
    assert config.log_level == "DEBUG"
    assert load_config() == LibraryConfig()


def test_load_config_rejects_unknown_keys(tmp_path) -> None:
    path = tmp_path / "numkit.json"
    path.write_text(json.dumps({"seed": 3}))
    with pytest.raises(ValueError):
        load_config(path)


def test_load_config_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.json")


def test_set_config_swaps_active_config() -> None:
    custom = LibraryConfig(tolerance=0.5, log_level="ERROR")
    previous = set_config(custom)
    try:
        assert get_config() is custom
        assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.ERROR
    finally:
        set_config(previous)
    assert get_config() is previous


def test_get_logger_nests_under_namespace() -> None:
    assert get_logger("numkit.prng").name == "numkit.prng"
    assert get_logger("numkit").name == "numkit"
    assert get_logger("scripts.tool").name == "numkit.scripts.tool"


def test_configure_logging_reuses_handler() -> None:
    stream = io.StringIO()
    logger = configure_logging("INFO", stream=stream, fmt="%(levelname)s %(message)s")
    configure_logging("INFO", stream=stream, fmt="%(levelname)s %(message)s")
    try:
        get_logger("numkit.test").info("hello")
        assert stream.getvalue().count("INFO hello") == 1
        named = [h for h in logger.handlers if h.get_name() == "numkit-stream"]
        assert len(named) == 1
    finally:
        configure_logging("WARNING")


def test_configure_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        configure_logging("LOUD")
