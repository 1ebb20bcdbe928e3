# tests/test_config.py
"""Tests for configuration loading and logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from trademark_extractor.config import default_config, expand_env_vars, load_config, setup_logging


def test_load_config_expands_environment(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("USPTO_API_KEY", "from-env")
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "tsdr:\n"
        "  api_key: ${USPTO_API_KEY}\n"
        "  timeout: 10\n"
        "logging:\n"
        "  level: DEBUG\n"
    )

    config = load_config(str(config_file))

    assert config["tsdr"]["api_key"] == "from-env"
    assert config["tsdr"]["timeout"] == 10
    assert config["logging"]["level"] == "DEBUG"


def test_unset_variable_becomes_none(monkeypatch) -> None:
    monkeypatch.delenv("TM_UNSET_VARIABLE", raising=False)
    expanded = expand_env_vars({"a": ["${TM_UNSET_VARIABLE}", "plain"], "b": 3})
    assert expanded == {"a": [None, "plain"], "b": 3}


def test_missing_file_gives_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("USPTO_API_KEY", "default-key")
    config = load_config(str(tmp_path / "missing.yaml"))
    assert config == default_config()
    assert config["tsdr"]["api_key"] == "default-key"


def test_empty_file_gives_empty_config(tmp_path) -> None:
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")
    assert load_config(str(config_file)) == {}


def test_setup_logging_console_only(restore_root_logger) -> None:
    setup_logging({"logging": {"level": "warning"}})
    assert restore_root_logger.level == logging.WARNING
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0], logging.StreamHandler)


def test_setup_logging_with_file(tmp_path, restore_root_logger) -> None:
    log_file = tmp_path / "logs" / "extractor.log"
    setup_logging({"logging": {"level": "DEBUG", "file": str(log_file)}})

    file_handlers = [h for h in restore_root_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert log_file.parent.is_dir()

    logging.getLogger("trademark_extractor.test").debug("written to file")
    file_handlers[0].flush()
    assert "written to file" in log_file.read_text()


def test_unknown_level_falls_back_to_info(restore_root_logger) -> None:
    setup_logging({"logging": {"level": "CHATTY"}})
    assert restore_root_logger.level == logging.INFO
