import logging
from unittest import mock
import pytest
from dirbridge import config


@mock.patch("dirbridge.config.logging.basicConfig")
def test_init_logging_runs_once(basic_config):
    config.init_logging()
    config.init_logging()
    assert basic_config.call_count == 1
    kwargs = basic_config.call_args.kwargs
    assert kwargs["level"] == logging.INFO
    assert kwargs["format"] == config.LOG_FORMAT


@mock.patch("dirbridge.config.logging.basicConfig")
def test_log_file_adds_handler(basic_config, tmp_path, monkeypatch):
    log_file = tmp_path / "bridge.log"
    monkeypatch.setenv("DIRBRIDGE_LOG_FILE", str(log_file))
    monkeypatch.setenv("DIRBRIDGE_LOG_LEVEL", "debug")
    config.init_logging()

    kwargs = basic_config.call_args.kwargs
    assert kwargs["level"] == logging.DEBUG
    file_handlers = [h for h in kwargs["handlers"] if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(log_file)
    file_handlers[0].close()


def test_unknown_level_rejected(monkeypatch):
    monkeypatch.setenv("DIRBRIDGE_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        config.log_level()
