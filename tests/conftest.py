import pytest

from dirbridge import config


# Keep a developer's .env / shell settings out of the tests
@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    monkeypatch.delenv("DIRBRIDGE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DIRBRIDGE_LOG_FILE", raising=False)
    yield


@pytest.fixture(autouse=True)
def _reset_logging_flag(monkeypatch):
    monkeypatch.setattr(config, "_LOGGING_READY", False)
    yield


@pytest.fixture
def listing_dir(tmp_path):
    """/tmp/x-style directory: a 12 byte file and one subdirectory."""
    (tmp_path / "a.txt").write_bytes(b"hello world!")
    (tmp_path / "b").mkdir()
    return tmp_path
