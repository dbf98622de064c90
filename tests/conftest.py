import logging

import pytest


class RecordingLogger:
    """Collects ``error`` calls the way a ``logging.Logger`` would receive them."""

    def __init__(self):
        self.calls = []

    def error(self, msg, *args, **kwargs):
        self.calls.append((msg % args if args else msg, kwargs))


@pytest.fixture
def recording_logger():
    return RecordingLogger()


@pytest.fixture
def stream_dir(tmp_path):
    return tmp_path / "streams"


@pytest.fixture(autouse=True)
def _no_root_env(monkeypatch):
    monkeypatch.delenv("TEMP_FILE_STREAM_ROOT", raising=False)


@pytest.fixture
def std_logger(caplog):
    caplog.set_level(logging.ERROR, logger="temp_file_stream")
    return logging.getLogger("temp_file_stream.tests")
