import gc
import logging
import os

import pytest

from temp_file_stream.core import TempFileStream


def _fail_remove(path):
    raise PermissionError(13, "Permission denied", path)


class TestDeleteFailure:
    def test_logged_and_swallowed_with_logger(self, stream_dir, recording_logger):
        stream = TempFileStream(stream_dir, logger=recording_logger)
        os.remove(stream.file_path)

        stream.close()

        assert len(recording_logger.calls) == 1
        message, kwargs = recording_logger.calls[0]
        assert stream.file_path in message
        assert isinstance(kwargs["exc_info"], FileNotFoundError)

    def test_propagates_without_logger(self, stream_dir):
        stream = TempFileStream(stream_dir)
        os.remove(stream.file_path)

        with pytest.raises(FileNotFoundError):
            stream.close()
        assert stream.closed

    def test_propagates_out_of_with_block(self, stream_dir, monkeypatch):
        monkeypatch.setattr(os, "remove", _fail_remove)
        with pytest.raises(PermissionError):
            with TempFileStream(stream_dir):
                pass

    def test_standard_logger_receives_traceback(self, stream_dir, std_logger, caplog, monkeypatch):
        stream = TempFileStream(stream_dir, logger=std_logger)
        path = stream.file_path
        monkeypatch.setattr(os, "remove", _fail_remove)

        stream.close()

        records = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(records) == 1
        assert path in records[0].getMessage()
        assert records[0].exc_info[0] is PermissionError
        monkeypatch.undo()
        os.remove(path)

    def test_handle_closed_even_when_delete_fails(self, stream_dir, recording_logger, monkeypatch):
        stream = TempFileStream(stream_dir, logger=recording_logger)
        handle = stream._handle
        monkeypatch.setattr(os, "remove", _fail_remove)

        stream.close()

        assert handle.closed
        assert len(recording_logger.calls) == 1


class FailingCloseHandle:
    """Closes the real handle, then reports an I/O error."""

    def __init__(self, handle):
        self._handle = handle

    def __getattr__(self, name):
        return getattr(self._handle, name)

    def close(self):
        self._handle.close()
        raise OSError(5, "Input/output error")


class TestCloseFailure:
    def test_delete_still_attempted(self, stream_dir, recording_logger):
        stream = TempFileStream(stream_dir, logger=recording_logger)
        path = stream.file_path
        stream._handle = FailingCloseHandle(stream._handle)

        stream.close()

        assert not os.path.exists(path)
        assert len(recording_logger.calls) == 1
        assert recording_logger.calls[0][1]["exc_info"].errno == 5

    def test_first_error_raised_without_logger(self, stream_dir, monkeypatch):
        stream = TempFileStream(stream_dir)
        stream._handle = FailingCloseHandle(stream._handle)
        monkeypatch.setattr(os, "remove", _fail_remove)

        with pytest.raises(OSError) as excinfo:
            stream.close()
        assert excinfo.value.errno == 5


def test_second_close_does_not_log_again(stream_dir, recording_logger):
    stream = TempFileStream(stream_dir, logger=recording_logger)
    os.remove(stream.file_path)
    stream.close()
    stream.close()
    assert len(recording_logger.calls) == 1


def test_finaliser_removes_file(stream_dir):
    stream = TempFileStream(stream_dir)
    path = stream.file_path
    del stream
    gc.collect()
    assert not os.path.exists(path)
