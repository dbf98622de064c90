"""Byte stream over a temporary file that is deleted when the stream closes."""

from __future__ import annotations

import asyncio
import contextlib
import io
import os
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, Optional

from . import modes
from .logger import ErrorLogger, NullLogger
from .modes import FileAccess, FileMode, FileShare
from .paths import Directory, ensure_directory, resolve_directory, unique_file_path


class TempFileStream(io.BufferedIOBase):
    """A seekable byte stream backed by a uniquely named temporary file.

    The file lives in *directory* (a path, a :class:`TempFileStreamConfig`,
    or ``None`` for ``<os temp>/Temp-FileStreams``) and is removed by
    :meth:`close`. Use it as a context manager::

        with TempFileStream() as stream:
            stream.write(b"payload")

    When closing fails and a *logger* was passed, the error is logged and
    swallowed. Without a logger it propagates to whoever closed the stream.
    """

    def __init__(
        self,
        directory: Directory = None,
        mode: FileMode = FileMode.CREATE,
        access: FileAccess = FileAccess.READ_WRITE,
        share: FileShare = FileShare.READ_WRITE,
        logger: Optional[ErrorLogger] = None,
    ) -> None:
        # Considered closed until the handle exists, so a failed __init__
        # leaves nothing for the finaliser to tear down.
        self._released = True
        self._executor: Optional[ThreadPoolExecutor] = None
        self._log_failures = logger is not None
        self._logger: ErrorLogger = logger if logger is not None else NullLogger()

        mode, access, share = modes.coerce(mode, access, share)
        modes.validate(mode, access)

        folder = resolve_directory(directory)
        ensure_directory(folder)
        self._file_path = unique_file_path(folder)
        self._handle = _open_handle(self._file_path, mode, access, share)
        self._released = False

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def name(self) -> str:
        return self._file_path

    @property
    def closed(self) -> bool:
        return self._released

    def __repr__(self) -> str:
        state = "closed" if self._released else "open"
        return f"<{type(self).__name__} {state} path={getattr(self, '_file_path', None)!r}>"

    # ------------------------------------------------------------------
    # Synchronous stream interface
    # ------------------------------------------------------------------

    def read(self, size: Optional[int] = -1) -> bytes:
        return self._handle.read(size)

    def read1(self, size: int = -1) -> bytes:
        return self._handle.read1(size)

    def readinto(self, b: Any) -> int:
        return self._handle.readinto(b)

    def readinto1(self, b: Any) -> int:
        return self._handle.readinto1(b)

    def write(self, b: Any) -> int:
        return self._handle.write(b)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._handle.seek(offset, whence)

    def tell(self) -> int:
        return self._handle.tell()

    def truncate(self, size: Optional[int] = None) -> int:
        return self._handle.truncate(size)

    def flush(self) -> None:
        self._handle.flush()

    def fileno(self) -> int:
        return self._handle.fileno()

    def isatty(self) -> bool:
        return self._handle.isatty()

    def readable(self) -> bool:
        return self._handle.readable()

    def writable(self) -> bool:
        return self._handle.writable()

    def seekable(self) -> bool:
        return self._handle.seekable()

    can_read = property(readable)
    can_write = property(writable)
    can_seek = property(seekable)

    @property
    def length(self) -> int:
        """Size of the file in bytes, including writes still buffered."""
        self._handle.flush()
        return os.fstat(self._handle.fileno()).st_size

    @property
    def position(self) -> int:
        return self._handle.tell()

    @position.setter
    def position(self, value: int) -> None:
        self._handle.seek(value, io.SEEK_SET)

    def set_length(self, value: int) -> None:
        """Truncate or extend the file to *value* bytes; position is kept."""
        self._handle.truncate(value)

    # ------------------------------------------------------------------
    # Asynchronous counterparts
    # ------------------------------------------------------------------

    async def aread(self, size: Optional[int] = -1) -> bytes:
        return await self._run_async(self._handle.read, size)

    async def areadinto(self, b: Any) -> int:
        return await self._run_async(self._handle.readinto, b)

    async def awrite(self, b: Any) -> int:
        return await self._run_async(self._handle.write, b)

    async def aseek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return await self._run_async(self._handle.seek, offset, whence)

    async def aflush(self) -> None:
        await self._run_async(self._handle.flush)

    async def aset_length(self, value: int) -> None:
        await self._run_async(self._handle.truncate, value)

    async def aclose(self) -> None:
        """Close from a coroutine. Cancelling the caller does not stop teardown."""
        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(None, self.close)
        # If the caller is cancelled nobody awaits the result; collect it here.
        future.add_done_callback(_retrieve_result)
        await asyncio.shield(future)

    async def __aenter__(self) -> "TempFileStream":
        if self._released:
            raise ValueError("I/O operation on closed file.")
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _run_async(self, func: Callable[..., Any], *args: Any) -> Any:
        # One worker per stream keeps operations in the order they were issued.
        if self._released:
            raise ValueError("I/O operation on closed file.")
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="temp-file-stream"
            )
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, partial(func, *args))

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Close the handle, then delete the file.

        Runs once: later calls return without retrying the delete, so a
        failure is raised or logged only on the first call.
        """
        if self._released:
            return
        self._released = True

        if self._executor is not None:
            self._executor.shutdown(wait=True)

        errors: list[OSError] = []
        try:
            self._handle.close()
        except OSError as e:
            errors.append(e)
        try:
            os.remove(self._file_path)
        except OSError as e:
            errors.append(e)

        if not errors:
            return
        if not self._log_failures:
            raise errors[0]
        self._logger.error(
            "Temporary file '%s' could not be removed on close.",
            self._file_path,
            exc_info=errors[0],
        )


def _open_handle(
    path: str, mode: FileMode, access: FileAccess, share: FileShare
) -> io.BufferedIOBase:
    fd = os.open(path, modes.os_flags(mode, access), 0o600)
    try:
        handle = open(fd, modes.open_mode(mode, access))
    except BaseException:
        os.close(fd)
        raise
    try:
        modes.apply_share(handle.fileno(), share)
    except BaseException:
        handle.close()
        with contextlib.suppress(OSError):
            os.remove(path)
        raise
    return handle


def _retrieve_result(future: "asyncio.Future[None]") -> None:
    if not future.cancelled():
        future.exception()
