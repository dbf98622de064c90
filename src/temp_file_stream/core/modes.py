"""Open, access and share modes for temporary file streams.

Each enum translates to the flags needed by :func:`os.open` and the mode
string needed by :func:`open` when wrapping the resulting descriptor.
"""

from __future__ import annotations

import enum
import os
from typing import Any, Tuple

try:
    import fcntl
except ImportError:  # Windows
    fcntl = None  # type: ignore[assignment]


class FileMode(enum.Enum):
    CREATE_NEW = "create_new"
    CREATE = "create"
    OPEN = "open"
    OPEN_OR_CREATE = "open_or_create"
    TRUNCATE = "truncate"
    APPEND = "append"


class FileAccess(enum.Enum):
    READ = "read"
    WRITE = "write"
    READ_WRITE = "read_write"


class FileShare(enum.Enum):
    NONE = "none"
    READ = "read"
    WRITE = "write"
    READ_WRITE = "read_write"


_MODE_FLAGS = {
    FileMode.CREATE_NEW: os.O_CREAT | os.O_EXCL,
    FileMode.CREATE: os.O_CREAT | os.O_TRUNC,
    FileMode.OPEN: 0,
    FileMode.OPEN_OR_CREATE: os.O_CREAT,
    FileMode.TRUNCATE: os.O_TRUNC,
    FileMode.APPEND: os.O_CREAT | os.O_APPEND,
}

_ACCESS_FLAGS = {
    FileAccess.READ: os.O_RDONLY,
    FileAccess.WRITE: os.O_WRONLY,
    FileAccess.READ_WRITE: os.O_RDWR,
}

_ACCESS_MODES = {
    FileAccess.READ: "rb",
    FileAccess.WRITE: "wb",
    FileAccess.READ_WRITE: "r+b",
}

# Modes that modify the file need write access.
_WRITING_MODES = {FileMode.CREATE, FileMode.CREATE_NEW, FileMode.TRUNCATE, FileMode.APPEND}


def coerce(mode: Any, access: Any, share: Any) -> Tuple[FileMode, FileAccess, FileShare]:
    """Turn enum members or their string values into members.

    Unknown values raise ``ValueError`` naming the offending parameter.
    """
    try:
        mode = FileMode(mode)
    except ValueError:
        raise ValueError(f"invalid mode: {mode!r}") from None
    try:
        access = FileAccess(access)
    except ValueError:
        raise ValueError(f"invalid access: {access!r}") from None
    try:
        share = FileShare(share)
    except ValueError:
        raise ValueError(f"invalid share: {share!r}") from None
    return mode, access, share


def validate(mode: FileMode, access: FileAccess) -> None:
    """Raise ``ValueError`` for mode/access pairs that cannot be opened."""
    if access is FileAccess.READ and mode in _WRITING_MODES:
        raise ValueError(f"{mode.name} requires write access, got {access.name}")
    if mode is FileMode.APPEND and access is not FileAccess.WRITE:
        raise ValueError(f"APPEND can only be used with WRITE access, got {access.name}")


def os_flags(mode: FileMode, access: FileAccess) -> int:
    return _MODE_FLAGS[mode] | _ACCESS_FLAGS[access] | getattr(os, "O_BINARY", 0)


def open_mode(mode: FileMode, access: FileAccess) -> str:
    if mode is FileMode.APPEND:
        return "ab"
    return _ACCESS_MODES[access]


def apply_share(fd: int, share: FileShare) -> None:
    """Take an advisory lock on *fd* matching *share*.

    ``NONE`` locks exclusively, ``READ`` takes a shared lock so other readers
    may coexist. Nothing is enforced where ``fcntl`` is unavailable.
    """
    if fcntl is None:
        return
    if share is FileShare.NONE:
        fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)
    elif share is FileShare.READ:
        fcntl.flock(fd, fcntl.LOCK_SH | fcntl.LOCK_NB)
