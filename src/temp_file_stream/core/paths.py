"""Directory resolution and unique file naming for temporary streams."""

from __future__ import annotations

import os
import uuid
from typing import Callable, Optional, Union

from .config import TempFileStreamConfig, default_temp_folder

Directory = Union[str, "os.PathLike[str]", TempFileStreamConfig, None]


def resolve_directory(directory: Directory = None) -> str:
    """Return the absolute folder selected by *directory*.

    Accepts an explicit path, a :class:`TempFileStreamConfig`, or ``None``
    for the OS default temp folder.
    """
    if directory is None:
        path = default_temp_folder()
    elif isinstance(directory, TempFileStreamConfig):
        path = directory.root_temp_folder
    elif isinstance(directory, (str, os.PathLike)):
        path = os.fspath(directory)
    else:
        raise TypeError(
            f"directory must be a path, TempFileStreamConfig or None, not {type(directory).__name__}"
        )
    return os.path.abspath(path)


def ensure_directory(path: str) -> None:
    if not os.path.isdir(path):
        os.makedirs(path, exist_ok=True)


def unique_file_path(
    directory: str, name_factory: Optional[Callable[[], str]] = None
) -> str:
    """Join *directory* with fresh names until one does not exist yet.

    The existence check and the later open are not atomic: another process
    could create the same name in between. With UUID4 names this is not a
    practical concern.
    """
    make_name = name_factory or (lambda: str(uuid.uuid4()))
    while True:
        candidate = os.path.join(directory, make_name())
        if not os.path.exists(candidate):
            return candidate
