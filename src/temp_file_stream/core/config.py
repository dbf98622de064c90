"""Centralised configuration helpers."""

from __future__ import annotations

import os
import sys
import tempfile
from dataclasses import dataclass
from typing import Optional

DEFAULT_SUBFOLDER = "Temp-FileStreams"
ROOT_ENV_VAR = "TEMP_FILE_STREAM_ROOT"


@dataclass(frozen=True)
class TempFileStreamConfig:
    root_temp_folder: str


def default_temp_folder() -> str:
    """OS temp directory joined with the streams sub-folder."""
    return os.path.join(tempfile.gettempdir(), DEFAULT_SUBFOLDER)


def get_stream_config() -> TempFileStreamConfig:
    """Read ``TEMP_FILE_STREAM_ROOT``; fall back to :func:`default_temp_folder`."""
    root = os.getenv(ROOT_ENV_VAR)
    return TempFileStreamConfig(root_temp_folder=root or default_temp_folder())


def require_env(name: str, *, description: Optional[str] = None) -> str:
    """Return env var *name* or exit."""
    value = os.getenv(name)
    if not value:
        hint = f" ({description})" if description else ""
        print(f"Missing env: {name}{hint}")
        sys.exit(1)
    return value
