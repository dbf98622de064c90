"""temp_file_stream.core: the temporary file stream and its collaborators."""

from .config import (
    DEFAULT_SUBFOLDER,
    ROOT_ENV_VAR,
    TempFileStreamConfig,
    default_temp_folder,
    get_stream_config,
    require_env,
)
from .logger import ErrorLogger, NullLogger, get_logger, setup_logging
from .modes import FileAccess, FileMode, FileShare
from .tempfiles import TempFileStream

__all__ = [
    "TempFileStream",
    "TempFileStreamConfig",
    "DEFAULT_SUBFOLDER",
    "ROOT_ENV_VAR",
    "default_temp_folder",
    "get_stream_config",
    "require_env",
    "FileMode",
    "FileAccess",
    "FileShare",
    "ErrorLogger",
    "NullLogger",
    "get_logger",
    "setup_logging",
]
