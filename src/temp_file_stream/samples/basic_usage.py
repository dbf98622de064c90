"""Smallest useful example: write a few bytes, leave the block, file is gone."""

from __future__ import annotations

import os
from typing import Optional

from ..core import ErrorLogger, TempFileStream
from ..core.paths import Directory


async def write_temp_file(
    directory: Directory = None, logger: Optional[ErrorLogger] = None
) -> str:
    """Write ``"Test"`` into a temp stream and return the path it used."""
    async with TempFileStream(directory, logger=logger) as temp_file:
        await temp_file.awrite("Test".encode("utf-8"))

        # Flush forces the write down to the OS
        await temp_file.aflush()

        path = temp_file.file_path
        print(f"Temp-File exists inside the block: {os.path.exists(path)}")

    print(f"Temp-File exists after the block: {os.path.exists(path)}")
    return path
