"""Text writer and reader layered over a temp stream."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from typing import List, Optional

from ..core import ErrorLogger, TempFileStream
from ..core.paths import Directory


@dataclass
class ReadWriteResult:
    path: str
    lines: List[str]
    existed_inside: bool
    exists_after: bool


def write_and_read(
    directory: Directory = None,
    logger: Optional[ErrorLogger] = None,
    line_count: int = 5,
    wait: bool = False,
) -> ReadWriteResult:
    """Write ``Test 0`` .. ``Test N-1`` as lines, rewind, read them back.

    With *wait* the function pauses on ENTER so the file can be inspected
    on disk before it is removed.
    """
    with TempFileStream(directory, logger=logger) as temp_file:
        path = temp_file.file_path

        writer = io.TextIOWrapper(temp_file, encoding="utf-8", newline="\n")
        for i in range(line_count):
            writer.write(f"Test {i}\n")
        # The writer buffers; flush it and let go of the stream without closing it
        writer.flush()
        writer.detach()

        print("Data has been written")
        print(f"Temp-File is at: {path}")
        if wait:
            input("Press ENTER to proceed")

        # Rewind before reading back what was written
        temp_file.position = 0

        reader = io.TextIOWrapper(temp_file, encoding="utf-8", newline="\n")
        lines = []
        for line in reader:
            lines.append(line.rstrip("\n"))
            print(lines[-1])
        reader.detach()

        existed_inside = os.path.exists(path)
        print(f"File exists before leaving the block: {existed_inside}")

    exists_after = os.path.exists(path)
    print(f"File exists after leaving the block: {exists_after}")
    return ReadWriteResult(path, lines, existed_inside, exists_after)
