"""Open many temp streams side by side in one folder."""

from __future__ import annotations

from contextlib import ExitStack
from typing import List, Optional

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
)

from ..core import ErrorLogger, TempFileStream
from ..core.paths import Directory


def create_many(
    count: int,
    directory: Directory = None,
    logger: Optional[ErrorLogger] = None,
    payload: bytes = b"",
    show_progress: bool = True,
) -> List[str]:
    """Keep *count* streams open at once and return their paths.

    Every stream is closed (and its file deleted) before returning.
    """
    paths: List[str] = []
    with ExitStack() as stack, Progress(
        SpinnerColumn(),
        TextColumn("[bold]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        disable=not show_progress,
    ) as progress:
        task = progress.add_task("Streams", total=count)
        for _ in range(count):
            stream = stack.enter_context(TempFileStream(directory, logger=logger))
            if payload:
                stream.write(payload)
                stream.flush()
            paths.append(stream.file_path)
            progress.advance(task)

        if show_progress:
            progress.console.print(
                f"  [green]✓[/green] {len(set(paths))} distinct files open"
            )
    return paths
