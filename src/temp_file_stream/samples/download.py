"""Spool an HTTP download into a temp stream before processing it."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Optional

import requests

from ..core import ErrorLogger, TempFileStream, get_logger
from ..core.paths import Directory

log = get_logger("samples.download")


@dataclass
class SpoolResult:
    url: str
    path: str
    size: int
    sha1: str


def spool_url(
    url: str,
    directory: Directory = None,
    logger: Optional[ErrorLogger] = None,
    chunk_size: int = 64 * 1024,
    timeout: float = 30.0,
) -> SpoolResult:
    """Download *url* into a temp stream and checksum what landed on disk.

    The checksum is computed by reading the spooled file back, so it
    reflects the stored bytes rather than what came over the wire.

    Raises:
        requests.RequestException: If the request fails
    """
    with TempFileStream(directory, logger=logger) as temp_file:
        log.info("Spooling %s into %s", url, temp_file.file_path)
        with requests.get(url, stream=True, timeout=timeout) as response:
            response.raise_for_status()
            for chunk in response.iter_content(chunk_size=chunk_size):
                if chunk:
                    temp_file.write(chunk)
        temp_file.flush()

        temp_file.position = 0
        sha1_hash = hashlib.sha1()
        for chunk in iter(lambda: temp_file.read(chunk_size), b""):
            sha1_hash.update(chunk)

        return SpoolResult(
            url=url,
            path=temp_file.file_path,
            size=temp_file.length,
            sha1=sha1_hash.hexdigest(),
        )
