"""File writing helpers."""

from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, TextIO


@contextmanager
def atomic_write(path: Path, encoding: str = "utf-8") -> Generator[TextIO, None, None]:
    """Write a text file atomically.

    Parent directories are created first. Content goes to a temporary
    sibling which is renamed over the target on success, so readers never
    see a half-written file.

    Args:
        path: Target file path
        encoding: Text encoding

    Yields:
        File handle for writing
    """
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            yield f

        os.replace(tmp_path, path)

    except BaseException:
        if tmp_path.exists():
            tmp_path.unlink()
        raise
