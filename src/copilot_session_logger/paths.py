"""Session file location from the save timestamp."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .models import (
    SessionLocation,
    format_date_folder,
    format_time_colon,
    format_time_dash,
    format_time_dash_ms,
)


def allocate_session_path(log_root: Path, timestamp: datetime) -> SessionLocation:
    """Compute (and create) the folder and file name for a save.

    Layout is ``<log_root>/<DD-MM-YYYY>/session_<HH-MM-SS-mmm>.md``. The
    date folder is created if missing. Two saves in the same millisecond
    get the same path; the later one overwrites.
    """
    date_folder = format_date_folder(timestamp)
    time_dash_ms = format_time_dash_ms(timestamp)

    out_dir = log_root / date_folder
    out_dir.mkdir(parents=True, exist_ok=True)

    return SessionLocation(
        dir=str(out_dir),
        path=str(out_dir / f"session_{time_dash_ms}.md"),
        date_folder=date_folder,
        time_dash_ms=time_dash_ms,
        time_dash=format_time_dash(timestamp),
        time_colon=format_time_colon(timestamp),
    )
