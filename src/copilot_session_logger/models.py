"""Data models for save requests, save results, and timestamp formatting."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Union


def local_now() -> datetime:
    """Get current local time (naive, wall-clock)."""
    return datetime.now()


def parse_saved_at(s: str) -> datetime:
    """Parse an ISO 8601 timestamp into local wall-clock time.

    A trailing ``Z`` is accepted. Values carrying an offset are converted
    to the local timezone; naive values are taken as already local.

    Raises:
        ValueError: If the string is not a valid ISO 8601 datetime.
        OverflowError: If the local-time conversion leaves the datetime range.
    """
    text = s.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    dt = datetime.fromisoformat(text)
    if dt.tzinfo is not None:
        dt = dt.astimezone().replace(tzinfo=None)
    return dt


def format_date_folder(dt: datetime) -> str:
    """Format date as DD-MM-YYYY."""
    return f"{dt.day:02d}-{dt.month:02d}-{dt.year:04d}"


def format_time_colon(dt: datetime) -> str:
    """Format time as HH:MM:SS for display."""
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


def format_time_dash(dt: datetime) -> str:
    """Format time as HH-MM-SS (filename safe)."""
    return f"{dt.hour:02d}-{dt.minute:02d}-{dt.second:02d}"


def format_time_dash_ms(dt: datetime) -> str:
    """Format time as HH-MM-SS-mmm."""
    return f"{format_time_dash(dt)}-{dt.microsecond // 1000:03d}"


@dataclass(frozen=True)
class SaveRequest:
    """Arguments of one save-copilot-session call."""
    transcript_markdown: Optional[str] = None
    saved_at: Optional[str] = None
    workspace_root: Optional[str] = None

    @classmethod
    def from_arguments(cls, arguments: Optional[Mapping[str, Any]]) -> "SaveRequest":
        """Build a request from a raw tool argument bag."""
        arguments = arguments or {}
        return cls(
            transcript_markdown=_optional_str(arguments.get("transcriptMarkdown")),
            saved_at=_optional_str(arguments.get("savedAt")),
            workspace_root=_optional_str(arguments.get("workspaceRoot")),
        )


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class SaveSuccess:
    """The transcript was written to ``path``."""
    path: str

    def to_content(self) -> dict[str, Any]:
        """Render as an MCP tool result payload."""
        return {
            "content": [{"type": "text", "text": self.path}],
            "isError": False,
        }


@dataclass(frozen=True)
class SaveFailure:
    """The call was rejected; ``message`` says why."""
    message: str

    def to_content(self) -> dict[str, Any]:
        """Render as an MCP tool result payload."""
        return {
            "content": [{"type": "text", "text": self.message}],
            "isError": True,
        }


SaveResult = Union[SaveSuccess, SaveFailure]


@dataclass(frozen=True)
class SessionLocation:
    """Where a session file goes, plus the time strings derived for it."""
    dir: str
    path: str
    date_folder: str
    time_dash_ms: str
    time_dash: str
    time_colon: str
