"""Core save engine - turns a save request into a session file."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from .config import LoggerConfig
from .fileio import atomic_write
from .models import (
    SaveFailure,
    SaveRequest,
    SaveResult,
    SaveSuccess,
    local_now,
    parse_saved_at,
)
from .paths import allocate_session_path
from .templates import load_template, render_template

logger = logging.getLogger(__name__)


class SessionLoggerError(Exception):
    """Base exception for rejected save calls."""
    pass


class InvalidTimestampError(SessionLoggerError):
    """Raised when savedAt is not an ISO 8601 datetime."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            "Invalid 'savedAt' value. Expected an ISO-8601 datetime string."
        )


class MissingTranscriptError(SessionLoggerError):
    """Raised when the caller did not pass any transcript text."""

    def __init__(self):
        super().__init__(
            "No transcript provided. This tool expects Copilot to pass the full "
            "conversation Markdown as 'transcriptMarkdown' when invoking "
            "save-copilot-session."
        )


class UnknownToolError(SessionLoggerError):
    """Raised when a call names a tool this server does not provide."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class SessionLogger:
    """Saves chat transcripts under ``<workspace>/copilot-session_log``."""

    def __init__(self, config: LoggerConfig):
        self.config = config

    def save_session(self, request: SaveRequest, now: Optional[datetime] = None) -> SaveResult:
        """Validate a request and write the session file.

        Usage errors come back as SaveFailure. Filesystem errors propagate.
        """
        try:
            path = self._save(request, now)
        except SessionLoggerError as e:
            logger.warning("Rejected save: %s", e)
            return SaveFailure(str(e))

        logger.info("Saved session to %s", path)
        return SaveSuccess(path)

    def _save(self, request: SaveRequest, now: Optional[datetime]) -> str:
        workspace_root = self.config.resolve_workspace_root(request.workspace_root)

        if request.saved_at:
            try:
                saved_at = parse_saved_at(request.saved_at)
            except (ValueError, OverflowError):
                raise InvalidTimestampError(request.saved_at) from None
        else:
            saved_at = now or local_now()

        transcript = (request.transcript_markdown or "").strip()
        if not transcript:
            raise MissingTranscriptError()

        log_root = self.config.get_log_root(workspace_root)
        template = load_template(log_root, self.config.template_name)
        location = allocate_session_path(log_root, saved_at)

        rendered = render_template(template, {
            "{{DATE}}": location.date_folder,
            "{{TIME_COLON}}": location.time_colon,
            "{{TIME_DASH}}": location.time_dash,
            "{{TIME_DASH_MS}}": location.time_dash_ms,
            "{{WORKSPACE_ROOT}}": str(workspace_root),
            "{{PROJECT_NAME}}": workspace_root.name,
            "{{OS}}": sys.platform,
            "{{MODEL}}": self.config.model_name,
            "{{TRANSCRIPT}}": transcript,
        })

        with atomic_write(Path(location.path)) as f:
            f.write(rendered)

        return location.path
