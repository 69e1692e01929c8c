"""MCP tool definitions wrapping the session logger."""

from __future__ import annotations

from typing import Any, Optional

from .engine import SessionLogger, UnknownToolError
from .models import SaveFailure, SaveRequest, SaveResult


TOOL_NAME = "save-copilot-session"


def make_tools() -> dict[str, dict]:
    """Create MCP tool definitions.

    Returns:
        Dict mapping tool names to their definitions.
    """

    tools = {}

    # ========== save-copilot-session ==========
    tools[TOOL_NAME] = {
        "name": TOOL_NAME,
        "description": (
            "Saves the current Copilot chat session to "
            "copilot-session_log/{dd-MM-yyyy}/session_{HH-mm-ss-SSS}.md "
            "(milliseconds included) using copilot-session_log/_TEMPLATE.md. "
            "IMPORTANT: when invoking, include the full chat transcript as "
            "Markdown in transcriptMarkdown."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "transcriptMarkdown": {
                    "type": "string",
                    "description": (
                        "Full conversation transcript in Markdown. The client "
                        "(Copilot) should populate this automatically when you "
                        "run the command."
                    ),
                },
                "savedAt": {
                    "type": "string",
                    "description": (
                        "Optional ISO-8601 datetime string. If omitted, local "
                        "current time is used."
                    ),
                },
                "workspaceRoot": {
                    "type": "string",
                    "description": (
                        "Optional override for workspace root path. Normally "
                        "passed via server --workspaceRoot."
                    ),
                },
            },
            "required": [],
        },
    }

    return tools


def execute_tool(
    session_logger: SessionLogger,
    name: str,
    arguments: Optional[dict[str, Any]],
) -> SaveResult:
    """Execute a tool call and return its result.

    Args:
        session_logger: SessionLogger instance
        name: Tool name
        arguments: Tool arguments

    Returns:
        SaveSuccess with the written path, or SaveFailure for usage errors.
        Filesystem errors are not caught here.
    """
    if name != TOOL_NAME:
        return SaveFailure(str(UnknownToolError(name)))

    return session_logger.save_session(SaveRequest.from_arguments(arguments))
