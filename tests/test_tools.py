"""Tests for MCP tool definitions and execution."""

from pathlib import Path

import pytest

from copilot_session_logger.models import SaveFailure, SaveSuccess
from copilot_session_logger.tools import TOOL_NAME, execute_tool, make_tools


class TestMakeTools:
    """Tests for make_tools function."""

    def test_single_tool(self):
        """Exactly one tool is advertised."""
        tools = make_tools()

        assert list(tools) == ["save-copilot-session"]
        assert TOOL_NAME == "save-copilot-session"

    def test_tool_definition_shape(self):
        """Definition has name, description, and an object schema."""
        tool = make_tools()[TOOL_NAME]

        assert tool["name"] == TOOL_NAME
        assert "transcriptMarkdown" in tool["description"]
        assert tool["inputSchema"]["type"] == "object"

    def test_schema_properties(self):
        """Schema lists the three optional string fields."""
        schema = make_tools()[TOOL_NAME]["inputSchema"]

        assert set(schema["properties"]) == {"transcriptMarkdown", "savedAt", "workspaceRoot"}
        for prop in schema["properties"].values():
            assert prop["type"] == "string"
            assert prop["description"]

    def test_no_required_fields(self):
        """Nothing is required at the schema level."""
        schema = make_tools()[TOOL_NAME]["inputSchema"]

        assert schema["required"] == []


class TestExecuteTool:
    """Tests for execute_tool dispatch."""

    def test_unknown_tool(self, session_logger, temp_workspace):
        """Unknown names fail without side effects."""
        result = execute_tool(session_logger, "delete-session", {"transcriptMarkdown": "x"})

        assert result == SaveFailure("Unknown tool: delete-session")
        assert list(temp_workspace.iterdir()) == []

    def test_save(self, session_logger, log_root):
        """Known name with a transcript saves a file."""
        result = execute_tool(session_logger, TOOL_NAME, {
            "transcriptMarkdown": "hello",
            "savedAt": "2024-03-05T09:07:02.004",
        })

        assert isinstance(result, SaveSuccess)
        assert result.path == str(log_root / "05-03-2024" / "session_09-07-02-004.md")
        assert Path(result.path).exists()

    def test_none_arguments(self, session_logger):
        """Missing argument bag is a missing transcript."""
        result = execute_tool(session_logger, TOOL_NAME, None)

        assert isinstance(result, SaveFailure)
        assert "No transcript provided" in result.message

    def test_invalid_saved_at(self, session_logger):
        """Bad timestamp is reported, not raised."""
        result = execute_tool(session_logger, TOOL_NAME, {
            "transcriptMarkdown": "hello",
            "savedAt": "not-a-date",
        })

        assert isinstance(result, SaveFailure)
        assert "ISO-8601" in result.message

    def test_workspace_root_argument(self, session_logger, temp_workspace):
        """workspaceRoot argument redirects the save."""
        other = temp_workspace / "elsewhere"

        result = execute_tool(session_logger, TOOL_NAME, {
            "transcriptMarkdown": "hello",
            "workspaceRoot": str(other),
        })

        assert Path(result.path).is_relative_to(other)

    def test_filesystem_error_propagates(self, session_logger, temp_workspace):
        """Environment errors are not converted to SaveFailure."""
        (temp_workspace / "copilot-session_log").write_text("blocker")

        with pytest.raises(OSError):
            execute_tool(session_logger, TOOL_NAME, {"transcriptMarkdown": "hello"})
