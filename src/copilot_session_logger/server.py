"""Copilot Session Logger MCP server - main entry point."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from .config import LoggerConfig, load_config
from .engine import SessionLogger
from .tools import execute_tool, make_tools

logger = logging.getLogger(__name__)


def create_server(config: LoggerConfig) -> Server:
    """Create and configure the MCP server.

    Args:
        config: Startup configuration

    Returns:
        Configured MCP Server instance
    """
    server = Server(config.server_name, version=config.server_version)
    session_logger = SessionLogger(config)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """Return list of available tools."""
        return tool_list()

    @server.call_tool()
    async def call_tool(name: str, arguments: Optional[dict[str, Any]]) -> CallToolResult:
        """Handle tool invocation."""
        return await handle_call_tool(session_logger, name, arguments)

    return server


def tool_list() -> list[Tool]:
    """Tool descriptors in MCP form."""
    return [
        Tool(
            name=t["name"],
            description=t["description"],
            inputSchema=t["inputSchema"],
        )
        for t in make_tools().values()
    ]


async def handle_call_tool(
    session_logger: SessionLogger,
    name: str,
    arguments: Optional[dict[str, Any]],
) -> CallToolResult:
    """Run one tool call and wrap the outcome for the transport.

    Filesystem errors escape; the MCP server turns them into an error
    result for that call and keeps serving.
    """
    result = execute_tool(session_logger, name, arguments)
    return CallToolResult.model_validate(result.to_content())


async def run_server(config: LoggerConfig) -> None:
    """Run the MCP server with stdio transport."""
    server = create_server(config)

    async with stdio_server() as (read_stream, write_stream):  # pragma: no cover
        await server.run(  # pragma: no cover
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse startup flags.

    Unrecognised arguments are ignored, since MCP hosts sometimes pass
    their own. A ``--workspaceRoot`` with no value means no override; a
    value starting with ``-`` must be given as ``--workspaceRoot=<value>``.
    """
    parser = argparse.ArgumentParser(
        prog="copilot-session-logger",
        description="MCP server that saves Copilot chat sessions as Markdown files",
    )
    parser.add_argument(
        "--workspaceRoot",
        dest="workspace_root",
        nargs="?",
        default=None,
        help="Workspace root for copilot-session_log/ (default: current directory)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="Path to config file (default: auto-detect in workspace root)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for stderr output (default: WARNING)",
    )

    args, _unknown = parser.parse_known_args(argv)
    if not args.workspace_root:
        args.workspace_root = None
    return args


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr; stdout carries the MCP protocol."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s %(name)s - %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point."""
    args = parse_cli_args(argv)
    configure_logging(args.log_level)

    workspace_root = Path(args.workspace_root) if args.workspace_root else None

    try:
        config = load_config(args.config, workspace_root)
        logger.info("Starting %s (workspace root: %s)", config.server_name,
                    workspace_root or "<cwd>")
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        return
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
