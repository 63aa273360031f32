# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from itertools import chain
from typing import Any, Callable

from fastmcp import FastMCP
from fastmcp.tools import Tool

from . import __version__
from .lifespan import lifespan
from .topics.tools import tools as topic_tools
from .utils.resources import get_file_text


def make_server() -> FastMCP:
    """Create an MCP server for the help knowledge base."""
    tool_sets = [
        topic_tools,
    ]
    tools: list[Tool | Callable[..., Any]] = list(chain(*(tool_set() for tool_set in tool_sets)))

    return FastMCP(
        name="Stacklet Help",
        version=__version__,
        instructions=get_file_text("mcp_info.md"),
        tools=tools,
        lifespan=lifespan,
    )
