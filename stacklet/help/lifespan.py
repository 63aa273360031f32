# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Self, cast

from fastmcp import Context, FastMCP
from fastmcp.utilities.logging import get_logger
from mcp.server.lowlevel.server import LifespanResultT

from .settings import SETTINGS, Settings
from .topics.index import IndexCache
from .topics.store import TopicStore


@dataclass
class HelpState:
    """Topic store and index cache shared by all tool calls of a server."""

    store: TopicStore
    index: IndexCache

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        store = TopicStore.from_settings(settings)
        return cls(store=store, index=IndexCache.for_store(store))


@asynccontextmanager
async def lifespan(server: FastMCP[LifespanResultT]) -> AsyncIterator[HelpState]:
    """Server lifespan context manager."""
    logger = get_logger("stacklet.help")
    logger.info(f"Server settings: {SETTINGS.model_dump()}")
    yield HelpState.from_settings(SETTINGS)


def help_state(ctx: Context) -> HelpState:
    """The state set up by `lifespan` for the server handling a tool call."""
    return cast(HelpState, ctx.request_context.lifespan_context)
