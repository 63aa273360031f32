"""
Common test fixtures and configuration.
"""

import pytest

from fastapi.testclient import TestClient
from fastmcp import Client

from stacklet.help.server import make_server
from stacklet.help.topics.store import TopicStore
from stacklet.help.web import make_app

from .testing.settings import default_settings, override_setting
from .testing.topics import ContentRoot, content_root


# add imported fixtures to __all__ so they're considered in use in the module
__all__ = ["default_settings", "override_setting", "content_root"]


@pytest.fixture
def store(content_root: ContentRoot) -> TopicStore:
    """A topic store reading from the test content root."""
    return TopicStore(content_root.path)


@pytest.fixture
def web_client(default_settings, content_root):
    """A client for the help site."""
    with TestClient(make_app(default_settings)) as client:
        yield client


@pytest.fixture
async def mcp_client(content_root):
    """A client for the MCP server."""
    async with Client(make_server()) as client:
        yield client
