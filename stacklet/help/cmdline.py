# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    CliApp,
    CliSubCommand,
)

from .server import make_server
from .settings import SETTINGS
from .topics.index import build_index
from .topics.pagination import filter_to_tags
from .topics.store import TopicStore
from .web import run_server


class ServeCommand(BaseModel):
    """Serve the help site over HTTP"""

    host: str | None = Field(default=None, description="address to bind to")
    port: int | None = Field(default=None, description="port to listen on")

    def cli_cmd(self) -> None:
        settings = SETTINGS.model_copy(
            update=self.model_dump(exclude_none=True),
        )
        run_server(settings)


class MCPCommand(BaseModel):
    """Run the MCP server"""

    def cli_cmd(self) -> None:
        mcp = make_server()
        mcp.run(show_banner=False)


class IndexCommand(BaseModel):
    """List the topics in the help index"""

    tagged: list[str] = Field(default_factory=list, description="only list topics with these tags")

    def cli_cmd(self) -> None:
        index = build_index(TopicStore.from_settings(SETTINGS))
        for topic in filter_to_tags(index, self.tagged):
            tags = ", ".join(topic.tags)
            print(f"{topic.name}\t{topic.title}\t[{tags}]")


class CLIArguments(
    BaseSettings, cli_parse_args=True, cli_kebab_case=True, cli_use_class_docs_for_groups=True
):
    """Command line arguments."""

    serve: CliSubCommand[ServeCommand]
    mcp: CliSubCommand[MCPCommand]
    index: CliSubCommand[IndexCommand]

    def cli_cmd(self) -> None:
        if not self.model_dump(exclude_none=True):
            # no option was provided, serve by default
            ServeCommand().cli_cmd()
        else:
            CliApp.run_subcommand(self)
