"""MCP server implementation."""

import asyncio
import logging
from typing import Any, Optional, Union

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from . import __version__
from .config import ServerConfig, configure_logging, load_config
from .filesystem import FileSystem
from .handlers import DeveloperTools
from .registry import Dispatcher, ToolRequest, build_registry
from .shell import ShellExecutor

logger = logging.getLogger(__name__)

CallToolResponse = Union[list[TextContent], tuple[list[TextContent], dict[str, Any]]]


class DeveloperServer:
    def __init__(self, config: ServerConfig, tools: Optional[DeveloperTools] = None) -> None:
        self.config = config
        self.server: Server = Server(
            name=config.server_name,
            version=__version__,
            instructions=(
                "Developer tools for the local workspace: create and read files, search code, "
                "run shell commands behind a denylist, and scaffold components and projects."
            ),
        )

        # Initialize components
        if tools is None:
            tools = DeveloperTools(
                filesystem=FileSystem(base_dir=config.workdir),
                shell=ShellExecutor(working_dir=config.workdir),
            )
        self.tools = tools
        self.registry = build_registry(self.tools)
        self.dispatcher = Dispatcher(self.registry)
        # One request runs to completion before the next starts
        self._dispatch_lock = asyncio.Lock()

        # Register handlers
        self._register_handlers()

    def _register_handlers(self) -> None:
        """Registers MCP handlers after self.server is created."""

        # Arguments are validated by the dispatcher against each tool's input model
        @self.server.call_tool(validate_input=False)  # type: ignore[misc]
        async def _dispatch_tool_call(
            tool_name: str,
            arguments: dict[str, Any],
        ) -> CallToolResponse:
            return await self.call_tool_impl(tool_name, arguments)

        @self.server.list_tools()  # type: ignore[misc]
        async def list_tools_handler() -> list[Tool]:
            return await self.list_tools_impl()

    async def call_tool_impl(self, tool_name: str, arguments: Optional[dict[str, Any]]) -> CallToolResponse:
        """Dispatch a tool call. Follow-ups travel as structured content next to the text."""
        async with self._dispatch_lock:
            result = await self.dispatcher.dispatch(ToolRequest(tool_name, arguments or {}))

        if result.suggested_follow_ups:
            structured = {
                "suggested_follow_ups": [f.model_dump() for f in result.suggested_follow_ups]
            }
            return result.content, structured
        return result.content

    async def list_tools_impl(self) -> list[Tool]:
        """The tool catalog, with input schemas generated from the pydantic models."""
        return [
            Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.argument_schema,
            )
            for descriptor in self.registry.descriptors()
        ]

    async def run(self) -> None:
        """Run the server using stdio."""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


async def main(config: Optional[ServerConfig] = None) -> None:
    config = config or load_config()
    server = DeveloperServer(config)
    logger.info("Developer MCP server running on stdio (workdir: %s)", config.workdir)
    await server.run()


def cli() -> None:
    """Console entry point."""
    config = load_config()
    configure_logging(config.log_level)
    try:
        asyncio.run(main(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    cli()
