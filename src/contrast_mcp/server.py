"""MCP server exposing the Contrast tools over stdio."""

import asyncio
import threading
from typing import Any, Callable, Dict, List, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool
from pydantic import ValidationError

from . import __version__
from .client import ContrastClient
from .config import ContrastSettings
from .exceptions import ConfigurationError, ToolValidationError
from .logger import get_logger, setup_logging
from .registry import ToolRegistry
from .tools import (
    GetProtectRulesTool,
    GetRouteCoverageTool,
    GetSastProjectTool,
    GetSastResultsTool,
    GetSessionMetadataTool,
    ListApplicationLibrariesTool,
    ListApplicationsByCveTool,
    SearchApplicationsTool,
)

logger = get_logger(__name__)

SERVER_NAME = "contrast-mcp"


class LazyClient:
    """Creates the shared ContrastClient on first use; thread-safe."""

    def __init__(self, settings: ContrastSettings):
        self._settings = settings
        self._client: Optional[ContrastClient] = None
        self._lock = threading.Lock()

    def __call__(self) -> ContrastClient:
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = ContrastClient(self._settings, version=__version__)
        return self._client

    def close(self) -> None:
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None


def build_registry(settings: ContrastSettings, client_provider: Callable[[], ContrastClient]) -> ToolRegistry:
    """Instantiate every tool and register its entry point.

    Raises:
        ToolValidationError: If a tool method lacks a docstring or parameter descriptions.
    """
    org_id = settings.org_id or ""
    registry = ToolRegistry()

    protect = GetProtectRulesTool(client_provider, org_id)
    scan_project = GetSastProjectTool(client_provider, org_id)
    scan_results = GetSastResultsTool(client_provider, org_id)
    cve = ListApplicationsByCveTool(client_provider, org_id)
    libraries = ListApplicationLibrariesTool(client_provider, org_id)
    coverage = GetRouteCoverageTool(client_provider, org_id)
    session_metadata = GetSessionMetadataTool(client_provider, org_id)
    applications = SearchApplicationsTool(client_provider, org_id)

    entry_points: List[Callable] = [
        applications.search_applications,
        session_metadata.get_session_metadata,
        libraries.list_application_libraries,
        cve.list_applications_by_cve,
        coverage.get_route_coverage,
        protect.get_protect_rules,
        scan_project.get_scan_project,
        scan_results.get_scan_results,
    ]
    for func in entry_points:
        registry.register(func)
    return registry


def dispatch(registry: ToolRegistry, name: str, arguments: Optional[Dict[str, Any]]) -> str:
    """Validate arguments against the tool's args model, run it and serialize the envelope.

    Raises:
        ToolNotFoundError: If no tool with that name is registered.
        ToolValidationError: If the arguments do not match the tool's signature.
    """
    tool = registry.get(name)
    try:
        args = tool.args_model.model_validate(arguments or {})
    except ValidationError as e:
        raise ToolValidationError(f"Invalid arguments for tool '{name}': {e}") from e

    response = tool.func(**{field: getattr(args, field) for field in tool.args_model.model_fields})
    return response.model_dump_json(indent=2)


def build_server(settings: ContrastSettings, client: Optional[ContrastClient] = None) -> Server:
    """Create the MCP server publishing the registry's tool schemas.

    Args:
        settings: Connection settings.
        client: Optional pre-built client; by default one is created on the first tool call.

    Returns:
        The configured, not yet running, server.
    """
    provider: Callable[[], ContrastClient] = (lambda: client) if client is not None else LazyClient(settings)
    registry = build_registry(settings, provider)

    server: Server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return [Tool(**schema) for schema in registry.schemas]

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        return [TextContent(type="text", text=dispatch(registry, name, arguments))]

    logger.info("Registered %d tools on MCP server '%s'", len(registry.tools), SERVER_NAME)
    return server


async def serve(server: Server) -> None:
    """Run the server over stdio until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    """Console entry point: read configuration from the environment and serve over stdio."""
    try:
        settings = ContrastSettings()
    except ValidationError as e:
        raise SystemExit(f"Invalid Contrast configuration: {e}") from e
    setup_logging(settings.log_level)
    try:
        settings.validate_required()
    except ConfigurationError as e:
        raise SystemExit(str(e)) from e

    logger.info("Starting %s %s for %s", SERVER_NAME, __version__, settings.base_url)
    asyncio.run(serve(build_server(settings)))


if __name__ == "__main__":
    main()
