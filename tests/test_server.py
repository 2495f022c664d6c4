import json
from unittest.mock import AsyncMock, MagicMock, patch

import mcp.types as types
import pytest

from contrast_mcp import server
from contrast_mcp.config import ContrastSettings
from contrast_mcp.exceptions import ToolNotFoundError, ToolValidationError
from contrast_mcp.server import LazyClient, build_registry, build_server, dispatch


async def test_list_tools_publishes_registry_schemas(settings, mock_client: MagicMock) -> None:
    mcp_server = build_server(settings, client=mock_client)

    handler = mcp_server.request_handlers[types.ListToolsRequest]
    result = await handler(types.ListToolsRequest(method="tools/list"))
    tools = result.root.tools

    assert len(tools) == 8
    coverage = next(tool for tool in tools if tool.name == "get_route_coverage")
    assert coverage.description.startswith("Retrieves route coverage data for an application.")

    registry = build_registry(settings, lambda: mock_client)
    published = next(schema for schema in registry.schemas if schema["name"] == "get_route_coverage")
    assert coverage.inputSchema == published["inputSchema"]
    assert coverage.inputSchema["additionalProperties"] is False
    assert "$defs" not in coverage.inputSchema


def test_dispatch_returns_validation_envelope(settings, client_provider, mock_client: MagicMock) -> None:
    registry = build_registry(settings, client_provider)

    envelope = json.loads(dispatch(registry, "get_protect_rules", {}))

    assert envelope["success"] is False
    assert envelope["data"] is None
    assert any("appId is required" in error for error in envelope["errors"])
    mock_client.get_protect_config.assert_not_called()


def test_dispatch_passes_validated_arguments(settings, client_provider, mock_client: MagicMock) -> None:
    registry = build_registry(settings, client_provider)
    mock_client.get_protect_config.return_value = None

    envelope = json.loads(dispatch(registry, "get_protect_rules", {"app_id": "app-1"}))

    mock_client.get_protect_config.assert_called_once_with(settings.org_id, "app-1")
    assert envelope["success"] is True
    assert envelope["found"] is False


def test_dispatch_rejects_mistyped_arguments(settings, client_provider) -> None:
    registry = build_registry(settings, client_provider)

    with pytest.raises(ToolValidationError, match="list_application_libraries"):
        dispatch(registry, "list_application_libraries", {"app_id": "a", "page": "first"})


def test_dispatch_unknown_tool(settings, client_provider) -> None:
    registry = build_registry(settings, client_provider)

    with pytest.raises(ToolNotFoundError):
        dispatch(registry, "delete_everything", {})


def test_lazy_client_is_created_once(settings) -> None:
    with patch.object(server, "ContrastClient") as client_cls:
        provider = LazyClient(settings)
        client_cls.assert_not_called()

        first = provider()
        second = provider()

        assert first is second
        client_cls.assert_called_once_with(settings, version=server.__version__)

        provider.close()
        first.close.assert_called_once()


def test_main_exits_on_missing_configuration() -> None:
    empty = ContrastSettings(_env_file=None, host_name=None, api_key=None, service_key=None, user_name=None, org_id=None)
    with patch.object(server, "ContrastSettings", return_value=empty), patch.object(server, "setup_logging"):
        with pytest.raises(SystemExit, match="CONTRAST_HOST_NAME"):
            server.main()


def test_main_exits_on_invalid_configuration(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONTRAST_TIMEOUT", "soon")

    with pytest.raises(SystemExit, match="Invalid Contrast configuration"):
        server.main()


def test_main_serves_over_stdio(settings) -> None:
    fake_server = MagicMock()
    with patch.object(server, "ContrastSettings", return_value=settings), patch.object(
        server, "setup_logging"
    ) as setup, patch.object(server, "build_server", return_value=fake_server) as build, patch.object(
        server, "serve", new=AsyncMock()
    ) as serve:
        server.main()

    setup.assert_called_once_with("INFO")
    build.assert_called_once_with(settings)
    serve.assert_awaited_once_with(fake_server)
