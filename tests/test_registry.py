import json
from typing import Annotated, List, Optional

import pytest
from pydantic import BaseModel, Field

from contrast_mcp.exceptions import ToolNotFoundError, ToolRegistrationError, ToolValidationError
from contrast_mcp.registry import ToolRegistry
from contrast_mcp.server import build_registry


def test_register_uses_docstring_and_name() -> None:
    registry = ToolRegistry()

    def lookup_app(app_id: Annotated[str, Field(description="Application ID")]) -> str:
        """Look up an application."""
        return app_id.upper()

    tool = registry.register(lookup_app)

    assert tool.name == "lookup_app"
    assert tool.description == "Look up an application."
    assert registry.get("lookup_app").func("a1") == "A1"
    assert tool.args_model.model_validate({"app_id": "a1"}).app_id == "a1"
    assert tool.input_schema["required"] == ["app_id"]
    assert tool.input_schema["properties"]["app_id"] == {"type": "string", "description": "Application ID"}


def test_optional_parameters_are_flattened() -> None:
    registry = ToolRegistry()

    def search(page: Annotated[Optional[int], Field(description="Page number")] = None) -> None:
        """Search."""

    schema = registry.register(search).input_schema

    assert "required" not in schema
    assert schema["properties"]["page"]["type"] == "integer"
    assert schema["properties"]["page"]["description"] == "Page number"
    assert schema["additionalProperties"] is False


def test_missing_docstring() -> None:
    registry = ToolRegistry()

    def no_doc(x: Annotated[int, Field(description="desc")]) -> None:
        pass

    with pytest.raises(ToolValidationError, match="missing docstring"):
        registry.register(no_doc)


def test_missing_param_description() -> None:
    registry = ToolRegistry()

    def bad_param(x: int) -> None:
        """Docstring."""

    with pytest.raises(ToolValidationError, match="missing a description"):
        registry.register(bad_param)


def test_duplicate_name() -> None:
    registry = ToolRegistry()

    def dup() -> None:
        """Once."""

    registry.register(dup)
    with pytest.raises(ToolRegistrationError, match="already registered"):
        registry.register(dup)


def test_get_with_overridden_name() -> None:
    registry = ToolRegistry()

    def temp() -> None:
        """Temporary."""

    registry.register(temp, name="renamed", description="Override")
    assert registry.get("renamed").description == "Override"

    with pytest.raises(ToolNotFoundError):
        registry.get("temp")
    with pytest.raises(ToolNotFoundError):
        registry.get("renamed")
    with pytest.raises(ToolNotFoundError):
        registry.unregister("renamed")


def test_nested_models_are_inlined() -> None:
    registry = ToolRegistry()

    class Label(BaseModel):
        label: str = Field(description="Metadata label")
        values: List[str] = Field(description="Accepted values")

    def filter_routes(labels: Annotated[List[Label], Field(description="Metadata filters")]) -> None:
        """Filter routes."""

    schema = registry.register(filter_routes).input_schema

    assert "$ref" not in json.dumps(schema)
    assert "$defs" not in schema
    assert schema["properties"]["labels"]["items"]["properties"]["label"]["type"] == "string"


def test_recursive_models_are_rejected() -> None:
    registry = ToolRegistry()

    class Node(BaseModel):
        name: str = Field(description="Node name")
        child: Optional["Node"] = Field(default=None, description="Child node")

    Node.model_rebuild()

    def walk(root: Annotated[Node, Field(description="Root node")]) -> None:
        """Walk a tree."""

    with pytest.raises(ToolValidationError, match="Recursive structure detected"):
        registry.register(walk)


def test_all_contrast_tools_register(settings, client_provider) -> None:
    registry = build_registry(settings, client_provider)

    assert set(registry.tools) == {
        "search_applications",
        "get_session_metadata",
        "list_application_libraries",
        "list_applications_by_cve",
        "get_route_coverage",
        "get_protect_rules",
        "get_scan_project",
        "get_scan_results",
    }
    for schema in registry.schemas:
        assert schema["description"]
        assert schema["inputSchema"]["type"] == "object"
        for prop in schema["inputSchema"]["properties"].values():
            assert prop["description"]
