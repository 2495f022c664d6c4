"""Registry of the tools exposed over MCP."""

import inspect
from typing import Any, Callable, Dict, List, Optional, cast

import jsonref  # type: ignore
from pydantic import create_model

from .models import ToolDefinition
from .param_factory import ToolParameterFactory
from .schema_validator import SchemaValidator
from ..exceptions import ToolNotFoundError, ToolRegistrationError, ToolValidationError
from ..logger import get_logger

logger = get_logger(__name__)


class ToolRegistry:
    """
    Central registry of tool definitions.

    Tools are registered from callables. Registration enforces the conventions agents
    depend on: a docstring (the tool description) and a `Field(description=...)` on
    every parameter. Violations raise at startup rather than producing a tool the
    agent cannot use correctly.
    """

    def __init__(self) -> None:
        self.tools: Dict[str, ToolDefinition] = {}

    def register(self, func: Callable[..., Any], name: Optional[str] = None, description: Optional[str] = None) -> ToolDefinition:
        """Register a callable as a tool.

        Args:
            func: The implementation; usually a bound tool method.
            name: Tool name. Defaults to the function name.
            description: Overrides the docstring as the tool description.

        Returns:
            The generated definition.

        Raises:
            ToolRegistrationError: If a tool with the same name is already registered.
            ToolValidationError: If the docstring or a parameter description is missing.
        """
        tool = self._generate_tool_definition(func, name=name, description=description)

        if tool.name in self.tools:
            msg = f"Tool '{tool.name}' is already registered."
            logger.error(msg)
            raise ToolRegistrationError(msg)

        self.tools[tool.name] = tool
        logger.info("Successfully registered tool: '%s'", tool.name)
        return tool

    def get(self, tool_name: str) -> ToolDefinition:
        """Look up a registered tool by name.

        Raises:
            ToolNotFoundError: If the tool does not exist in the registry.
        """
        try:
            return self.tools[tool_name]
        except KeyError:
            raise ToolNotFoundError(f"Tool '{tool_name}' not found in the registry.") from None

    @property
    def schemas(self) -> List[Dict[str, Any]]:
        """Name, description and input schema of every tool, in registration order, as published over MCP."""
        return [
            {"name": tool.name, "description": tool.description, "inputSchema": tool.input_schema}
            for tool in self.tools.values()
        ]

    def _generate_tool_definition(
        self, func: Callable[..., Any], name: Optional[str] = None, description: Optional[str] = None
    ) -> ToolDefinition:
        tool_name = name or func.__name__
        if description is None:
            description = self._get_docstring_from_func(func, tool_name)

        fields = self._build_fields(inspect.signature(func), tool_name)
        args_model = create_model(f"{tool_name}_args", **cast(Dict[str, Any], fields))
        raw_schema = args_model.model_json_schema()

        SchemaValidator.assert_no_recursive_refs(raw_schema)
        # proxies=False returns plain dicts instead of JsonRef objects
        resolved = jsonref.replace_refs(raw_schema, proxies=False)
        input_schema = SchemaValidator.sanitize_schema(resolved)

        return ToolDefinition(
            name=tool_name, description=description, func=func, input_schema=input_schema, args_model=args_model
        )

    @staticmethod
    def _get_docstring_from_func(func: Callable[..., Any], tool_name: str) -> str:
        doc = inspect.getdoc(func)
        if not doc:
            msg = f"Tool '{tool_name}' missing docstring. Agents need a description of what the tool does."
            logger.error(msg)
            raise ToolValidationError(msg)
        return doc

    @staticmethod
    def _build_fields(signature: inspect.Signature, tool_name: str) -> Dict[str, Any]:
        fields: Dict[str, Any] = {}
        for param_name, param in signature.parameters.items():
            if param_name == "self":
                continue
            ft = ToolParameterFactory.build_field_tuple(param_name=param_name, param=param, tool_name=tool_name)
            fields[param_name] = (ft.annotation, ft.field)
        return fields
