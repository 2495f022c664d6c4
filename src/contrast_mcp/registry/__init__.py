"""Tool registration and argument schema generation."""

from .base import ToolRegistry
from .models import ToolDefinition
from .param_factory import FieldTuple, ToolParameterFactory
from .schema_validator import SchemaValidator

__all__ = ["ToolRegistry", "ToolDefinition", "FieldTuple", "ToolParameterFactory", "SchemaValidator"]
