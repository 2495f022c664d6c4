"""Base classes and envelopes shared by all tools."""

from .response import ExecutionResult, PaginatedToolResponse, ToolResponse
from .base_tool import BaseTool, ClientProvider
from .single_tool import SingleTool
from .paginated_tool import PaginatedTool

__all__ = [
    "ExecutionResult",
    "PaginatedToolResponse",
    "ToolResponse",
    "BaseTool",
    "ClientProvider",
    "SingleTool",
    "PaginatedTool",
]
