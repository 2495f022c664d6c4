"""MCP server exposing Contrast application-security data as agent tools."""

__version__ = "0.3.0"

from .config import ContrastSettings
from .client import ContrastClient
from .exceptions import (
    ConfigurationError,
    ContrastAPIError,
    ContrastMCPError,
    ResourceNotFoundError,
    ToolNotFoundError,
    ToolRegistrationError,
    ToolValidationError,
    UnauthorizedError,
)
from .logger import get_logger, setup_logging
from .registry import ToolRegistry

__all__ = [
    "__version__",
    "ContrastSettings",
    "ContrastClient",
    "ConfigurationError",
    "ContrastAPIError",
    "ContrastMCPError",
    "ResourceNotFoundError",
    "ToolNotFoundError",
    "ToolRegistrationError",
    "ToolValidationError",
    "UnauthorizedError",
    "get_logger",
    "setup_logging",
    "ToolRegistry",
]
