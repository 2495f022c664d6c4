"""Export the exception hierarchy used across configuration, registration and vendor calls."""

from .exceptions import (
    ContrastMCPError,
    ConfigurationError,
    ToolRegistrationError,
    ToolNotFoundError,
    ToolValidationError,
    ContrastAPIError,
    UnauthorizedError,
    ResourceNotFoundError,
)

__all__ = [
    "ContrastMCPError",
    "ConfigurationError",
    "ToolRegistrationError",
    "ToolNotFoundError",
    "ToolValidationError",
    "ContrastAPIError",
    "UnauthorizedError",
    "ResourceNotFoundError",
]
