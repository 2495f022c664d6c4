"""
Custom exception classes for the Contrast MCP server.

Registration and configuration errors are raised at startup and are meant to
stop the process. Vendor API errors are raised by the client and converted into
error envelopes by the tool pipelines, so they never reach the agent host.
"""

from typing import Optional


class ContrastMCPError(Exception):
    """Base exception for all server errors."""

    pass


class ConfigurationError(ContrastMCPError):
    """Raised when required configuration is missing or malformed."""

    pass


class ToolRegistrationError(ContrastMCPError):
    """Raised when there is an error registering a tool."""

    pass


class ToolNotFoundError(ContrastMCPError):
    """Raised when a requested tool is not found in the registry."""

    pass


class ToolValidationError(ContrastMCPError):
    """Raised when a tool definition is invalid (missing docstring or parameter descriptions)."""

    pass


class ContrastAPIError(ContrastMCPError):
    """Raised when the Contrast API answers with a non-success HTTP status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class UnauthorizedError(ContrastAPIError):
    """Raised when the Contrast API rejects the configured credentials."""

    pass


class ResourceNotFoundError(ContrastAPIError):
    """Raised when the Contrast API reports that a resource does not exist."""

    pass
