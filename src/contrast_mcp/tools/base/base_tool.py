import uuid
from typing import Callable

from ...client import ContrastClient
from ...exceptions import ContrastAPIError, ResourceNotFoundError, UnauthorizedError
from ...logger import get_logger

logger = get_logger(__name__)

ClientProvider = Callable[[], ContrastClient]


class BaseTool:
    """
    Shared plumbing for all tools: access to the client and translation of
    client exceptions into user-facing messages.
    """

    def __init__(self, client_provider: ClientProvider, org_id: str):
        """
        Args:
            client_provider: Returns the shared client. Called on every execution, so
                the client can be created lazily on first use.
            org_id: Organization every request is scoped to.
        """
        self._client_provider = client_provider
        self.org_id = org_id

    @property
    def client(self) -> ContrastClient:
        return self._client_provider()

    @staticmethod
    def new_request_id() -> str:
        return uuid.uuid4().hex[:8]

    @staticmethod
    def map_http_error_code(code: int) -> str:
        if code == 401:
            return "Authentication failed or resource not found. Verify credentials and that the resource ID is correct."
        if code == 403:
            return "Access denied. User lacks permission for this resource."
        if code == 404:
            return "Resource not found."
        if code == 429:
            return "Rate limit exceeded. Retry later."
        if code in (500, 502, 503):
            return "Contrast API error. Try again later."
        return f"API error (HTTP {code})"

    def error_message(self, exc: Exception, request_id: str) -> str:
        """Translate an exception raised during execution into the message shown to the agent."""
        if isinstance(exc, UnauthorizedError):
            logger.warning("[%s] Request failed (%s): %s", request_id, type(exc).__name__, exc)
            return "Authentication failed. Check API credentials."
        if isinstance(exc, ResourceNotFoundError):
            logger.warning("[%s] Request failed (%s): %s", request_id, type(exc).__name__, exc)
            return f"Resource not found: {exc}"
        if isinstance(exc, ContrastAPIError):
            logger.warning("[%s] API error (HTTP %s): %s", request_id, exc.status_code, exc)
            if exc.status_code is None:
                return f"API error: {exc}"
            return self.map_http_error_code(exc.status_code)

        logger.error("[%s] Request failed unexpectedly: %s", request_id, exc, exc_info=True)
        return f"Internal error: {exc}"
