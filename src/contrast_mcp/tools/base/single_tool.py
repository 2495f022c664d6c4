import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, Optional, TypeVar

from .base_tool import BaseTool
from .response import ToolResponse
from ..params import ToolParams
from ...logger import get_logger

logger = get_logger(__name__)

P = TypeVar("P", bound=ToolParams)

NOT_FOUND_MESSAGE = "Resource not found"


class SingleTool(BaseTool, ABC, Generic[P]):
    """
    Base for tools returning one item.

    `execute_pipeline` runs three stages: parse and validate the params, call
    `do_execute`, and wrap the outcome in a ToolResponse. Invalid params short-circuit
    before any API call. A `None` result becomes a not-found response. Exceptions are
    converted into error responses and never propagate.
    """

    def execute_pipeline(self, params_factory: Callable[[], P]) -> ToolResponse:
        request_id = self.new_request_id()
        start = time.monotonic()

        params = params_factory()
        if not params.is_valid():
            logger.debug("[%s] Validation failed: %s", request_id, ", ".join(params.errors))
            return ToolResponse.error(list(params.errors))

        warnings: List[str] = list(params.warnings)
        try:
            result = self.do_execute(params, warnings)
        except Exception as e:
            return ToolResponse.error(self.error_message(e, request_id), warnings)

        duration_ms = int((time.monotonic() - start) * 1000)
        if result is None:
            logger.debug("[%s] Resource not found (%d ms)", request_id, duration_ms)
            return ToolResponse.not_found(NOT_FOUND_MESSAGE, warnings)

        logger.debug("[%s] Request completed successfully (%d ms)", request_id, duration_ms)
        return ToolResponse.ok(result, warnings)

    @abstractmethod
    def do_execute(self, params: P, warnings: List[str]) -> Optional[Any]:
        """Run the tool against the API.

        Args:
            params: Validated parameters.
            warnings: Mutable list; append notices to return alongside the data.

        Returns:
            The mapped result, or None when the resource does not exist.
        """
        pass
