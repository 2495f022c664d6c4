import time
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, TypeVar

from .base_tool import BaseTool
from .response import ExecutionResult, PaginatedToolResponse
from ..params import MAX_PAGE_SIZE, PaginationParams, ToolParams
from ...logger import get_logger

logger = get_logger(__name__)

P = TypeVar("P", bound=ToolParams)

NO_RESULTS_MESSAGE = "No results found matching the specified criteria."


class PaginatedTool(BaseTool, ABC, Generic[P]):
    """
    Base for tools returning a page of items.

    Same stages as SingleTool, plus page/page_size parsing. Pagination problems are
    never fatal: they are clamped and reported as warnings.
    """

    def get_max_page_size(self) -> int:
        return MAX_PAGE_SIZE

    def execute_pipeline(
        self, page: Optional[int], page_size: Optional[int], params_factory: Callable[[], P]
    ) -> PaginatedToolResponse:
        request_id = self.new_request_id()
        start = time.monotonic()

        pagination = PaginationParams.of(page, page_size, self.get_max_page_size())
        params = params_factory()
        warnings: List[str] = [*pagination.warnings, *params.warnings]

        if not params.is_valid():
            logger.debug("[%s] Validation failed: %s", request_id, ", ".join(params.errors))
            return PaginatedToolResponse.page_error(pagination.page, pagination.page_size, list(params.errors))

        try:
            result = self.do_execute(pagination, params, warnings)
        except Exception as e:
            message = self.error_message(e, request_id)
            return PaginatedToolResponse.page_error(pagination.page, pagination.page_size, message, warnings)

        if not result.items and result.total_items == 0:
            warnings.append(NO_RESULTS_MESSAGE)

        duration_ms = int((time.monotonic() - start) * 1000)
        logger.debug(
            "[%s] Request completed successfully (%d ms, %d items, total=%s)",
            request_id,
            duration_ms,
            len(result.items),
            result.total_items,
        )
        return PaginatedToolResponse.page_of(
            items=result.items,
            page=pagination.page,
            page_size=pagination.page_size,
            total_items=result.total_items,
            has_more_pages=self._has_more_pages(result, pagination),
            warnings=warnings,
            duration_ms=duration_ms,
        )

    @staticmethod
    def _has_more_pages(result: ExecutionResult, pagination: PaginationParams) -> bool:
        if result.total_items is not None:
            return pagination.offset + len(result.items) < result.total_items
        return len(result.items) >= pagination.limit

    @abstractmethod
    def do_execute(self, pagination: PaginationParams, params: P, warnings: List[str]) -> ExecutionResult:
        """Fetch one page.

        Args:
            pagination: Resolved page, page size and offset.
            params: Validated tool parameters.
            warnings: Mutable list; append notices to return alongside the items.
        """
        pass
