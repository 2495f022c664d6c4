"""Page/page-size parsing for paginated tools."""

from typing import Optional

from .base import ToolParams
from ..validation import ValidationContext

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100
MIN_PAGE = 1


class PaginationParams(ToolParams):
    """1-based page number and page size. Parsing always succeeds; bad input becomes warnings."""

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def of(cls, page: Optional[int], page_size: Optional[int], max_page_size: int = MAX_PAGE_SIZE) -> "PaginationParams":
        ctx = ValidationContext()
        resolved_page = ctx.int_param(page, "page", default=DEFAULT_PAGE, minimum=MIN_PAGE)
        resolved_size = ctx.int_param(
            page_size, "pageSize", default=min(DEFAULT_PAGE_SIZE, max_page_size), minimum=1, maximum=max_page_size
        )
        return cls._from_context(ctx, page=resolved_page, page_size=resolved_size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size
