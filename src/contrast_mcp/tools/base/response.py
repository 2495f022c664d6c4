"""Uniform envelopes returned by every tool."""

from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ToolResponse(BaseModel):
    """
    Envelope for single-result tools.

    Attributes:
        success: True when `errors` is empty.
        data: The mapped result, or None on error and not-found.
        errors: User-facing error messages.
        warnings: Non-fatal notices collected during validation and execution.
        found: False when the requested resource does not exist.
    """

    success: bool = True
    data: Optional[Any] = None
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    found: bool = True

    @classmethod
    def ok(cls, data: Any, warnings: Optional[List[str]] = None) -> "ToolResponse":
        return cls(data=data, warnings=list(warnings or []))

    @classmethod
    def not_found(cls, message: str, warnings: Optional[List[str]] = None) -> "ToolResponse":
        """A successful call that found nothing; the message is appended to the warnings."""
        return cls(data=None, warnings=[*(warnings or []), message], found=False)

    @classmethod
    def error(cls, errors: str | List[str], warnings: Optional[List[str]] = None) -> "ToolResponse":
        error_list = [errors] if isinstance(errors, str) else list(errors)
        return cls(success=False, data=None, errors=error_list, warnings=list(warnings or []), found=False)


class PaginatedToolResponse(ToolResponse):
    """
    Envelope for list tools. `data` holds the items of the requested page.

    Unlike the single-result envelope, `data` is never null: error and empty responses
    carry an empty list, so clients can always iterate it.

    `total_items` is None when the API cannot report a total; `has_more_pages` is then
    a guess based on whether the page came back full.
    """

    data: List[Any] = Field(default_factory=list)
    page: int = 1
    page_size: int = 0
    total_items: Optional[int] = None
    has_more_pages: bool = False
    duration_ms: Optional[int] = None

    @classmethod
    def page_of(
        cls,
        items: List[Any],
        page: int,
        page_size: int,
        total_items: Optional[int],
        has_more_pages: bool,
        warnings: Optional[List[str]] = None,
        duration_ms: Optional[int] = None,
    ) -> "PaginatedToolResponse":
        return cls(
            data=list(items),
            page=page,
            page_size=page_size,
            total_items=total_items,
            has_more_pages=has_more_pages,
            warnings=list(warnings or []),
            duration_ms=duration_ms,
        )

    @classmethod
    def page_error(
        cls, page: int, page_size: int, errors: str | List[str], warnings: Optional[List[str]] = None
    ) -> "PaginatedToolResponse":
        error_list = [errors] if isinstance(errors, str) else list(errors)
        return cls(
            success=False,
            page=page,
            page_size=page_size,
            total_items=0,
            errors=error_list,
            warnings=list(warnings or []),
            found=False,
        )


class ExecutionResult(BaseModel):
    """Items of one page plus the total across all pages, when known."""

    items: List[Any] = Field(default_factory=list)
    total_items: Optional[int] = None
