from typing import Optional

from .base import ToolParams
from ..validation import ValidationContext


class GetSastProjectParams(ToolParams):
    """Parameters for get_scan_project. Project names are matched exactly."""

    project_name: Optional[str] = None

    @classmethod
    def of(cls, project_name: Optional[str]) -> "GetSastProjectParams":
        ctx = ValidationContext()
        ctx.require(project_name, "projectName")
        return cls._from_context(ctx, project_name=project_name)


class GetSastResultsParams(ToolParams):
    """Parameters for get_scan_results."""

    project_name: Optional[str] = None

    @classmethod
    def of(cls, project_name: Optional[str]) -> "GetSastResultsParams":
        ctx = ValidationContext()
        ctx.require(project_name, "projectName")
        return cls._from_context(ctx, project_name=project_name)
