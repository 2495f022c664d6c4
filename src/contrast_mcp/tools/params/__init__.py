"""Typed, validated parameter objects, one per tool."""

from .base import ToolParams
from .pagination import PaginationParams, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from .adr import GetProtectRulesParams
from .sast import GetSastProjectParams, GetSastResultsParams
from .library import ListApplicationsByCveParams, ListApplicationLibrariesParams, CVE_PATTERN
from .coverage import RouteCoverageParams
from .applications import ApplicationFilterParams, GetSessionMetadataParams

__all__ = [
    "ToolParams",
    "PaginationParams",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "GetProtectRulesParams",
    "GetSastProjectParams",
    "GetSastResultsParams",
    "ListApplicationsByCveParams",
    "ListApplicationLibrariesParams",
    "CVE_PATTERN",
    "RouteCoverageParams",
    "ApplicationFilterParams",
    "GetSessionMetadataParams",
]
