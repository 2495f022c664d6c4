"""MCP tools exposing the Contrast API."""

from .adr import GetProtectRulesTool
from .applications import GetSessionMetadataTool, SearchApplicationsTool
from .coverage import GetRouteCoverageTool
from .library import ListApplicationLibrariesTool, ListApplicationsByCveTool
from .sast import GetSastProjectTool, GetSastResultsTool

__all__ = [
    "GetProtectRulesTool",
    "GetSessionMetadataTool",
    "SearchApplicationsTool",
    "GetRouteCoverageTool",
    "ListApplicationLibrariesTool",
    "ListApplicationsByCveTool",
    "GetSastProjectTool",
    "GetSastResultsTool",
]
