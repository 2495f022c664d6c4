"""Scan (SAST) project tools."""

from typing import Annotated, List, Optional

from pydantic import Field

from .base import SingleTool, ToolResponse
from .params import GetSastProjectParams, GetSastResultsParams
from ..logger import get_logger
from ..mappers import SastMapper
from ..models import ScanProject

logger = get_logger(__name__)

PROJECT_NAME_DESCRIPTION = "Scan project name (case-sensitive, must match exactly)"

DEPRECATION_WARNING = (
    "DEPRECATED: This tool returns raw SARIF which may be very large. "
    "Consider using future paginated SAST search tools for better AI-friendly access."
)


class GetSastProjectTool(SingleTool[GetSastProjectParams]):
    def get_scan_project(
        self, project_name: Annotated[Optional[str], Field(description=PROJECT_NAME_DESCRIPTION)] = None
    ) -> ToolResponse:
        """
        Takes a scan project name and returns the project details: id, language, last scan
        ID and time, number of completed scans and finding counts by severity
        (critical, high, medium, low, note).

        Project names are case-sensitive and must match exactly.

        Related tools:
        - get_scan_results: Get SARIF results for a project's latest scan
        """
        return self.execute_pipeline(lambda: GetSastProjectParams.of(project_name))

    def do_execute(self, params: GetSastProjectParams, warnings: List[str]) -> Optional[ScanProject]:
        logger.debug("Retrieving scan project details for project: %s", params.project_name)
        project = self.client.find_project_by_name(self.org_id, params.project_name or "")
        if project is None:
            logger.debug("Project not found: %s", params.project_name)
            return None
        logger.debug("Found project: %s (id: %s, language: %s)", project.name, project.id, project.language)
        return SastMapper.to_scan_project(project)


class GetSastResultsTool(SingleTool[GetSastResultsParams]):
    def get_scan_results(
        self, project_name: Annotated[Optional[str], Field(description=PROJECT_NAME_DESCRIPTION)] = None
    ) -> ToolResponse:
        """
        DEPRECATED: Takes a scan project name and returns the latest results in SARIF format.

        WARNING: The raw SARIF JSON is often very large (megabytes) and may exceed context
        limits. The project must have at least one completed scan. Project names are
        case-sensitive and must match exactly.

        Related tools:
        - get_scan_project: Get project details including scan counts
        """
        return self.execute_pipeline(lambda: GetSastResultsParams.of(project_name))

    def do_execute(self, params: GetSastResultsParams, warnings: List[str]) -> Optional[str]:
        logger.debug("Retrieving latest SARIF results for project: %s", params.project_name)
        project = self.client.find_project_by_name(self.org_id, params.project_name or "")
        if project is None:
            logger.debug("Project not found: %s", params.project_name)
            return None

        if project.last_scan_id is None or project.id is None:
            warnings.append(
                f"No scan results available for project: {params.project_name}. "
                "Project exists but has no completed scans."
            )
            return None

        sarif = self.client.get_scan_sarif(self.org_id, project.id, project.last_scan_id)
        if sarif is None:
            warnings.append(
                f"No scan results available for project: {params.project_name}. "
                f"Scan ID {project.last_scan_id} not found."
            )
            return None

        logger.info("Retrieved SARIF data for project: %s", params.project_name)
        warnings.append(DEPRECATION_WARNING)
        return sarif
