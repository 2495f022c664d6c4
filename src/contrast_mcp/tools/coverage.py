"""Route coverage tool."""

from typing import Annotated, List, Optional

from pydantic import Field

from .base import SingleTool, ToolResponse
from .params import RouteCoverageParams
from ..client.models import RouteCoverageMetadataLabelValues, RouteCoverageRequest
from ..logger import get_logger
from ..mappers import RouteMapper
from ..models import RouteCoverageResponseLight

logger = get_logger(__name__)


class GetRouteCoverageTool(SingleTool[RouteCoverageParams]):
    def get_route_coverage(
        self,
        app_id: Annotated[Optional[str], Field(description="Application ID (use search_applications to find)")] = None,
        session_metadata_name: Annotated[
            Optional[str],
            Field(
                description="Session metadata field name to filter by (e.g., 'branch'). "
                "Must be provided with session_metadata_value."
            ),
        ] = None,
        session_metadata_value: Annotated[
            Optional[str],
            Field(
                description="Session metadata field value to filter by (e.g., 'main'). "
                "Must be provided with session_metadata_name."
            ),
        ] = None,
        use_latest_session: Annotated[
            Optional[bool],
            Field(description="If true, only return routes from the latest session. Takes precedence over metadata."),
        ] = None,
    ) -> ToolResponse:
        """
        Retrieves route coverage data for an application.

        Routes are either DISCOVERED (found but never requested) or EXERCISED (received at
        least one HTTP request). The response contains each route with its observations
        plus totals: total_routes, exercised_count, discovered_count, coverage_percent and
        vulnerability counts.

        Filtering (mutually exclusive):
        - No filter: all routes across all sessions
        - session_metadata_name + session_metadata_value: routes from matching sessions (e.g. branch=main)
        - use_latest_session: routes from the most recent session only

        Related tools:
        - search_applications: Find application IDs by name or tag
        - get_session_metadata: View available session metadata fields
        """
        return self.execute_pipeline(
            lambda: RouteCoverageParams.of(app_id, session_metadata_name, session_metadata_value, use_latest_session)
        )

    def do_execute(self, params: RouteCoverageParams, warnings: List[str]) -> Optional[RouteCoverageResponseLight]:
        app_id = params.app_id or ""
        request: Optional[RouteCoverageRequest] = None

        if params.is_use_latest_session:
            logger.debug("Fetching latest session metadata for application ID: %s", app_id)
            latest = self.client.get_latest_session_metadata(self.org_id, app_id)
            if latest is None or latest.agent_session is None:
                logger.warning("No agent session found for application ID: %s", app_id)
                return None
            request = RouteCoverageRequest(session_id=latest.agent_session.agent_session_id)
        elif params.has_session_metadata_filter:
            logger.debug(
                "Filtering by session metadata: %s=%s", params.session_metadata_name, params.session_metadata_value
            )
            label_values = RouteCoverageMetadataLabelValues(
                label=params.session_metadata_name or "", values=[params.session_metadata_value or ""]
            )
            request = RouteCoverageRequest(metadata=[label_values])
        else:
            logger.debug("No filters applied - retrieving all route coverage")

        response = self.client.get_route_coverage(self.org_id, app_id, request)
        if response is None:
            logger.warning("Route coverage API returned nothing for app %s", app_id)
            return None

        light = RouteMapper.to_response_light(response)
        logger.info("Retrieved route coverage for application ID: %s (%d routes)", app_id, light.total_routes)
        return light
