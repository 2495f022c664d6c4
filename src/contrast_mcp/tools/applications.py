"""Application search and session metadata tools."""

from typing import Annotated, List, Optional

from pydantic import Field

from .base import ExecutionResult, PaginatedTool, PaginatedToolResponse, SingleTool, ToolResponse
from .params import ApplicationFilterParams, GetSessionMetadataParams, PaginationParams
from ..logger import get_logger
from ..mappers import ApplicationMapper, SessionMetadataMapper
from ..models import SessionMetadata

logger = get_logger(__name__)

NO_SESSION_METADATA_WARNING = (
    "No session metadata found for this application. This may indicate the application has no recorded sessions."
)


class GetSessionMetadataTool(SingleTool[GetSessionMetadataParams]):
    def get_session_metadata(
        self,
        app_id: Annotated[Optional[str], Field(description="Application ID (use search_applications to find)")] = None,
    ) -> ToolResponse:
        """
        Retrieves the session metadata available for an application: branch names, build
        IDs and other custom fields, with the values recorded for each. These values can
        be used to filter route coverage by session.

        Related tools:
        - search_applications: Find application IDs by name, tag, or metadata
        - get_route_coverage: Route coverage filtered by session metadata
        """
        return self.execute_pipeline(lambda: GetSessionMetadataParams.of(app_id))

    def do_execute(self, params: GetSessionMetadataParams, warnings: List[str]) -> Optional[SessionMetadata]:
        response = self.client.get_session_metadata_filters(self.org_id, params.app_id or "")
        if response is None:
            warnings.append(NO_SESSION_METADATA_WARNING)
            return None
        return SessionMetadataMapper.to_session_metadata(response, app_id=params.app_id)


class SearchApplicationsTool(PaginatedTool[ApplicationFilterParams]):
    def search_applications(
        self,
        name: Annotated[Optional[str], Field(description="Application name filter (partial, case-insensitive)")] = None,
        tag: Annotated[Optional[str], Field(description="Tag filter (CASE-SENSITIVE - 'Production' != 'production')")] = None,
        metadata_name: Annotated[Optional[str], Field(description="Metadata field name (case-insensitive)")] = None,
        metadata_value: Annotated[
            Optional[str], Field(description="Metadata field value (case-insensitive, requires metadata_name)")
        ] = None,
        metadata_filters: Annotated[
            Optional[str],
            Field(
                description='JSON object of metadata filters, e.g. {"branch":"main"} or '
                '{"developer":["Ellen","Sam"]}. All fields must match (case-insensitive).'
            ),
        ] = None,
        page: Annotated[Optional[int], Field(description="Page number (1-based), default: 1")] = None,
        page_size: Annotated[Optional[int], Field(description="Items per page (max 100), default: 50")] = None,
    ) -> PaginatedToolResponse:
        """
        Search applications with optional filters. Returns all applications if no filters
        are given; multiple filters are combined with AND.

        Filtering behavior:
        - name: partial, case-insensitive ("app" matches "MyApp")
        - tag: exact, case-sensitive
        - metadata_name + metadata_value: exact, case-insensitive for both
        - metadata_name only: applications having that metadata field, any value
        - metadata_filters: every listed field must have one of the given values

        Related tools:
        - get_session_metadata: Get session metadata for an application
        - list_application_libraries: Libraries used by an application
        """
        return self.execute_pipeline(
            page,
            page_size,
            lambda: ApplicationFilterParams.of(name, tag, metadata_name, metadata_value, metadata_filters),
        )

    def do_execute(
        self, pagination: PaginationParams, params: ApplicationFilterParams, warnings: List[str]
    ) -> ExecutionResult:
        applications = self.client.get_applications(self.org_id)
        matching = [ApplicationMapper.to_application_data(app) for app in applications if params.matches(app)]
        logger.debug("%d of %d applications match the filters", len(matching), len(applications))

        start = pagination.offset
        end = start + pagination.page_size
        return ExecutionResult(items=matching[start:end], total_items=len(matching))
