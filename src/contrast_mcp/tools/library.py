"""Software composition analysis tools: libraries and CVEs."""

from typing import Annotated, List, Optional

from pydantic import Field

from .base import ExecutionResult, PaginatedTool, PaginatedToolResponse, SingleTool, ToolResponse
from .params import ListApplicationLibrariesParams, ListApplicationsByCveParams, PaginationParams
from ..logger import get_logger
from ..mappers import CveMapper, LibraryMapper
from ..models import CveApplication, CveImpact

logger = get_logger(__name__)

NO_APPS_WARNING = (
    "No applications found with this CVE. "
    "The CVE may not affect any libraries in your organization, or the CVE ID may be invalid."
)
NO_LIBRARIES_WARNING = (
    "No libraries found for this application. "
    "The application may not have any third-party dependencies, or library data may not have been collected yet."
)


class ListApplicationsByCveTool(SingleTool[ListApplicationsByCveParams]):
    def list_applications_by_cve(
        self, cve_id: Annotated[Optional[str], Field(description="CVE identifier (e.g., CVE-2021-44228)")] = None
    ) -> ToolResponse:
        """
        Find applications and libraries affected by a specific CVE.

        Takes a CVE ID (e.g. CVE-2021-44228) and returns the CVE details, the vulnerable
        library versions and the applications containing them. Each application carries
        class usage data: class_count is the number of classes in the vulnerable library
        and class_usage the number the application actually loads. When class_usage is 0
        the vulnerable code is likely not executed; prioritize applications where it is > 0.

        Related tools:
        - list_application_libraries: Get all libraries for a specific application
        - search_applications: Find applications by name, tag, or metadata
        """
        return self.execute_pipeline(lambda: ListApplicationsByCveParams.of(cve_id))

    def do_execute(self, params: ListApplicationsByCveParams, warnings: List[str]) -> Optional[CveImpact]:
        logger.debug("Retrieving applications vulnerable to CVE: %s", params.cve_id)
        data = self.client.get_apps_for_cve(self.org_id, params.cve_id or "")
        if data is None:
            return None

        impact = CveMapper.to_cve_impact(data)
        if not impact.apps:
            warnings.append(NO_APPS_WARNING)
            return impact

        vulnerable_hashes = {lib.hash for lib in impact.libraries if lib.hash}
        apps = [self._with_class_usage(app, vulnerable_hashes, warnings) for app in impact.apps]
        logger.info("Retrieved CVE data for %s: %d vulnerable applications", params.cve_id, len(apps))
        return impact.model_copy(update={"apps": apps})

    def _with_class_usage(self, app: CveApplication, vulnerable_hashes: set[str], warnings: List[str]) -> CveApplication:
        """Return the app with class usage of the last loaded library matching a vulnerable hash."""
        if app.app_id is None:
            return app
        try:
            libraries = self.client.get_all_libraries(self.org_id, app.app_id)
        except Exception as e:
            logger.debug("Could not fetch library data for app %s: %s", app.app_id, e)
            warnings.append(f"Could not fetch class usage data for application '{app.name}': {e}")
            return app

        used = None
        for library in libraries:
            if library.hash in vulnerable_hashes and library.classes_used > 0:
                used = library
        if used is None:
            return app
        return app.model_copy(update={"class_count": used.class_count, "class_usage": used.classes_used})


class ListApplicationLibrariesTool(PaginatedTool[ListApplicationLibrariesParams]):
    API_MAX_PAGE_SIZE = 50

    def get_max_page_size(self) -> int:
        return self.API_MAX_PAGE_SIZE

    def list_application_libraries(
        self,
        app_id: Annotated[Optional[str], Field(description="Application ID (use search_applications to find)")] = None,
        page: Annotated[Optional[int], Field(description="Page number (1-based), default: 1")] = None,
        page_size: Annotated[Optional[int], Field(description="Items per page (max 50), default: 50")] = None,
    ) -> PaginatedToolResponse:
        """
        Returns the libraries used by a specific application, one page at a time.
        Use search_applications(name=...) to find the application ID from a name.

        Each library includes file name, version, hash, grade (A-F), class_count,
        classes_used, vulnerability counts (total, critical, high) and the known CVEs.
        A library with classes_used == 0 is likely a transitive dependency that is never
        loaded, and is unlikely to be exploitable even with known vulnerabilities.

        Related tools:
        - search_applications: Find application IDs by name, tag, or metadata
        - list_applications_by_cve: Find applications affected by a specific CVE
        """
        return self.execute_pipeline(page, page_size, lambda: ListApplicationLibrariesParams.of(app_id))

    def do_execute(
        self, pagination: PaginationParams, params: ListApplicationLibrariesParams, warnings: List[str]
    ) -> ExecutionResult:
        logger.debug("Retrieving libraries for application: %s", params.app_id)
        response = self.client.get_library_page(
            self.org_id, params.app_id or "", limit=pagination.limit, offset=pagination.offset
        )
        libraries = response.libraries or []
        total = response.count or 0

        if not libraries:
            # Past the last page an empty result is expected
            if pagination.offset == 0 and total == 0:
                warnings.append(NO_LIBRARIES_WARNING)
            return ExecutionResult(items=[], total_items=total)

        logger.debug("Retrieved %d libraries for application %s", len(libraries), params.app_id)
        return ExecutionResult(items=[LibraryMapper.to_library_light(lib) for lib in libraries], total_items=total)
