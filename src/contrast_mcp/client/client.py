"""Synchronous HTTP client for the Contrast REST API."""

import base64
from types import TracebackType
from typing import Any, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from ..config import ContrastSettings
from ..exceptions import ContrastAPIError, ResourceNotFoundError, UnauthorizedError
from ..logger import get_logger
from .models import (
    Application,
    ApplicationsResponse,
    CveData,
    LibrariesPage,
    LibraryExtended,
    MetadataFilterResponse,
    Project,
    ProjectsPage,
    ProtectData,
    RouteCoverageRequest,
    RouteCoverageResponse,
    SessionMetadataResponse,
)

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

USER_AGENT_PRODUCT = "contrast-mcp"
LIBRARY_PAGE_SIZE = 50


class ContrastClient:
    """
    Thin wrapper around the Contrast REST API.

    Every method performs a single request (or, for the explicit `get_all_*` helpers,
    a bounded sequence of page requests) and returns vendor-shaped models. HTTP errors
    are raised as `ContrastAPIError` subclasses; retries and caching are not attempted.
    """

    def __init__(self, settings: ContrastSettings, version: str = "unknown", transport: Optional[httpx.BaseTransport] = None):
        """Create a client for the configured host.

        Args:
            settings: Connection settings. Credentials must be present.
            version: Server version reported in the User-Agent header.
            transport: Optional httpx transport, used by tests to stub the API.
        """
        self._settings = settings
        token = base64.b64encode(f"{settings.user_name}:{settings.service_key}".encode("utf-8")).decode("ascii")
        headers = {
            "Authorization": token,
            "API-Key": settings.api_key or "",
            "Accept": "application/json",
            "User-Agent": f"{USER_AGENT_PRODUCT}/{version}",
        }

        client_kwargs: dict[str, Any] = {
            "base_url": settings.api_url,
            "headers": headers,
            "timeout": settings.timeout,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        elif settings.proxy_url:
            logger.debug("Configuring HTTP proxy: %s", settings.proxy_url)
            client_kwargs["proxy"] = settings.proxy_url

        self._http = httpx.Client(**client_kwargs)
        logger.info("Contrast client initialized for user '%s' at %s", settings.user_name, settings.api_url)

    def __enter__(self) -> "ContrastClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def close(self) -> None:
        """Release the underlying connection pool."""
        self._http.close()

    # ---- Protect ------------------------------------------------------------

    def get_protect_config(self, org_id: str, app_id: str) -> Optional[ProtectData]:
        return self._get_model(f"/ng/{org_id}/protection/policy/{app_id}", ProtectData, params={"expand": "skip_links"})

    # ---- SCA ----------------------------------------------------------------

    def get_apps_for_cve(self, org_id: str, cve_id: str) -> Optional[CveData]:
        return self._get_model(f"/ng/organizations/{org_id}/cves/{cve_id}", CveData)

    def get_library_page(self, org_id: str, app_id: str, limit: int, offset: int) -> LibrariesPage:
        """Fetch one page of an application's libraries, including their vulnerabilities."""
        page = self._get_model(
            f"/ng/{org_id}/applications/{app_id}/libraries/filter",
            LibrariesPage,
            params={"expand": "skip_links,vulns", "limit": limit, "offset": offset, "sort": "score"},
        )
        return page if page is not None else LibrariesPage()

    def get_all_libraries(self, org_id: str, app_id: str, page_size: int = LIBRARY_PAGE_SIZE) -> List[LibraryExtended]:
        """Fetch every library of an application by walking the pages."""
        libraries: List[LibraryExtended] = []
        offset = 0
        while True:
            page = self.get_library_page(org_id, app_id, page_size, offset)
            batch = page.libraries or []
            libraries.extend(batch)
            offset += page_size
            total = page.count if page.count is not None else len(libraries)
            if not batch or offset >= total:
                break
            logger.debug("Retrieved %d libraries, fetching more with offset %d", len(libraries), offset)
        return libraries

    # ---- Route coverage -----------------------------------------------------

    def get_route_coverage(
        self, org_id: str, app_id: str, request: Optional[RouteCoverageRequest] = None
    ) -> Optional[RouteCoverageResponse]:
        """Fetch route coverage with observations inline.

        An unfiltered request uses GET; a session or metadata filter is sent as a POST body.
        """
        if request is None:
            return self._get_model(
                f"/ng/{org_id}/applications/{app_id}/route",
                RouteCoverageResponse,
                params={"expand": "skip_links,observations"},
            )
        response = self._request(
            "POST",
            f"/ng/{org_id}/applications/{app_id}/route/filter",
            params={"expand": "skip_links,observations"},
            json=request.model_dump(by_alias=True, exclude_none=True),
        )
        return self._parse(response, RouteCoverageResponse)

    # ---- Session metadata -----------------------------------------------------

    def get_latest_session_metadata(self, org_id: str, app_id: str) -> Optional[SessionMetadataResponse]:
        return self._get_model(
            f"/ng/organizations/{org_id}/applications/{app_id}/agent-sessions/latest", SessionMetadataResponse
        )

    def get_session_metadata_filters(self, org_id: str, app_id: str) -> Optional[MetadataFilterResponse]:
        return self._get_model(f"/ng/{org_id}/metadata/session/{app_id}/filters", MetadataFilterResponse)

    # ---- Applications -------------------------------------------------------

    def get_applications(self, org_id: str) -> List[Application]:
        response = self._get_model(
            f"/ng/{org_id}/applications",
            ApplicationsResponse,
            params={"expand": "metadata,technologies,skip_links"},
        )
        if response is None or response.applications is None:
            return []
        return response.applications

    # ---- Scan (SAST) --------------------------------------------------------

    def find_project_by_name(self, org_id: str, name: str) -> Optional[Project]:
        """Return the scan project whose name matches exactly, or None."""
        page = self._get_model(
            f"/sast/organizations/{org_id}/projects", ProjectsPage, params={"name": name, "unique": "true"}
        )
        if page is None:
            return None
        return next((p for p in page.content or [] if p.name == name), None)

    def get_scan_sarif(self, org_id: str, project_id: str, scan_id: str) -> Optional[str]:
        """Return the raw SARIF document of a scan as text."""
        response = self._request(
            "GET",
            f"/sast/organizations/{org_id}/projects/{project_id}/scans/{scan_id}/raw-output",
            headers={"Accept": "application/sarif+json"},
        )
        return response.text or None

    # ---- plumbing -----------------------------------------------------------

    def _get_model(self, path: str, model: Type[M], params: Optional[dict[str, Any]] = None) -> Optional[M]:
        response = self._request("GET", path, params=params)
        return self._parse(response, model)

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[dict[str, Any]] = None,
        json: Optional[Any] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        logger.debug("%s %s params=%s", method, path, params)
        response = self._http.request(method, path, params=params, json=json, headers=headers)
        self._raise_for_status(response, method, path)
        return response

    @staticmethod
    def _parse(response: httpx.Response, model: Type[M]) -> Optional[M]:
        if not response.content or not response.content.strip():
            return None
        payload = response.json()
        if payload is None:
            return None
        return model.model_validate(payload)

    @staticmethod
    def _raise_for_status(response: httpx.Response, method: str, path: str) -> None:
        status = response.status_code
        if status < 400:
            return
        msg = f"{method} {path} failed with HTTP {status}"
        logger.debug("%s: %s", msg, response.text[:200])
        if status == 401:
            raise UnauthorizedError(msg, status_code=status)
        if status == 404:
            raise ResourceNotFoundError(msg, status_code=status)
        raise ContrastAPIError(msg, status_code=status)
