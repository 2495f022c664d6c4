"""
Vendor-shaped response models for the Contrast REST API.

These mirror the JSON the API returns, keeping the vendor's field names through aliases.
Unknown fields are ignored and every collection is Optional: the API omits or nulls
lists freely, and the mappers are responsible for defaulting them.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class VendorModel(BaseModel):
    """Base for all vendor models: tolerant parsing, attribute or alias population."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        # The API sends explicit nulls for counts and flags it has no value for
        if value is None and info.field_name is not None:
            field = cls.model_fields[info.field_name]
            if field.default is not None and not field.is_required():
                return field.get_default(call_default_factory=True)
        return value


# ---- Route coverage -------------------------------------------------------


class Observation(VendorModel):
    """A single observed HTTP interaction for a route."""

    verb: Optional[str] = None
    url: Optional[str] = None


class Route(VendorModel):
    """A route as reported by the route coverage endpoint."""

    signature: Optional[str] = None
    environments: Optional[List[str]] = None
    status: Optional[str] = None
    route_hash: Optional[str] = None
    route_hash_string: Optional[str] = None
    vulnerabilities: int = 0
    critical_vulnerabilities: int = 0
    exercised: int = 0
    discovered: int = 0
    servers_total: int = 0
    observations: Optional[List[Observation]] = None
    total_observations: Optional[int] = None


class RouteCoverageResponse(VendorModel):
    success: bool = False
    messages: Optional[List[str]] = None
    routes: Optional[List[Route]] = None


class RouteCoverageMetadataLabelValues(VendorModel):
    label: str
    values: List[str] = Field(default_factory=list)


class RouteCoverageRequest(VendorModel):
    """Request body for filtered route coverage (by session ID or session metadata)."""

    session_id: Optional[str] = Field(default=None, alias="sessionID")
    metadata: List[RouteCoverageMetadataLabelValues] = Field(default_factory=list)


# ---- Session metadata -----------------------------------------------------


class MetadataSession(VendorModel):
    label: Optional[str] = None
    value: Optional[str] = None


class AgentSession(VendorModel):
    agent_session_id: Optional[str] = Field(default=None, alias="agentSessionId")
    metadata_sessions: Optional[List[MetadataSession]] = Field(default=None, alias="metadataSessions")
    created_date: Optional[float] = Field(default=None, alias="createdDate")
    session_status: Optional[str] = Field(default=None, alias="sessionStatus")


class SessionMetadataResponse(VendorModel):
    """Response of the latest agent session endpoint."""

    success: bool = False
    messages: Optional[List[str]] = None
    agent_session: Optional[AgentSession] = Field(default=None, alias="agentSession")


class MetadataFilterValue(VendorModel):
    value: Optional[str] = None
    count: int = 0


class MetadataFilterField(VendorModel):
    id: Optional[str] = None
    label: Optional[str] = None
    values: Optional[List[MetadataFilterValue]] = None


class MetadataFilterResponse(VendorModel):
    """Session metadata fields available for filtering an application's data."""

    success: bool = False
    messages: Optional[List[str]] = None
    filters: Optional[List[MetadataFilterField]] = None


# ---- Libraries (SCA) -------------------------------------------------------


class LibraryVulnerability(VendorModel):
    name: Optional[str] = None
    severity_code: Optional[str] = None
    severity_value: Optional[float] = None
    description: Optional[str] = None


class LibraryExtended(VendorModel):
    """A third-party library in an application, with class usage and known CVEs."""

    file_name: Optional[str] = None
    version: Optional[str] = None
    hash: Optional[str] = None
    group: Optional[str] = None
    grade: Optional[str] = None
    library_id: Optional[int] = None
    class_count: int = 0
    classes_used: int = 0
    total_vulnerabilities: int = 0
    critical_vulnerabilities: int = 0
    high_vulnerabilities: int = 0
    vulns: Optional[List[LibraryVulnerability]] = None
    latest_version: Optional[str] = None
    release_date: Optional[int] = None
    latest_release_date: Optional[int] = None
    months_outdated: int = 0
    custom: bool = False
    app_id: Optional[str] = None
    app_name: Optional[str] = None


class LibrariesPage(VendorModel):
    libraries: Optional[List[LibraryExtended]] = None
    count: Optional[int] = None


# ---- CVE impact ------------------------------------------------------------


class Cve(VendorModel):
    name: Optional[str] = None
    uuid: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    score: float = 0.0
    availability_impact: Optional[str] = Field(default=None, alias="availabilityImpact")
    confidentiality_impact: Optional[str] = Field(default=None, alias="confidentialityImpact")
    integrity_impact: Optional[str] = Field(default=None, alias="integrityImpact")
    access_vector: Optional[str] = Field(default=None, alias="accessVector")
    references: Optional[List[str]] = None


class ImpactStats(VendorModel):
    impacted_app_count: int = Field(default=0, alias="impactedAppCount")
    total_app_count: int = Field(default=0, alias="totalAppCount")
    impacted_server_count: int = Field(default=0, alias="impactedServerCount")
    total_server_count: int = Field(default=0, alias="totalServerCount")
    app_percentage: float = Field(default=0.0, alias="appPercentage")
    server_percentage: float = Field(default=0.0, alias="serverPercentage")


class CveLibrary(VendorModel):
    hash: Optional[str] = None
    version: Optional[str] = None
    file_name: Optional[str] = None
    group: Optional[str] = None


class CveApp(VendorModel):
    name: Optional[str] = None
    app_id: Optional[str] = None
    last_seen: Optional[int] = None
    first_seen: Optional[int] = None
    importance_description: Optional[str] = None


class CveData(VendorModel):
    cve: Optional[Cve] = None
    impact_stats: Optional[ImpactStats] = Field(default=None, alias="impactStats")
    libraries: Optional[List[CveLibrary]] = None
    apps: Optional[List[CveApp]] = None
    servers: Optional[List[Any]] = None


# ---- Protect ---------------------------------------------------------------


class ProtectRule(VendorModel):
    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    development: Optional[str] = None
    qa: Optional[str] = None
    production: Optional[str] = None
    id: Optional[int] = None
    uuid: Optional[str] = None
    can_block: Optional[bool] = None
    can_block_at_perimeter: Optional[bool] = None
    is_monitor_at_perimeter: Optional[bool] = None
    parent_rule_uuid: Optional[str] = None
    parent_rule_name: Optional[str] = None
    cves: Optional[List[Cve]] = None
    enabled_dev: Optional[bool] = None
    enabled_qa: Optional[bool] = None
    enabled_prod: Optional[bool] = None


class ProtectData(VendorModel):
    success: bool = False
    messages: Optional[List[str]] = None
    rules: Optional[List[ProtectRule]] = None


# ---- Applications ------------------------------------------------------------


class ApplicationMetadata(VendorModel):
    id: Optional[str] = None
    name: Optional[str] = Field(default=None, alias="fieldName")
    value: Optional[str] = Field(default=None, alias="fieldValue")
    type: Optional[str] = None


class Application(VendorModel):
    name: Optional[str] = None
    app_id: Optional[str] = None
    status: Optional[str] = None
    language: Optional[str] = None
    last_seen: Optional[int] = None
    archived: bool = False
    importance: Optional[int] = None
    tags: Optional[List[str]] = None
    techs: Optional[List[str]] = None
    metadata_entities: Optional[List[ApplicationMetadata]] = Field(default=None, alias="metadataEntities")


class ApplicationsResponse(VendorModel):
    success: bool = False
    applications: Optional[List[Application]] = None


# ---- Scan (SAST) -----------------------------------------------------------


class Project(VendorModel):
    id: Optional[str] = None
    name: Optional[str] = None
    organization_id: Optional[str] = Field(default=None, alias="organizationId")
    archived: bool = False
    language: Optional[str] = None
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    note: int = 0
    last_scan_id: Optional[str] = Field(default=None, alias="lastScanId")
    last_scan_time: Optional[str] = Field(default=None, alias="lastScanTime")
    completed_scans: int = Field(default=0, alias="completedScans")
    include_namespace_filters: Optional[List[str]] = Field(default=None, alias="includeNamespaceFilters")
    exclude_namespace_filters: Optional[List[str]] = Field(default=None, alias="excludeNamespaceFilters")


class ProjectsPage(VendorModel):
    content: Optional[List[Project]] = None
