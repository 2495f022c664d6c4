from typing import List, Optional

from pydantic import Field

from .base import LightModel


class ObservationLight(LightModel):
    verb: Optional[str] = None
    url: Optional[str] = None


class RouteLight(LightModel):
    """
    A route with the fields an agent needs to judge coverage.

    Attributes:
        signature: Code signature of the route handler.
        environments: Environments the route was seen in. Never None.
        status: 'DISCOVERED' or 'EXERCISED'.
        route_hash: Stable identifier of the route.
        vulnerabilities: Vulnerabilities found on the route.
        critical_vulnerabilities: Critical vulnerabilities found on the route.
        exercised: Last time the route received a request (epoch millis), 0 when never.
        discovered: When the route was discovered (epoch millis).
        servers_total: Number of servers the route was seen on.
        observations: Observed verb/url pairs. Never None.
        total_observations: Observation count reported by the API, when available.
    """

    signature: Optional[str] = None
    environments: List[str] = Field(default_factory=list)
    status: Optional[str] = None
    route_hash: Optional[str] = None
    vulnerabilities: int = 0
    critical_vulnerabilities: int = 0
    exercised: int = 0
    discovered: int = 0
    servers_total: int = 0
    observations: List[ObservationLight] = Field(default_factory=list)
    total_observations: Optional[int] = None


class RouteCoverageResponseLight(LightModel):
    """Route coverage with aggregates derived from `routes`."""

    success: bool = False
    messages: List[str] = Field(default_factory=list)
    total_routes: int = 0
    exercised_count: int = 0
    discovered_count: int = 0
    coverage_percent: float = 0.0
    total_vulnerabilities: int = 0
    total_critical_vulnerabilities: int = 0
    routes: List[RouteLight] = Field(default_factory=list)
