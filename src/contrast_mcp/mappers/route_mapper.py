from ..client.models import Route, RouteCoverageResponse
from ..models import ObservationLight, RouteCoverageResponseLight, RouteLight
from .common import or_empty

EXERCISED = "EXERCISED"


class RouteMapper:
    """Maps route coverage responses to their lightweight form with coverage aggregates."""

    @staticmethod
    def to_route_light(route: Route) -> RouteLight:
        return RouteLight(
            signature=route.signature,
            environments=or_empty(route.environments),
            status=route.status,
            route_hash=route.route_hash or route.route_hash_string,
            vulnerabilities=route.vulnerabilities,
            critical_vulnerabilities=route.critical_vulnerabilities,
            exercised=route.exercised,
            discovered=route.discovered,
            servers_total=route.servers_total,
            observations=[ObservationLight(verb=o.verb, url=o.url) for o in or_empty(route.observations)],
            total_observations=route.total_observations,
        )

    @classmethod
    def to_response_light(cls, response: RouteCoverageResponse) -> RouteCoverageResponseLight:
        """Map a full response, computing totals and coverage from its routes.

        Args:
            response: Vendor response. Must not be None.

        Returns:
            The lightweight response. Coverage is 0.0 when there are no routes.
        """
        routes = or_empty(response.routes)
        total = len(routes)
        exercised = sum(1 for r in routes if r.status == EXERCISED)

        return RouteCoverageResponseLight(
            success=response.success,
            messages=or_empty(response.messages),
            total_routes=total,
            exercised_count=exercised,
            discovered_count=total - exercised,
            coverage_percent=(exercised * 100.0) / total if total > 0 else 0.0,
            total_vulnerabilities=sum(r.vulnerabilities for r in routes),
            total_critical_vulnerabilities=sum(r.critical_vulnerabilities for r in routes),
            routes=[cls.to_route_light(r) for r in routes],
        )
