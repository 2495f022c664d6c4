from ..client.models import CveApp, CveData
from ..models import CveApplication, CveImpact, CveImpactStats, CveLibraryLight, CveSummary
from .common import format_timestamp, or_empty


class CveMapper:
    """Maps CVE impact data. Class usage on apps starts at 0 and is filled in by the tool."""

    @staticmethod
    def to_cve_application(app: CveApp) -> CveApplication:
        return CveApplication(
            name=app.name,
            app_id=app.app_id,
            first_seen_at=format_timestamp(app.first_seen),
            last_seen_at=format_timestamp(app.last_seen),
            importance=app.importance_description,
        )

    @classmethod
    def to_cve_impact(cls, data: CveData) -> CveImpact:
        summary = None
        if data.cve is not None:
            summary = CveSummary(
                name=data.cve.name,
                description=data.cve.description,
                status=data.cve.status,
                score=data.cve.score,
                references=or_empty(data.cve.references),
            )

        stats = None
        if data.impact_stats is not None:
            stats = CveImpactStats(**data.impact_stats.model_dump())

        return CveImpact(
            cve=summary,
            impact_stats=stats,
            libraries=[
                CveLibraryLight(file_name=lib.file_name, version=lib.version, hash=lib.hash, group=lib.group)
                for lib in or_empty(data.libraries)
            ],
            apps=[cls.to_cve_application(app) for app in or_empty(data.apps)],
            server_count=len(or_empty(data.servers)),
        )
