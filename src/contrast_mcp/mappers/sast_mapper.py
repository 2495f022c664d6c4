from ..client.models import Project
from ..models import ScanProject
from .common import or_empty


class SastMapper:
    @staticmethod
    def to_scan_project(project: Project) -> ScanProject:
        return ScanProject(
            id=project.id,
            name=project.name,
            organization_id=project.organization_id,
            archived=project.archived,
            language=project.language,
            critical=project.critical,
            high=project.high,
            medium=project.medium,
            low=project.low,
            note=project.note,
            last_scan_id=project.last_scan_id,
            last_scan_time=project.last_scan_time,
            completed_scans=project.completed_scans,
            include_namespace_filters=or_empty(project.include_namespace_filters),
            exclude_namespace_filters=or_empty(project.exclude_namespace_filters),
        )
