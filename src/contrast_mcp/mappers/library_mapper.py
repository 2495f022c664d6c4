from typing import Callable

from ..client.models import LibraryExtended, LibraryVulnerability
from ..models import LibraryLight, LibraryVulnerabilityLight
from .common import derive_total, or_empty


def _has_severity(severity: str) -> Callable[[LibraryVulnerability], bool]:
    def check(vuln: LibraryVulnerability) -> bool:
        return (vuln.severity_code or "").upper() == severity

    return check


class LibraryMapper:
    """Maps libraries, deriving vulnerability counts from the returned CVE list."""

    @staticmethod
    def to_library_light(library: LibraryExtended) -> LibraryLight:
        vulns = or_empty(library.vulns)
        return LibraryLight(
            file_name=library.file_name,
            version=library.version,
            hash=library.hash,
            group=library.group,
            grade=library.grade,
            class_count=library.class_count,
            classes_used=library.classes_used,
            total_vulnerabilities=derive_total(library.total_vulnerabilities, vulns),
            critical_vulnerabilities=derive_total(library.critical_vulnerabilities, vulns, _has_severity("CRITICAL")),
            high_vulnerabilities=derive_total(library.high_vulnerabilities, vulns, _has_severity("HIGH")),
            vulnerabilities=[
                LibraryVulnerabilityLight(name=v.name, severity=v.severity_code, score=v.severity_value) for v in vulns
            ],
            latest_version=library.latest_version,
            months_outdated=library.months_outdated,
        )
