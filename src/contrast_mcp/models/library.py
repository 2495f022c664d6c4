from typing import List, Optional

from pydantic import Field

from .base import LightModel


class LibraryVulnerabilityLight(LightModel):
    name: Optional[str] = None
    severity: Optional[str] = None
    score: Optional[float] = None


class LibraryLight(LightModel):
    """
    A library used by an application.

    `classes_used == 0` usually means the library is never loaded, which makes its
    vulnerabilities unlikely to be exploitable. Vulnerability counts are derived from
    `vulnerabilities` when the API returned them.
    """

    file_name: Optional[str] = None
    version: Optional[str] = None
    hash: Optional[str] = None
    group: Optional[str] = None
    grade: Optional[str] = None
    class_count: int = 0
    classes_used: int = 0
    total_vulnerabilities: int = 0
    critical_vulnerabilities: int = 0
    high_vulnerabilities: int = 0
    vulnerabilities: List[LibraryVulnerabilityLight] = Field(default_factory=list)
    latest_version: Optional[str] = None
    months_outdated: int = 0
