from typing import List, Optional

from pydantic import Field

from .base import LightModel


class CveSummary(LightModel):
    name: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    score: float = 0.0
    references: List[str] = Field(default_factory=list)


class CveImpactStats(LightModel):
    impacted_app_count: int = 0
    total_app_count: int = 0
    impacted_server_count: int = 0
    total_server_count: int = 0
    app_percentage: float = 0.0
    server_percentage: float = 0.0


class CveLibraryLight(LightModel):
    file_name: Optional[str] = None
    version: Optional[str] = None
    hash: Optional[str] = None
    group: Optional[str] = None


class CveApplication(LightModel):
    """
    An application affected by a CVE.

    `class_usage` is the number of classes of the vulnerable library the application
    actually loads; 0 means the vulnerable code is likely not executed.
    """

    name: Optional[str] = None
    app_id: Optional[str] = None
    first_seen_at: Optional[str] = None
    last_seen_at: Optional[str] = None
    importance: Optional[str] = None
    class_count: int = 0
    class_usage: int = 0


class CveImpact(LightModel):
    cve: Optional[CveSummary] = None
    impact_stats: Optional[CveImpactStats] = None
    libraries: List[CveLibraryLight] = Field(default_factory=list)
    apps: List[CveApplication] = Field(default_factory=list)
    server_count: int = 0
