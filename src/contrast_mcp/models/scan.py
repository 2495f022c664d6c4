from typing import List, Optional

from pydantic import Field

from .base import LightModel


class ScanProject(LightModel):
    """A SAST scan project with per-severity finding counts of its latest scan."""

    id: Optional[str] = None
    name: Optional[str] = None
    organization_id: Optional[str] = None
    archived: bool = False
    language: Optional[str] = None
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    note: int = 0
    last_scan_id: Optional[str] = None
    last_scan_time: Optional[str] = None
    completed_scans: int = 0
    include_namespace_filters: List[str] = Field(default_factory=list)
    exclude_namespace_filters: List[str] = Field(default_factory=list)
