from typing import List, Optional

from pydantic import Field

from .base import LightModel


class SessionMetadataValue(LightModel):
    value: Optional[str] = None
    count: int = 0


class SessionMetadataField(LightModel):
    id: Optional[str] = None
    label: Optional[str] = None
    values: List[SessionMetadataValue] = Field(default_factory=list)


class SessionMetadata(LightModel):
    """Session metadata fields (branch, build, committer...) recorded for an application."""

    app_id: Optional[str] = None
    total_fields: int = 0
    fields: List[SessionMetadataField] = Field(default_factory=list)
