from typing import List, Optional

from pydantic import Field

from .base import LightModel


class MetadataItem(LightModel):
    name: Optional[str] = None
    value: Optional[str] = None


class ApplicationData(LightModel):
    """An application as returned by search_applications. `last_seen_at` is ISO 8601."""

    name: Optional[str] = None
    status: Optional[str] = None
    app_id: Optional[str] = None
    last_seen_at: Optional[str] = None
    language: Optional[str] = None
    metadata: List[MetadataItem] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)
