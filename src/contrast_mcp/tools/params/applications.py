from typing import Dict, List, Optional, Union

from .base import ToolParams
from ...client.models import Application
from ..validation import ValidationContext, has_text


class GetSessionMetadataParams(ToolParams):
    """Parameters for get_session_metadata."""

    app_id: Optional[str] = None

    @classmethod
    def of(cls, app_id: Optional[str]) -> "GetSessionMetadataParams":
        ctx = ValidationContext()
        ctx.require(app_id, "appId")
        return cls._from_context(ctx, app_id=app_id)


class ApplicationFilterParams(ToolParams):
    """
    Optional filters for search_applications, combined with AND logic.

    - name: partial, case-insensitive
    - tag: exact, case-sensitive
    - metadata_name / metadata_value: exact, case-insensitive; name alone matches any value
    - metadata_filters: JSON object of field -> value or [values]; every field must match
      one of its values (case-insensitive)
    """

    name: Optional[str] = None
    tag: Optional[str] = None
    metadata_name: Optional[str] = None
    metadata_value: Optional[str] = None
    metadata_filters: Optional[Dict[str, Union[str, List[str]]]] = None

    @classmethod
    def of(
        cls,
        name: Optional[str] = None,
        tag: Optional[str] = None,
        metadata_name: Optional[str] = None,
        metadata_value: Optional[str] = None,
        metadata_filters: Optional[str] = None,
    ) -> "ApplicationFilterParams":
        ctx = ValidationContext()
        ctx.require_if_present(metadata_value, "metadataValue", metadata_name, "metadataName")
        parsed_filters = ctx.metadata_filter(metadata_filters, "metadataFilters")

        return cls._from_context(
            ctx,
            name=name if has_text(name) else None,
            tag=tag if has_text(tag) else None,
            metadata_name=metadata_name if has_text(metadata_name) else None,
            metadata_value=metadata_value if has_text(metadata_value) else None,
            metadata_filters=parsed_filters,
        )

    def matches(self, app: Application) -> bool:
        return (
            self._matches_name(app)
            and self._matches_tag(app)
            and self._matches_metadata(app)
            and self._matches_metadata_filters(app)
        )

    def _matches_name(self, app: Application) -> bool:
        if self.name is None:
            return True
        return app.name is not None and self.name.lower() in app.name.lower()

    def _matches_tag(self, app: Application) -> bool:
        if self.tag is None:
            return True
        return self.tag in (app.tags or [])

    def _matches_metadata(self, app: Application) -> bool:
        if self.metadata_name is None:
            return True
        for entry in app.metadata_entities or []:
            if entry.name is None or entry.name.lower() != self.metadata_name.lower():
                continue
            if self.metadata_value is None:
                return True
            if entry.value is not None and entry.value.lower() == self.metadata_value.lower():
                return True
        return False

    def _matches_metadata_filters(self, app: Application) -> bool:
        if not self.metadata_filters:
            return True
        for field, wanted in self.metadata_filters.items():
            values = {v.lower() for v in ([wanted] if isinstance(wanted, str) else wanted)}
            found = any(
                entry.name is not None
                and entry.name.lower() == field.lower()
                and entry.value is not None
                and (not values or entry.value.lower() in values)
                for entry in app.metadata_entities or []
            )
            if not found:
                return False
        return True
