from typing import Optional

from ..client.models import MetadataFilterResponse
from ..models import SessionMetadata, SessionMetadataField, SessionMetadataValue
from .common import or_empty


class SessionMetadataMapper:
    @staticmethod
    def to_session_metadata(response: MetadataFilterResponse, app_id: Optional[str] = None) -> SessionMetadata:
        fields = [
            SessionMetadataField(
                id=f.id,
                label=f.label,
                values=[SessionMetadataValue(value=v.value, count=v.count) for v in or_empty(f.values)],
            )
            for f in or_empty(response.filters)
        ]
        return SessionMetadata(app_id=app_id, total_fields=len(fields), fields=fields)
