from ..client.models import Application
from ..models import ApplicationData, MetadataItem
from .common import format_timestamp, or_empty


class ApplicationMapper:
    @staticmethod
    def to_application_data(app: Application) -> ApplicationData:
        return ApplicationData(
            name=app.name,
            status=app.status,
            app_id=app.app_id,
            last_seen_at=format_timestamp(app.last_seen),
            language=app.language,
            metadata=[MetadataItem(name=m.name, value=m.value) for m in or_empty(app.metadata_entities)],
            tags=or_empty(app.tags),
            technologies=or_empty(app.techs),
        )
