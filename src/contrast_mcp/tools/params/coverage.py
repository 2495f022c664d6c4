from typing import Optional

from .base import ToolParams
from ..validation import ValidationContext, has_text


class RouteCoverageParams(ToolParams):
    """
    Parameters for get_route_coverage.

    Session metadata name and value form one filter and must be given together.
    `use_latest_session` wins over a metadata filter when both are present.
    Blank name/value strings are stored as None.
    """

    app_id: Optional[str] = None
    session_metadata_name: Optional[str] = None
    session_metadata_value: Optional[str] = None
    use_latest_session: Optional[bool] = None

    @classmethod
    def of(
        cls,
        app_id: Optional[str],
        session_metadata_name: Optional[str] = None,
        session_metadata_value: Optional[str] = None,
        use_latest_session: Optional[bool] = None,
    ) -> "RouteCoverageParams":
        ctx = ValidationContext()
        ctx.require(app_id, "appId")

        has_name = has_text(session_metadata_name)
        has_value = has_text(session_metadata_value)
        ctx.error_if(
            has_name and not has_value, "sessionMetadataValue is required when sessionMetadataName is provided"
        )
        ctx.error_if(
            has_value and not has_name, "sessionMetadataName is required when sessionMetadataValue is provided"
        )
        ctx.warn_if(
            use_latest_session is True and has_name,
            "Both useLatestSession and sessionMetadataName provided - "
            "useLatestSession takes precedence and sessionMetadata filter will be ignored",
        )

        return cls._from_context(
            ctx,
            app_id=app_id,
            session_metadata_name=session_metadata_name if has_name else None,
            session_metadata_value=session_metadata_value if has_value else None,
            use_latest_session=use_latest_session,
        )

    @property
    def is_use_latest_session(self) -> bool:
        return self.use_latest_session is True

    @property
    def has_session_metadata_filter(self) -> bool:
        return self.session_metadata_name is not None and self.session_metadata_value is not None
