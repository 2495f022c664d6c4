from typing import Optional

from .base import ToolParams
from ..validation import ValidationContext


class GetProtectRulesParams(ToolParams):
    """Parameters for get_protect_rules."""

    app_id: Optional[str] = None

    @classmethod
    def of(cls, app_id: Optional[str]) -> "GetProtectRulesParams":
        ctx = ValidationContext()
        ctx.require(app_id, "appId")
        return cls._from_context(ctx, app_id=app_id)
