import re
from typing import Optional

from .base import ToolParams
from ..validation import ValidationContext, has_text

# CVE-YYYY-NNNN, sequence number of four or more digits
CVE_PATTERN = re.compile(r"^CVE-\d{4}-\d{4,}$")

CVE_FORMAT_ERROR = (
    "cveId must be in CVE format (e.g., CVE-2021-44228). "
    "Format: CVE-YYYY-NNNNN where YYYY is the year and NNNNN is a sequence number."
)


class ListApplicationsByCveParams(ToolParams):
    """Parameters for list_applications_by_cve."""

    cve_id: Optional[str] = None

    @classmethod
    def of(cls, cve_id: Optional[str]) -> "ListApplicationsByCveParams":
        ctx = ValidationContext()
        ctx.require(cve_id, "cveId")
        # Only check the format when a value was given, so missing and malformed stay distinguishable
        ctx.error_if(has_text(cve_id) and not CVE_PATTERN.fullmatch(cve_id or ""), CVE_FORMAT_ERROR)
        return cls._from_context(ctx, cve_id=cve_id)


class ListApplicationLibrariesParams(ToolParams):
    """Parameters for list_application_libraries."""

    app_id: Optional[str] = None

    @classmethod
    def of(cls, app_id: Optional[str]) -> "ListApplicationLibrariesParams":
        ctx = ValidationContext()
        ctx.require(app_id, "appId")
        return cls._from_context(ctx, app_id=app_id)
