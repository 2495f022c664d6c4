"""Pure functions from vendor response models to lightweight DTOs."""

from .common import derive_total, format_timestamp
from .route_mapper import RouteMapper
from .library_mapper import LibraryMapper
from .application_mapper import ApplicationMapper
from .sast_mapper import SastMapper
from .protect_mapper import ProtectMapper
from .cve_mapper import CveMapper
from .session_mapper import SessionMetadataMapper

__all__ = [
    "derive_total",
    "format_timestamp",
    "RouteMapper",
    "LibraryMapper",
    "ApplicationMapper",
    "SastMapper",
    "ProtectMapper",
    "CveMapper",
    "SessionMetadataMapper",
]
