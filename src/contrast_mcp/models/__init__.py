"""Lightweight response models returned by the tools."""

from .base import LightModel
from .route import ObservationLight, RouteLight, RouteCoverageResponseLight
from .library import LibraryLight, LibraryVulnerabilityLight
from .application import ApplicationData, MetadataItem
from .scan import ScanProject
from .protect import ProtectRuleLight, ProtectRules
from .cve import CveApplication, CveImpact, CveImpactStats, CveLibraryLight, CveSummary
from .session import SessionMetadata, SessionMetadataField, SessionMetadataValue

__all__ = [
    "LightModel",
    "ObservationLight",
    "RouteLight",
    "RouteCoverageResponseLight",
    "LibraryLight",
    "LibraryVulnerabilityLight",
    "ApplicationData",
    "MetadataItem",
    "ScanProject",
    "ProtectRuleLight",
    "ProtectRules",
    "CveApplication",
    "CveImpact",
    "CveImpactStats",
    "CveLibraryLight",
    "CveSummary",
    "SessionMetadata",
    "SessionMetadataField",
    "SessionMetadataValue",
]
