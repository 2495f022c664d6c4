"""Parameter validation helpers shared by every tool."""

from .context import ValidationContext, has_text
from .metadata_filter import parse_metadata_filter

__all__ = ["ValidationContext", "has_text", "parse_metadata_filter"]
