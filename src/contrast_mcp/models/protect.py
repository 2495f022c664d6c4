from typing import List, Optional

from pydantic import Field

from .base import LightModel


class ProtectRuleLight(LightModel):
    """A Protect rule and its mode (block, monitor, off) per environment."""

    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    development: Optional[str] = None
    qa: Optional[str] = None
    production: Optional[str] = None
    can_block: bool = False
    cves: List[str] = Field(default_factory=list)


class ProtectRules(LightModel):
    app_id: Optional[str] = None
    rule_count: int = 0
    rules: List[ProtectRuleLight] = Field(default_factory=list)
