from typing import Optional

from ..client.models import ProtectData, ProtectRule
from ..models import ProtectRuleLight, ProtectRules
from .common import or_empty


class ProtectMapper:
    @staticmethod
    def to_rule_light(rule: ProtectRule) -> ProtectRuleLight:
        return ProtectRuleLight(
            name=rule.name,
            type=rule.type,
            description=rule.description,
            development=rule.development,
            qa=rule.qa,
            production=rule.production,
            can_block=bool(rule.can_block),
            cves=[c.name for c in or_empty(rule.cves) if c.name],
        )

    @classmethod
    def to_protect_rules(cls, data: ProtectData, app_id: Optional[str] = None) -> ProtectRules:
        rules = [cls.to_rule_light(r) for r in or_empty(data.rules)]
        return ProtectRules(app_id=app_id, rule_count=len(rules), rules=rules)
