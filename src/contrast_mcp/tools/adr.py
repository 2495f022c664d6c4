"""Protect (ADR) tools."""

from typing import Annotated, List, Optional

from pydantic import Field

from .base import SingleTool, ToolResponse
from .params import GetProtectRulesParams
from ..logger import get_logger
from ..mappers import ProtectMapper
from ..models import ProtectRules

logger = get_logger(__name__)

NO_RULES_WARNING = "Application has Protect enabled but no rules are configured."


class GetProtectRulesTool(SingleTool[GetProtectRulesParams]):
    def get_protect_rules(
        self,
        app_id: Annotated[Optional[str], Field(description="Application ID (use search_applications to find)")] = None,
    ) -> ToolResponse:
        """
        Takes an application ID and returns the Protect rules for the application.
        Use search_applications first to get the application ID from a name.

        Returns the protection configuration: rule names (e.g. sql-injection, xss-reflected,
        path-traversal) and the mode of each rule per environment (block, monitor or off).

        Protect/ADR is a premium feature. An application without configured rules returns
        an empty rule list and a warning.

        Related tools:
        - search_applications: Find application IDs by name or tag
        """
        return self.execute_pipeline(lambda: GetProtectRulesParams.of(app_id))

    def do_execute(self, params: GetProtectRulesParams, warnings: List[str]) -> Optional[ProtectRules]:
        logger.debug("Retrieving protection configuration for application ID: %s", params.app_id)
        data = self.client.get_protect_config(self.org_id, params.app_id or "")
        if data is None:
            logger.debug("No protection data returned for application ID: %s", params.app_id)
            return None

        rules = ProtectMapper.to_protect_rules(data, app_id=params.app_id)
        logger.debug("Retrieved %d protection rules for application ID: %s", rules.rule_count, params.app_id)
        if rules.rule_count == 0:
            warnings.append(NO_RULES_WARNING)
        return rules
