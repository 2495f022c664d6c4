from typing import Any, Dict, Set

from ..exceptions import ToolValidationError
from ..logger import get_logger

logger = get_logger(__name__)

_METADATA_KEYS = ("$defs", "$schema", "$id", "title", "definitions")


class SchemaValidator:
    """Checks and flattens generated argument schemas before they are published."""

    @staticmethod
    def assert_no_recursive_refs(schema: Dict[str, Any]) -> None:
        """Raise when a `$ref` cycle exists; recursive inputs cannot be inlined.

        Raises:
            ToolValidationError: If a recursive reference is found.
        """
        defs = schema.get("$defs") or schema.get("definitions") or {}

        def visit(node: Any, seen: Set[str]) -> None:
            if isinstance(node, dict):
                ref = node.get("$ref")
                if ref is not None:
                    if ref in seen:
                        msg = f"Recursive structure detected: {ref}. Recursive structures are not allowed in tool inputs."
                        logger.error(msg)
                        raise ToolValidationError(msg)
                    target = defs.get(ref.rsplit("/", 1)[-1]) if ref.startswith("#") else None
                    if target is not None:
                        visit(target, seen | {ref})
                    return
                for value in node.values():
                    visit(value, seen)
            elif isinstance(node, list):
                for item in node:
                    visit(item, seen)

        visit(schema, set())

    @staticmethod
    def sanitize_schema(schema: Any) -> Any:
        """
        Remove metadata keys ($defs, title, ...) and collapse `anyOf [T, null]` into T.

        Optional arguments show up as `anyOf` with a null branch; the collapsed form is
        easier for agents to read and the null default still marks them optional.
        """
        if not isinstance(schema, dict):
            return schema

        cleaned = {k: v for k, v in schema.items() if k not in _METADATA_KEYS}

        any_of = cleaned.get("anyOf")
        if isinstance(any_of, list):
            non_null = [branch for branch in any_of if branch.get("type") != "null"]
            if len(non_null) == 1 and isinstance(non_null[0], dict):
                merged = {k: v for k, v in cleaned.items() if k != "anyOf"}
                merged.update({k: v for k, v in non_null[0].items() if k not in merged})
                return SchemaValidator.sanitize_schema(merged)

        if cleaned.get("type") == "object":
            cleaned.setdefault("additionalProperties", False)

        for key, value in cleaned.items():
            if isinstance(value, dict):
                cleaned[key] = SchemaValidator.sanitize_schema(value)
            elif isinstance(value, list):
                cleaned[key] = [SchemaValidator.sanitize_schema(item) for item in value]

        return cleaned
