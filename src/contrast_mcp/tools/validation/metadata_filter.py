"""
Parser for metadata filter arguments given as JSON.

Agents pass metadata filters as a JSON object string, e.g. '{"branch": "main"}' or
'{"developer": ["Ellen", "Sam"]}'. Values must be strings, numbers or arrays of those.
The parser reports problems as a message instead of raising, so callers can record
them on a validation context.
"""

import json
from typing import Any, Dict, List, Optional, Tuple, Union

FilterValue = Union[str, List[str]]


def parse_metadata_filter(value: Optional[str], name: str) -> Tuple[Optional[Dict[str, FilterValue]], Optional[str]]:
    """Parse and validate a metadata filter JSON string.

    Args:
        value: The raw JSON string. Blank or None means "no filter".
        name: Parameter name used in error messages.

    Returns:
        A (filters, error) tuple. filters maps field names to a string or list of strings
        and is None when absent, empty or invalid; error is None on success.
    """
    if value is None or not value.strip():
        return None, None

    try:
        raw = json.loads(value)
    except json.JSONDecodeError as e:
        return None, (
            f"Invalid JSON for {name}: {e}. Expected format: "
            '{"field":"value"} or {"field":["value1","value2"]}'
        )

    if not isinstance(raw, dict):
        return None, f'Invalid JSON for {name}: expected an object like {{"field":"value"}}.'
    if not raw:
        return None, None

    result: Dict[str, FilterValue] = {}
    invalid: List[str] = []

    for key, item in raw.items():
        if _is_scalar(item):
            result[key] = _format_scalar(item)
        elif isinstance(item, list):
            if all(entry is None or _is_scalar(entry) for entry in item):
                result[key] = [_format_scalar(entry) for entry in item if entry is not None]
            else:
                invalid.append(f"'{key}' (array contains non-string values)")
        elif item is not None:
            invalid.append(f"'{key}' (expected string or array of strings)")

    if invalid:
        return None, (
            f"Invalid values in {name} for fields: {', '.join(invalid)}. "
            "Values must be strings or arrays of strings."
        )

    return result, None


def _is_scalar(item: Any) -> bool:
    # bool is an int subclass but "true" is not a meaningful metadata value
    return isinstance(item, str) or (isinstance(item, (int, float)) and not isinstance(item, bool))


def _format_scalar(item: Any) -> str:
    if isinstance(item, float) and item.is_integer():
        return str(int(item))
    return str(item)
