"""Error/warning accumulator used while parsing raw tool arguments."""

from typing import Any, Dict, List, Optional

from .metadata_filter import parse_metadata_filter


def has_text(value: Optional[str]) -> bool:
    """True when value is a string with at least one non-whitespace character."""
    return value is not None and bool(str(value).strip())


class ValidationContext:
    """
    Collects validation errors and warnings for one parse call.

    Errors make the parameters invalid and stop the tool before any API call.
    Warnings are informational (applied defaults, clamped values, ignored filters)
    and travel with the response. Nothing here raises.

    Example:
        ctx = ValidationContext()
        ctx.require(app_id, "appId")
        page_size = ctx.int_param(page_size, "pageSize", default=50, minimum=1, maximum=100)
        if not ctx.is_valid():
            ...
    """

    def __init__(self) -> None:
        self._errors: List[str] = []
        self._warnings: List[str] = []

    def require(self, value: Optional[str], name: str) -> None:
        """Record '<name> is required' when value is missing or blank."""
        if not has_text(value):
            self._errors.append(f"{name} is required")

    def require_if_present(self, dependent: Optional[str], dep_name: str, required: Optional[str], req_name: str) -> None:
        """Record an error when `dependent` is given without `required`."""
        if has_text(dependent) and not has_text(required):
            self._errors.append(f"{dep_name} requires {req_name} to be specified")

    def error_if(self, condition: bool, message: str) -> None:
        """Record message as an error when condition holds."""
        if condition:
            self._errors.append(message)

    def warn_if(self, condition: bool, message: str) -> None:
        """Record message as a warning when condition holds."""
        if condition:
            self._warnings.append(message)

    def add_error(self, message: str) -> None:
        """Record an error unconditionally."""
        self._errors.append(message)

    def add_warning(self, message: str) -> None:
        """Record a warning unconditionally."""
        self._warnings.append(message)

    def int_param(
        self,
        value: Optional[int],
        name: str,
        default: Optional[int] = None,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
        default_reason: Optional[str] = None,
    ) -> Optional[int]:
        """Resolve an optional integer: apply the default, then clamp into range.

        Args:
            value: Raw value, possibly None.
            name: Parameter name used in warnings.
            default: Value used when `value` is None.
            minimum: Inclusive lower bound.
            maximum: Inclusive upper bound.
            default_reason: Warning recorded when the default is applied.

        Returns:
            The resolved value, or None when both value and default are None.
        """
        if value is None:
            if default is not None and default_reason:
                self._warnings.append(default_reason)
            return default

        if minimum is not None and value < minimum:
            self._warnings.append(f"{name} clamped from {value} to minimum {minimum}")
            return minimum
        if maximum is not None and value > maximum:
            self._warnings.append(f"{name} clamped from {value} to maximum {maximum}")
            return maximum
        return value

    def metadata_filter(self, value: Optional[str], name: str) -> Optional[Dict[str, Any]]:
        """Parse a metadata filter JSON string, recording parse problems as errors."""
        result, error = parse_metadata_filter(value, name)
        if error:
            self._errors.append(error)
        return result

    def is_valid(self) -> bool:
        """True when no error has been recorded."""
        return not self._errors

    def errors(self) -> List[str]:
        """Copy of the errors recorded so far, in order."""
        return list(self._errors)

    def warnings(self) -> List[str]:
        """Copy of the warnings recorded so far, in order."""
        return list(self._warnings)
