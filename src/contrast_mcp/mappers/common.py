"""Small helpers shared by the mappers."""

from datetime import datetime
from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def derive_total(reported: Optional[int], items: Optional[Sequence[T]], predicate: Optional[Callable[[T], bool]] = None) -> int:
    """Count items, falling back to the API-reported total when the list is missing or empty.

    Some API versions report a vulnerability total while returning an empty `vulns`
    array, so an empty list cannot be trusted to mean zero.

    Args:
        reported: The total reported by the API, possibly None.
        items: The detail collection, possibly None.
        predicate: Optional filter; only matching items are counted.

    Returns:
        The derived count.
    """
    if not items:
        return reported or 0
    if predicate is None:
        return len(items)
    return sum(1 for item in items if predicate(item))


def format_timestamp(epoch_millis: Optional[int]) -> Optional[str]:
    """Render epoch milliseconds as local-time ISO 8601 with a numeric offset, e.g. '2025-01-15T10:30:00-05:00'."""
    if epoch_millis is None:
        return None
    return datetime.fromtimestamp(epoch_millis / 1000).astimezone().isoformat(timespec="seconds")


def or_empty(values: Optional[List[T]]) -> List[T]:
    return list(values) if values else []
