"""
Comparator construction for header-driven sorting.

A comparator is a two-argument function returning -1, 0 or 1. Header cells
build one from a value extractor, a base comparator, an attribute name and
a sort order (-1 or 1).
"""
from typing import Any, Callable, Optional

from gridsort.data.collection import validate_order

Comparator = Callable[[Any, Any], int]
ValueExtractor = Callable[[Any, str], Any]


def default_value(record: Any, attr: str) -> Any:
    """Read ``attr`` from a record (or a plain mapping)."""
    return record.get(attr)


def default_comparator(left: Any, right: Any) -> int:
    """Tri-state comparison using == and <. Missing values (None) sort first."""
    if left == right:
        return 0
    elif left is None:
        return -1
    elif right is None:
        return 1
    elif left < right:
        return -1
    return 1


def cid_comparator(left: Any, right: Any) -> int:
    """
    Insertion-order comparator.

    Orders records by their creation sequence number and never by attribute
    value. Records without a cid compare equal.
    """
    lcid = getattr(left, "cid", None)
    rcid = getattr(right, "cid", None)
    if lcid is not None and rcid is not None:
        if lcid < rcid:
            return -1
        elif lcid > rcid:
            return 1
    return 0


def make_comparator(
    attr: Optional[str],
    order: Optional[int],
    *,
    comparator: Comparator = default_comparator,
    value: ValueExtractor = default_value,
) -> Optional[Comparator]:
    """
    Build a record comparator for one attribute.

    Args:
        attr: Attribute to compare on
        order: -1 compares (left, right) as given, 1 swaps the operands
        comparator: Base comparator applied to the extracted values
        value: Value extractor, called as value(record, attr)

    Returns:
        The comparator, or None when attr or order is missing (the caller
        falls back to insertion order)

    Raises:
        InvalidOrderError: If order is not -1, 1 or None
    """
    if not attr or not validate_order(order):
        return None

    if order == 1:
        def compare(left, right):
            return comparator(value(right, attr), value(left, attr))
    else:
        def compare(left, right):
            return comparator(value(left, attr), value(right, attr))

    return compare
