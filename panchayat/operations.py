"""Higher-order helpers for filtering, sorting and reshaping records.

Records are plain mappings (e.g. ``{"name": "Punjab Dhaba", "rating": 4.5}``)
or objects with matching attributes, such as Result.
"""

import operator as op
from collections.abc import Callable, Iterable, Mapping
from typing import Any

Record = Mapping[str, Any]

OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    ">": op.gt,
    "<": op.lt,
    ">=": op.ge,
    "<=": op.le,
    "===": op.eq,
}


def _get(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def create_filter(field: str, operator: str, value: Any) -> Callable[[Record], bool]:
    """Return a predicate comparing ``record[field]`` against ``value``.

    Supported operators are ``>``, ``<``, ``>=``, ``<=`` and ``===``. For any
    other operator the predicate rejects everything.

    Example:
        >>> high_rated = create_filter("rating", ">=", 4)
        >>> high_rated({"name": "Punjab Dhaba", "rating": 4.5})
        True
    """
    compare = OPERATORS.get(operator)
    if compare is None:
        return lambda record: False

    def predicate(record: Record) -> bool:
        actual = _get(record, field)
        if actual is None:
            return False
        return compare(actual, value)

    return predicate


def create_sorter(field: str, order: str = "asc") -> Callable[[Any, Any], int]:
    """Return a comparator ordering records by ``field``.

    The comparator returns a negative number when its first argument sorts
    first, so it can be passed to functools.cmp_to_key or to
    ElectionRegistry.get_results. Works for numbers and strings; an order
    other than "asc" or "desc" leaves records in place.
    """
    def compare(a: Any, b: Any) -> int:
        left, right = _get(a, field), _get(b, field)
        if order == "asc":
            return (left > right) - (left < right)
        if order == "desc":
            return (right > left) - (right < left)
        return 0

    return compare


def create_mapper(fields: Iterable[str]) -> Callable[[Record], dict[str, Any]]:
    """Return a function that keeps only ``fields`` of a record, as a new dict."""
    wanted = set(fields)

    def project(record: Record) -> dict[str, Any]:
        return {key: value for key, value in record.items() if key in wanted}

    return project


def apply_operations(data: list, *operations: Callable[[list], list]) -> list:
    """Pipe ``data`` through each operation in turn.

    Returns [] if ``data`` isn't a list.
    """
    if not isinstance(data, list):
        return []
    for operation in operations:
        data = operation(data)
    return data
