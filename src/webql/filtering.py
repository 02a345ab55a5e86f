"""Filter evaluation: compare resolved values against filter values.

Rules:
- A filter matches when at least one resolved value matches at least one
  of its values (values within a filter are ORed)
- Filters in a list are ANDed; an empty list matches everything
- A query that resolves to nothing never matches
- Both sides are typed at comparison time: number, then date, then string.
  When the two sides disagree the string forms are compared
"""

import json
import logging
import math
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from .dates import try_parse_datetime
from .document import NodeKind, is_collection, kind_of
from .errors import UnsupportedOperationError
from .models.filter import Filter, FilterOutcome, Operation
from .query import PathQuery, resolve

logger = logging.getLogger(__name__)

NUMBER = "number"
DATE = "date"
STRING = "string"


class Typed(NamedTuple):
    """A scalar after coercion."""

    kind: str
    value: Any
    text: str


def parse_number(text: str) -> Optional[Union[int, float]]:
    """Parse a finite decimal number, or return None.

    Integer text stays an exact int; int and float compare exactly.

    Examples:
        >>> parse_number("18")
        18
        >>> parse_number("1e3")
        1000.0
        >>> parse_number("nan") is None
        True
    """
    text = text.strip()
    if not text or "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def coerce(value: Any) -> Typed:
    """Type a scalar JSON value for comparison.

    Args:
        value: String, number, bool or None

    Returns:
        Typed value; kind is "number", "date" or "string"

    Raises:
        TypeError: If value is an object or array

    Examples:
        >>> coerce("21").kind
        'number'
        >>> coerce("2022-10-01T00:00:00Z").kind
        'date'
        >>> coerce(True)
        Typed(kind='string', value='true', text='true')
    """
    kind = kind_of(value)

    if kind is NodeKind.NUMBER:
        return Typed(NUMBER, value, json.dumps(value))

    if kind is NodeKind.STRING:
        number = parse_number(value)
        if number is not None:
            return Typed(NUMBER, number, value)
        date = try_parse_datetime(value)
        if date is not None:
            return Typed(DATE, date, value)
        return Typed(STRING, value, value)

    if kind in (NodeKind.BOOL, NodeKind.NULL):
        text = json.dumps(value)
        return Typed(STRING, text, text)

    raise TypeError(f"cannot coerce {kind.value} for comparison")


def _same_ordered_kind(left: Typed, right: Typed) -> bool:
    return left.kind == right.kind and left.kind in (NUMBER, DATE)


def _equal(value: Any, target: str) -> bool:
    left, right = coerce(value), coerce(target)
    if _same_ordered_kind(left, right):
        return left.value == right.value
    return left.text == right.text


def _greater(value: Any, target: str) -> bool:
    left, right = coerce(value), coerce(target)
    if not _same_ordered_kind(left, right):
        raise UnsupportedOperationError(Operation.GREATER_THAN, value, [target])
    return left.value > right.value


def _lower(value: Any, target: str) -> bool:
    left, right = coerce(value), coerce(target)
    if not _same_ordered_kind(left, right):
        raise UnsupportedOperationError(Operation.LOWER_THAN, value, [target])
    return left.value < right.value


def _contains(value: Any, target: str) -> bool:
    kind = kind_of(value)
    if kind is NodeKind.STRING:
        return target in value
    if kind is NodeKind.ARRAY:
        return any(_equal(item, target) for item in value if not is_collection(item))
    if kind is NodeKind.OBJECT:
        return target in value
    raise UnsupportedOperationError(Operation.CONTAINS, value, [target])


# Pairwise comparisons; NOT_EQUAL is handled per value, not per pair
_PAIR_OPS: Dict[Operation, Callable[[Any, str], bool]] = {
    Operation.EQUAL: _equal,
    Operation.CONTAINS: _contains,
    Operation.GREATER_THAN: _greater,
    Operation.LOWER_THAN: _lower,
}


def _record(errors: List[UnsupportedOperationError], error: UnsupportedOperationError) -> None:
    logger.debug("unsupported comparison: %s", error)
    errors.append(error)


def _value_matches(
    value: Any,
    operation: Operation,
    targets: Sequence[str],
    errors: List[UnsupportedOperationError],
) -> bool:
    """Check one resolved value against every target, collecting errors."""
    kind = kind_of(value)

    # Arrays take part through their elements, except for membership tests
    if kind is NodeKind.ARRAY and operation is not Operation.CONTAINS:
        return any(_value_matches(item, operation, targets, errors) for item in value)

    if kind is NodeKind.OBJECT and operation is not Operation.CONTAINS:
        _record(errors, UnsupportedOperationError(operation, value, targets))
        return False

    if operation is Operation.NOT_EQUAL:
        return not any(_equal(value, target) for target in targets)

    compare = _PAIR_OPS[operation]
    for target in targets:
        try:
            if compare(value, target):
                logger.debug(
                    "value %r matched %r with operation %s",
                    value,
                    target,
                    operation.value,
                )
                return True
        except UnsupportedOperationError as e:
            _record(errors, e)
    return False


def _evaluate(
    values: Iterable[Any],
    operation: Union[Operation, str],
    targets: Union[Sequence[str], str],
) -> Tuple[bool, List[UnsupportedOperationError]]:
    operation = Operation.parse(operation)
    if isinstance(targets, str):
        targets = [targets]

    errors: List[UnsupportedOperationError] = []
    for value in values:
        if _value_matches(value, operation, targets, errors):
            return True, errors
    return False, errors


def matches(
    resolved_values: Iterable[Any],
    operation: Union[Operation, str],
    target_values: Union[Sequence[str], str],
    *,
    strict: bool = False,
) -> bool:
    """Check whether any resolved value matches any target value.

    Args:
        resolved_values: Values a query resolved to
        operation: Operation or its symbol ("=", "!=", "~", ">", "<")
        target_values: Filter values. For "!=" a resolved value matches
            only when it differs from every target value
        strict: Raise instead of returning False when nothing matched and
            some comparison was not defined for the values involved

    Returns:
        True if at least one pair matched

    Raises:
        UnsupportedOperationError: Only in strict mode

    Examples:
        >>> matches(["label-1", "label-2"], "=", ["label-1"])
        True
        >>> matches([21], ">", ["18"])
        True
        >>> matches(["not-a-number"], ">", ["18"])
        False
        >>> matches([], "=", ["x"])
        False
    """
    matched, errors = _evaluate(resolved_values, operation, target_values)
    if strict and not matched and errors:
        raise errors[0]
    return matched


def _resolve_filter(document: Any, item: Filter, path: PathQuery) -> List[Any]:
    values = resolve(document, path)
    if not values:
        logger.debug("query %s resolved to nothing", item.query)
    else:
        logger.debug("query %s resolved to %r", item.query, values)
    return values


def explain(document: Any, item: Filter) -> FilterOutcome:
    """Evaluate one filter and report how it went.

    Unlike matches_all(), the outcome lists every comparison that had no
    defined semantics, so "could not compare" is visible next to a plain
    non-match.

    Raises:
        QueryParseError: If the filter's query is malformed
    """
    values = _resolve_filter(document, item, item.path)
    matched, errors = _evaluate(values, item.operation, item.values)
    return FilterOutcome(
        filter=item,
        values=values,
        matched=matched,
        unsupported=[str(e) for e in errors],
    )


def matches_all(document: Any, filters: Sequence[Filter]) -> bool:
    """Check a document against a list of filters (AND).

    Every query is parsed before anything is evaluated, so a malformed
    filter fails the call even when an earlier filter would not match.

    Args:
        document: Decoded JSON value
        filters: Filters to apply

    Returns:
        True if every filter matches; True for an empty list

    Raises:
        QueryParseError: If any filter's query is malformed
    """
    parsed = [(item, item.path) for item in filters]

    for item, path in parsed:
        values = _resolve_filter(document, item, path)
        matched, _ = _evaluate(values, item.operation, item.values)
        if not matched:
            logger.debug("filter %s did not match", item)
            return False
    return True


def filter_documents(documents: Iterable[Any], filters: Sequence[Filter]) -> Iterator[Any]:
    """Yield the documents that match every filter."""
    for document in documents:
        if matches_all(document, filters):
            yield document


__all__ = [
    "Typed",
    "coerce",
    "explain",
    "filter_documents",
    "matches",
    "matches_all",
    "parse_number",
]
