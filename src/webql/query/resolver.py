"""Execute parsed path queries against documents."""

from typing import Any, List, Union

from ..document import NodeKind, kind_of
from .parser import parse_query
from .types import Aggregate, Key, PathQuery, Step


def resolve(document: Any, query: Union[str, PathQuery]) -> List[Any]:
    """Resolve a path query against a document.

    Steps are applied in order over a list of candidate values. A key step
    maps each candidate to its field (dropping candidates without it); an
    aggregate step replaces an array candidate with its elements that carry
    every field in the shape. Absence is not an error: it just leaves
    fewer candidates.

    Args:
        document: Decoded JSON value
        query: Query text or a PathQuery from parse_query()

    Returns:
        Resolved values in document order (possibly empty)

    Raises:
        QueryParseError: If query is a string and is malformed

    Examples:
        >>> resolve({"a": {"b": 5}}, '"a"."b"')
        [5]
        >>> resolve({"labels": [{"name": "x"}, {"other": "y"}]},
        ...         '"labels"|={"name"}."name"')
        ['x']
    """
    path = parse_query(query) if isinstance(query, str) else query

    candidates: List[Any] = [document]
    for step in path.steps:
        candidates = [value for node in candidates for value in _apply(step, node)]
        if not candidates:
            break
    return candidates


def _apply(step: Step, node: Any) -> List[Any]:
    kind = kind_of(node)

    if isinstance(step, Key):
        if kind is NodeKind.OBJECT and step.name in node:
            return [node[step.name]]
        return []

    if isinstance(step, Aggregate):
        if kind is not NodeKind.ARRAY:
            return []
        return [
            element
            for element in node
            if kind_of(element) is NodeKind.OBJECT
            and all(field in element for field in step.shape)
        ]

    raise TypeError(f"unknown step: {step!r}")
