"""Node kinds of a decoded JSON document.

Documents are the plain values produced by ``json.loads`` (dict, list,
str, int/float, bool, None). Traversal and comparison dispatch on the
closed set of kinds below rather than probing values ad hoc.
"""

from enum import Enum
from typing import Any, Dict, List, Union

Document = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


class NodeKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOL = "bool"
    NULL = "null"


def kind_of(value: Any) -> NodeKind:
    """Classify a decoded JSON value.

    Raises:
        TypeError: If value is not something json.loads can produce

    Examples:
        >>> kind_of({"a": 1})
        <NodeKind.OBJECT: 'object'>
        >>> kind_of(True)
        <NodeKind.BOOL: 'bool'>
    """
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return NodeKind.BOOL
    if value is None:
        return NodeKind.NULL
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def is_collection(value: Any) -> bool:
    """True for objects and arrays."""
    return kind_of(value) in (NodeKind.OBJECT, NodeKind.ARRAY)


__all__ = ["Document", "NodeKind", "is_collection", "kind_of"]
