"""Path queries over JSON documents.

Syntax:
    "key"                       # object field
    "a"."b"."c"                 # nested fields
    "items"|={"f1","f2"}        # array elements carrying f1 and f2
    "labels"|={"name"}."name"   # then continue per selected element

Keys are always double-quoted, so they may contain '.', '|' and friends.
"""

from .parser import parse_query
from .resolver import resolve
from .types import Aggregate, Key, PathQuery, Step

__all__ = [
    "Aggregate",
    "Key",
    "PathQuery",
    "Step",
    "parse_query",
    "resolve",
]
