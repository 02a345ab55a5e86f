"""webql: query JSON documents with path queries and filter them."""

from .document import NodeKind, kind_of
from .errors import (
    ConfigError,
    QueryParseError,
    UnsupportedOperationError,
    VendorError,
    WebqlError,
)
from .filtering import explain, filter_documents, matches, matches_all
from .models import Event, EventKind, Filter, FilterOutcome, Operation
from .query import Aggregate, Key, PathQuery, parse_query, resolve

__all__ = [
    "__version__",
    "Aggregate",
    "ConfigError",
    "Event",
    "EventKind",
    "Filter",
    "FilterOutcome",
    "Key",
    "NodeKind",
    "Operation",
    "PathQuery",
    "QueryParseError",
    "UnsupportedOperationError",
    "VendorError",
    "WebqlError",
    "explain",
    "filter_documents",
    "kind_of",
    "matches",
    "matches_all",
    "parse_query",
    "resolve",
]

__version__ = "0.1.0"
