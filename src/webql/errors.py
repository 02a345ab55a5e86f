"""Exception hierarchy shared by the query, filter and vendor layers."""

from typing import Any, Optional, Sequence


class WebqlError(Exception):
    """Base class for all webql errors."""

    pass


class QueryParseError(WebqlError, ValueError):
    """Malformed path query.

    Raised before any traversal happens, so a caller can tell a broken
    query apart from a query that simply found nothing.
    """

    def __init__(self, message: str, query: str = "", position: Optional[int] = None):
        self.query = query
        self.position = position
        if position is not None:
            message = f"{message} at position {position} in query {query!r}"
        elif query:
            message = f"{message} in query {query!r}"
        super().__init__(message)


class UnsupportedOperationError(WebqlError):
    """Operation applied to values it has no comparison for.

    Evaluation converts this into a non-match; it only escapes through the
    strict and explain paths.
    """

    def __init__(self, operation: Any, value: Any, targets: Sequence[str] = ()):
        self.operation = operation
        self.value = value
        self.targets = list(targets)
        symbol = getattr(operation, "value", operation)
        super().__init__(
            f"operation {symbol!r} is not defined for value {value!r} "
            f"against {self.targets!r}"
        )


class ConfigError(WebqlError):
    """Unreadable or invalid configuration file."""

    pass


class VendorError(WebqlError):
    """A vendor fetch failed."""

    pass


__all__ = [
    "ConfigError",
    "QueryParseError",
    "UnsupportedOperationError",
    "VendorError",
    "WebqlError",
]
