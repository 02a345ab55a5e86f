"""Filter and operation models."""

from __future__ import annotations

import json
from datetime import date
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..query import PathQuery, parse_query


class Operation(str, Enum):
    """Comparison applied between resolved values and filter values."""

    EQUAL = "="
    NOT_EQUAL = "!="
    CONTAINS = "~"
    GREATER_THAN = ">"
    LOWER_THAN = "<"

    @classmethod
    def parse(cls, raw: Any) -> "Operation":
        """Look up an operation by symbol, member name or alias.

        Examples:
            >>> Operation.parse("=")
            <Operation.EQUAL: '='>
            >>> Operation.parse("contains")
            <Operation.CONTAINS: '~'>
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            raise ValueError(f"unknown operation: {raw!r}")
        key = raw.strip().lower()
        for operation in cls:
            if key == operation.value or key == operation.name.lower():
                return operation
        if key in _ALIASES:
            return cls(_ALIASES[key])
        raise ValueError(f"unknown operation: {raw!r}")


_ALIASES = {
    "==": "=",
    "eq": "=",
    "ne": "!=",
    "gt": ">",
    "lt": "<",
}


class Filter(BaseModel):
    """One predicate: a path query, an operation and its target values.

    Filters in a list are ANDed; values within one filter are ORed.
    """

    model_config = ConfigDict(frozen=True)

    query: str
    operation: Operation
    values: List[str] = Field(min_length=1)

    @field_validator("operation", mode="before")
    @classmethod
    def parse_operation(cls, v: Any) -> Operation:
        return Operation.parse(v)

    @field_validator("values", mode="before")
    @classmethod
    def stringify_values(cls, v: Any) -> Any:
        """Accept a bare scalar and non-string scalars from config files.

        Unquoted YAML dates and timestamps are rendered in ISO 8601.
        """

        if isinstance(v, (str, int, float, bool, date)) or v is None:
            v = [v]
        if isinstance(v, (list, tuple)):
            return [_stringify(item) for item in v]
        return v

    @property
    def path(self) -> PathQuery:
        """Parsed query; raises QueryParseError when malformed."""

        return parse_query(self.query)

    def __str__(self) -> str:
        return f"{self.query} {self.operation.value} {self.values}"


def _stringify(value: Any) -> Any:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None or isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, date):
        return value.isoformat()
    # Leave anything else for pydantic to reject
    return value


class FilterOutcome(BaseModel):
    """Diagnostic result of evaluating one filter against one document."""

    filter: Filter
    values: List[Any] = Field(default_factory=list)
    """Values the query resolved to."""

    matched: bool = False
    unsupported: List[str] = Field(default_factory=list)
    """One message per comparison that had no defined semantics."""

    @property
    def is_unsupported(self) -> bool:
        """True when nothing matched and some comparison was unsupported."""

        return not self.matched and bool(self.unsupported)


__all__ = ["Filter", "FilterOutcome", "Operation"]
