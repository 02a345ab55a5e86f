"""Pydantic models for filters and vendor events."""

from .event import Event, EventKind
from .filter import Filter, FilterOutcome, Operation

__all__ = [
    "Event",
    "EventKind",
    "Filter",
    "FilterOutcome",
    "Operation",
]
