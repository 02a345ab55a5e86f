"""Step types for parsed path queries."""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Key:
    """Descend into an object's field.

    Resolving against anything but an object, or an object without the
    field, yields no value.
    """

    name: str

    def __str__(self) -> str:
        return _quote(self.name)


@dataclass(frozen=True)
class Aggregate:
    """Select the elements of an array that carry every field in ``shape``.

    Each selected element becomes its own branch for the remaining steps.
    """

    shape: Tuple[str, ...]
    """Required field names, in the order written, without duplicates."""

    def __str__(self) -> str:
        return "|={" + ",".join(_quote(name) for name in self.shape) + "}"


Step = Union[Key, Aggregate]


@dataclass(frozen=True)
class PathQuery:
    """Parsed path query.

    Examples:
        '"user"."login"' → PathQuery(steps=(Key("user"), Key("login")))
        '"labels"|={"name"}."name"' →
            PathQuery(steps=(Key("labels"), Aggregate(("name",)), Key("name")))
    """

    raw: str
    """Query text as given by the caller."""

    steps: Tuple[Step, ...]

    @property
    def has_aggregate(self) -> bool:
        return any(isinstance(step, Aggregate) for step in self.steps)

    def __str__(self) -> str:
        """Canonical text form (re-parses to the same steps)."""
        parts = []
        for step in self.steps:
            if isinstance(step, Key) and parts:
                parts.append(".")
            parts.append(str(step))
        return "".join(parts)


def _quote(name: str) -> str:
    return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'
