"""Recursive-descent parser for path queries.

Grammar:
    query     := segment ( "." segment | aggregate )*
    segment   := quoted
    aggregate := "|=" "{" quoted ( "," quoted )* "}"
    quoted    := '"' ( any char but '"' or '\\' | '\\' any char )+ '"'

At most one aggregate may appear in a query.
"""

from typing import List, Optional, Tuple

from ..errors import QueryParseError
from .types import Aggregate, Key, PathQuery, Step

QUOTE = '"'
ESCAPE = "\\"
AGGREGATE_MARKER = "|="


def parse_query(raw: str) -> PathQuery:
    """Parse a path query string into its steps.

    Args:
        raw: Query text, e.g. '"user"."login"'

    Returns:
        Parsed PathQuery

    Raises:
        QueryParseError: If the query is malformed

    Examples:
        >>> parse_query('"a"."b"').steps
        (Key(name='a'), Key(name='b'))
        >>> parse_query('"labels"|={"name"}."name"').steps
        (Key(name='labels'), Aggregate(shape=('name',)), Key(name='name'))
    """
    if not isinstance(raw, str):
        raise QueryParseError(f"query must be a string, got {type(raw).__name__}")
    if not raw.strip():
        raise QueryParseError("query cannot be empty", raw)
    return _Parser(raw).parse()


class _Parser:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def error(self, message: str, position: Optional[int] = None) -> QueryParseError:
        return QueryParseError(
            message, self.text, self.pos if position is None else position
        )

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self, token: str) -> bool:
        return self.text.startswith(token, self.pos)

    def expect(self, token: str) -> None:
        if not self.peek(token):
            found = "end of query" if self.at_end() else repr(self.text[self.pos])
            raise self.error(f"expected {token!r}, found {found}")
        self.pos += len(token)

    def parse(self) -> PathQuery:
        if self.peek(AGGREGATE_MARKER):
            raise self.error("aggregate marker must follow a key segment")

        steps: List[Step] = [Key(self.quoted("key segment"))]
        seen_aggregate = False

        while not self.at_end():
            if self.peek("."):
                self.pos += 1
                if self.at_end():
                    raise self.error("expected key segment after '.'")
                steps.append(Key(self.quoted("key segment")))
            elif self.peek(AGGREGATE_MARKER):
                if seen_aggregate:
                    raise self.error("only one aggregate marker is allowed per query")
                self.pos += len(AGGREGATE_MARKER)
                steps.append(Aggregate(self.shape()))
                seen_aggregate = True
            else:
                raise self.error(
                    f"unexpected character {self.text[self.pos]!r}, "
                    "expected '.' or '|='"
                )

        return PathQuery(raw=self.text, steps=tuple(steps))

    def shape(self) -> Tuple[str, ...]:
        self.expect("{")
        if self.peek("}"):
            raise self.error("aggregate shape cannot be empty")

        names: List[str] = []
        while True:
            name = self.quoted("shape field")
            if name not in names:
                names.append(name)
            if self.peek(","):
                self.pos += 1
                continue
            self.expect("}")
            return tuple(names)

    def quoted(self, what: str) -> str:
        """Read one double-quoted name, handling backslash escapes."""
        start = self.pos
        if self.at_end():
            raise self.error(f"expected {what}, found end of query")
        if not self.peek(QUOTE):
            raise self.error(
                f"expected quoted {what}, found {self.text[self.pos]!r}"
            )
        self.pos += 1

        chars: List[str] = []
        while not self.at_end():
            char = self.text[self.pos]
            if char == ESCAPE:
                if self.pos + 1 >= len(self.text):
                    break
                chars.append(self.text[self.pos + 1])
                self.pos += 2
                continue
            if char == QUOTE:
                self.pos += 1
                if not chars:
                    raise self.error(f"{what} cannot be empty", start)
                return "".join(chars)
            chars.append(char)
            self.pos += 1

        raise self.error(f"unbalanced quote in {what}", start)
