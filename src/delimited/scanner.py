"""Stateful extraction over one source.

A :class:`Scanner` owns a cursor that only ever moves forward. Each call
searches from the cursor and, on success, moves it past everything the
search consumed, so repeated extraction walks the source once in total.
Instances are meant for a single sequential reader.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, AnyStr, Generic

from delimited.convert import Converter, extract
from delimited.search import Match, bracketed, fixed

LOGGER = logging.getLogger(__name__)


class Scanner(Generic[AnyStr]):
    def __init__(self, source: AnyStr) -> None:
        self._source = source
        self._cursor = 0

    @property
    def source(self) -> AnyStr:
        return self._source

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def remaining(self) -> AnyStr:
        """The part of the source not yet consumed."""
        return self._source[self._cursor :]

    def __repr__(self) -> str:
        return f"Scanner(source={self._source!r}, cursor={self._cursor})"

    def matched(self, delim: AnyStr, into: Converter[Any] | None = None) -> Any:
        """Consume the next value enclosed by ``delim`` on both sides."""
        match = bracketed(self._source, delim, delim, self._cursor)
        return self._consume(match, into, (delim, delim))

    def mismatched(
        self, start: AnyStr, end: AnyStr, into: Converter[Any] | None = None
    ) -> Any:
        """Consume the next value opened by ``start`` and closed by ``end``."""
        match = bracketed(self._source, start, end, self._cursor)
        return self._consume(match, into, (start, end))

    def prefixed(
        self, delim: AnyStr, length: int, into: Converter[Any] | None = None
    ) -> Any:
        """Consume ``length`` units following the next ``delim``."""
        match = fixed(self._source, delim, length, self._cursor)
        return self._consume(match, into, (delim, length))

    def iter_matched(
        self, delim: AnyStr, into: Converter[Any] | None = None
    ) -> Iterator[Any]:
        """Yield successive ``matched`` values until the first no-match."""
        while (value := self.matched(delim, into)) is not None:
            yield value

    def iter_mismatched(
        self, start: AnyStr, end: AnyStr, into: Converter[Any] | None = None
    ) -> Iterator[Any]:
        while (value := self.mismatched(start, end, into)) is not None:
            yield value

    def _consume(
        self, match: Match | None, into: Converter[Any] | None, delims: tuple[Any, Any]
    ) -> Any:
        if match is None:
            LOGGER.debug("no match for %r from cursor %d", delims, self._cursor)
            return None
        # Convert first: a ParseError must leave the cursor where it was.
        value = extract(self._source, match, into)
        LOGGER.debug(
            "extracted %d:%d for %r, cursor %d -> %d",
            match.span.start,
            match.span.end,
            delims,
            self._cursor,
            match.resume,
        )
        self._cursor = match.resume
        return value


def delim(source: AnyStr) -> Scanner[AnyStr]:
    """Shorthand for ``Scanner(source)``."""
    return Scanner(source)
