"""Stateless extraction.

Every function here takes the source and an explicit offset (``0`` for the
plain forms), returns the raw span, a converted value or ``None``, and mutates
nothing, so calls may run concurrently against the same source.
"""

from __future__ import annotations

from typing import Any, AnyStr

from delimited.convert import Converter, extract
from delimited.search import bracketed, fixed


def matched(source: AnyStr, delim: AnyStr, into: Converter[Any] | None = None) -> Any:
    """Return the value between the first two occurrences of ``delim``.

    >>> matched("abc:12:def", ":", int)
    12
    """
    return matched_from(source, delim, 0, into)


def matched_from(
    source: AnyStr, delim: AnyStr, offset: int, into: Converter[Any] | None = None
) -> Any:
    return extract(source, bracketed(source, delim, delim, offset), into)


def mismatched(
    source: AnyStr, start: AnyStr, end: AnyStr, into: Converter[Any] | None = None
) -> Any:
    """Return the value between ``start`` and the next ``end`` after it.

    >>> mismatched("abc:12;def", ":", ";")
    '12'
    """
    return mismatched_from(source, start, end, 0, into)


def mismatched_from(
    source: AnyStr,
    start: AnyStr,
    end: AnyStr,
    offset: int,
    into: Converter[Any] | None = None,
) -> Any:
    return extract(source, bracketed(source, start, end, offset), into)


def prefixed(
    source: AnyStr, delim: AnyStr, length: int, into: Converter[Any] | None = None
) -> Any:
    """Return exactly ``length`` units following the first ``delim``.

    >>> prefixed("abc<12def", "<", 2, int)
    12
    """
    return prefixed_from(source, delim, length, 0, into)


def prefixed_from(
    source: AnyStr,
    delim: AnyStr,
    length: int,
    offset: int,
    into: Converter[Any] | None = None,
) -> Any:
    return extract(source, fixed(source, delim, length, offset), into)
