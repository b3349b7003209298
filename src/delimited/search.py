"""Bracketed search: the one forward-search routine every extractor uses.

A search finds the first ``start`` pattern at or after an offset and then
terminates the span either at the next ``end`` pattern (bracketed mode) or a
fixed number of units later (prefixed mode). Offsets are measured in the
units of the source: code points for ``str``, bytes for ``bytes``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AnyStr

from delimited.common.span import Span
from delimited.errors import PatternError


@dataclass(frozen=True)
class Match:
    """A successful search.

    Attributes:
        span: The content strictly between the delimiters.
        resume: First offset after everything the search consumed; the point
            a scanner continues from.
    """

    span: Span
    resume: int

    def extract(self, source: AnyStr) -> AnyStr:
        return self.span.extract(source)


def _check_pattern(source: str | bytes, pattern: object, role: str) -> None:
    if not isinstance(pattern, (str, bytes)) or isinstance(pattern, str) != isinstance(
        source, str
    ):
        kind = type(source).__name__
        raise PatternError(f"{role} delimiter must be {kind}, got {pattern!r}")
    if not pattern:
        raise PatternError(f"{role} delimiter must not be empty")


def search(
    source: AnyStr, start: AnyStr, stop: AnyStr | int, offset: int = 0
) -> Match | None:
    """Locate the span opened by ``start`` and closed by ``stop``.

    Args:
        source: Text to search. Never copied; only offsets are computed.
        start: Opening delimiter. The first occurrence at or after ``offset``
            is used, with no backtracking to later occurrences.
        stop: Either the closing delimiter, searched for strictly after the
            opening match, or a positive length taken immediately after it.
        offset: Where the search for ``start`` begins. Offsets past the end
            of ``source`` simply find nothing.

    Returns:
        The match, or ``None`` when a delimiter is missing, too few units
        remain for a fixed length, or the content would be empty.

    Raises:
        PatternError: On an empty or wrongly typed delimiter, a negative
            offset or a non-positive length.
    """
    _check_pattern(source, start, "start")
    if isinstance(stop, int):
        if isinstance(stop, bool) or stop < 1:
            raise PatternError(f"length must be a positive integer, got {stop!r}")
    else:
        _check_pattern(source, stop, "end")
    if offset < 0:
        raise PatternError(f"offset must not be negative, got {offset}")

    opened = source.find(start, offset)
    if opened < 0:
        return None
    content_start = opened + len(start)

    if isinstance(stop, int):
        content_end = content_start + stop
        if content_end > len(source):
            return None
        resume = content_end
    else:
        content_end = source.find(stop, content_start)
        if content_end < 0:
            return None
        resume = content_end + len(stop)

    # Adjacent delimiters: an empty value counts as absent.
    if content_end == content_start:
        return None
    return Match(Span(content_start, content_end), resume)


def bracketed(source: AnyStr, start: AnyStr, end: AnyStr, offset: int = 0) -> Match | None:
    """Search for content between ``start`` and ``end``."""
    return search(source, start, end, offset)


def fixed(source: AnyStr, delim: AnyStr, length: int, offset: int = 0) -> Match | None:
    """Search for ``length`` units immediately following ``delim``."""
    return search(source, delim, length, offset)
