"""Error types.

No-match is never an exception: extraction functions return ``None`` for it.
The classes here cover the remaining outcomes, each a contract violation of
some kind:

* :class:`PatternError` - the caller passed an unusable delimiter, offset or
  length. It is a ``ValueError`` so generic argument handling applies.
* :class:`ParseError` - a span was found but could not be converted to the
  requested type. Deliberately *not* a ``ValueError``: code that guards
  against bad arguments must not swallow corrupted data.
* :class:`RecipeError` - the recipe text is malformed.
* :class:`SettingsError` - the environment configuration is invalid.
"""

from __future__ import annotations

from dataclasses import dataclass

from delimited.common.span import Span


def _render(message: str, span: Span | None, source: str | bytes | None) -> str:
    if span is None:
        return message
    if source is None:
        return f"{message} @ {span.start}:{span.end}"
    snippet = span.extract(source)
    return f"{message} @ {span.start}:{span.end}: {snippet!r}"


@dataclass
class PatternError(ValueError):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ParseError(Exception):
    message: str
    span: Span
    source: str | bytes | None = None

    def __str__(self) -> str:
        return _render(self.message, self.span, self.source)


@dataclass
class RecipeError(Exception):
    message: str
    span: Span
    source: str | None = None

    def __str__(self) -> str:
        return _render(self.message, self.span, self.source)


@dataclass
class SettingsError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message
