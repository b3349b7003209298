"""Typed parsing of extracted spans.

A converter is any callable that accepts the raw span and either returns a
value or raises ``ValueError`` or ``ArithmeticError``. Any other exception,
such as a ``TypeError`` from a converter with the wrong signature, is a bug in
the caller and propagates unchanged. Builtins such as ``int``, ``float`` and
``decimal.Decimal`` already qualify. The span is handed over untouched: no
trimming, case folding or unescaping happens here.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any, AnyStr, TypeVar

from delimited.common.span import Span
from delimited.errors import ParseError
from delimited.search import Match

T = TypeVar("T")

Converter = Callable[[Any], T]

_CONVERSION_ERRORS = (ValueError, ArithmeticError)

_TRUE = frozenset({"true", "1", "yes"})
_FALSE = frozenset({"false", "0", "no"})


def _converter_name(into: Callable[..., object]) -> str:
    return getattr(into, "__name__", None) or type(into).__name__


def convert(text: AnyStr, into: Converter[T], span: Span, source: AnyStr | None = None) -> T:
    """Apply ``into`` to ``text``, turning conversion failures into ``ParseError``."""
    try:
        return into(text)
    except _CONVERSION_ERRORS as exc:
        raise ParseError(
            f"Cannot parse {text!r} as {_converter_name(into)}", span, source
        ) from exc


def extract(source: AnyStr, match: Match | None, into: Converter[T] | None = None) -> Any:
    """Slice a search result out of ``source`` and optionally convert it.

    Returns ``None`` for a missing match, the raw span when ``into`` is
    ``None``, and the converted value otherwise.
    """
    if match is None:
        return None
    text = match.extract(source)
    if into is None:
        return text
    return convert(text, into, match.span, source)


def boolean(text: str | bytes) -> bool:
    """Parse ``true/false``, ``yes/no`` or ``1/0`` in any letter case."""
    word = text.decode("ascii") if isinstance(text, bytes) else text
    if word.lower() in _TRUE:
        return True
    if word.lower() in _FALSE:
        return False
    raise ValueError(f"not a boolean: {text!r}")


def hex_int(text: str | bytes) -> int:
    return int(text, 16)


def decoded(encoding: str = "utf-8") -> Converter[str]:
    """Return a converter that strictly decodes a ``bytes`` span.

    A span cut through the middle of a multi-byte character fails with
    ``UnicodeDecodeError``, which surfaces as a ``ParseError``.
    """

    def decode(text: bytes) -> str:
        if not isinstance(text, bytes):
            raise ValueError(f"expected bytes, got {type(text).__name__}")
        return text.decode(encoding)

    decode.__name__ = f"decoded({encoding})"
    return decode


CONVERTERS: dict[str, Converter[Any]] = {
    "str": str,
    "int": int,
    "float": float,
    "decimal": Decimal,
    "bool": boolean,
    "hex": hex_int,
}
