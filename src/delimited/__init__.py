"""Delimited-value extraction: stateless functions and a forward-only scanner."""

from delimited.common.span import Span
from delimited.convert import CONVERTERS, boolean, decoded, hex_int
from delimited.errors import ParseError, PatternError, RecipeError, SettingsError
from delimited.recipe.parse import parse_recipe
from delimited.scanner import Scanner, delim
from delimited.search import Match, bracketed, fixed, search
from delimited.static import (
    matched,
    matched_from,
    mismatched,
    mismatched_from,
    prefixed,
    prefixed_from,
)

__all__ = [
    "CONVERTERS",
    "Match",
    "ParseError",
    "PatternError",
    "RecipeError",
    "Scanner",
    "SettingsError",
    "Span",
    "boolean",
    "bracketed",
    "decoded",
    "delim",
    "fixed",
    "hex_int",
    "matched",
    "matched_from",
    "mismatched",
    "mismatched_from",
    "parse_recipe",
    "prefixed",
    "prefixed_from",
    "search",
]
