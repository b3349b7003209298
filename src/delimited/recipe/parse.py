"""Parser for extraction recipes.

A recipe is a ``;``-separated list of scanner extractions::

    matched ":" as int; mismatched "<" ">"; prefixed "#" 2 as hex

``as NAME`` picks a converter from :data:`delimited.convert.CONVERTERS`;
without it a step yields the raw span. ``#`` starts a comment that runs to
the end of the line.
"""

from __future__ import annotations

from typing import cast

import ply.lex as lex  # type: ignore[import-untyped]
import ply.yacc as yacc  # type: ignore[import-untyped]

from delimited.common.span import Span
from delimited.convert import CONVERTERS
from delimited.errors import RecipeError
from delimited.recipe.steps import MatchedStep, MismatchedStep, PrefixedStep, Recipe

_SOURCE: str = ""

reserved = {
    "matched": "MATCHED",
    "mismatched": "MISMATCHED",
    "prefixed": "PREFIXED",
    "as": "AS",
}

tokens = (
    "STRING",
    "INT",
    "IDENT",
    "SEMI",
    *tuple(reserved.values()),
)

t_SEMI = r";"

t_ignore = " \t\r"
t_ignore_COMMENT = r"\#[^\n]*"

_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "t": "\t", "r": "\r"}


def _unescape(body: str, pos: int) -> str:
    out: list[str] = []
    i = 0
    while i < len(body):
        char = body[i]
        if char != "\\":
            out.append(char)
            i += 1
            continue
        escape = body[i + 1]
        if escape not in _ESCAPES:
            span = Span(pos + i, pos + i + 2)
            raise RecipeError(f"Unknown escape \\{escape}", span, _SOURCE)
        out.append(_ESCAPES[escape])
        i += 2
    return "".join(out)


def t_newline(t: lex.LexToken) -> None:
    r"\n+"
    t.lexer.lineno += len(t.value)


def t_STRING(t: lex.LexToken) -> lex.LexToken:
    r'"(?:[^"\\\n]|\\.)*"'
    t.end = t.lexpos + len(t.value)
    t.value = _unescape(t.value[1:-1], t.lexpos + 1)
    return t


def t_INT(t: lex.LexToken) -> lex.LexToken:
    r"\d+"
    t.end = t.lexpos + len(t.value)
    t.value = int(t.value)
    return t


def t_IDENT(t: lex.LexToken) -> lex.LexToken:
    r"[A-Za-z_][A-Za-z0-9_]*"
    t.type = reserved.get(t.value, "IDENT")
    t.end = t.lexpos + len(t.value)
    return t


def t_error(t: lex.LexToken) -> None:
    span = Span(t.lexpos, t.lexpos + 1)
    if t.value[0] == '"':
        raise RecipeError("Unterminated string", span, _SOURCE)
    raise RecipeError(f"Unexpected character {t.value[0]!r}", span, _SOURCE)


def _tok_span(tok: lex.LexToken) -> Span:
    end = getattr(tok, "end", tok.lexpos + len(str(tok.value)))
    return Span(tok.lexpos, end)


def _step_span(p: yacc.YaccProduction, last: Span, conversion: tuple[str, Span] | None) -> Span:
    keyword = cast(lex.LexToken, p.slice[1])
    end = last.end if conversion is None else conversion[1].end
    return Span(keyword.lexpos, end)


def _into(conversion: tuple[str, Span] | None) -> str | None:
    return None if conversion is None else conversion[0]


def p_recipe(p: yacc.YaccProduction) -> None:
    """recipe : steps
    | steps SEMI"""
    p[0] = Recipe(steps=p[1])


def p_steps_multi(p: yacc.YaccProduction) -> None:
    "steps : steps SEMI step"
    p[0] = p[1] + (p[3],)


def p_steps_single(p: yacc.YaccProduction) -> None:
    "steps : step"
    p[0] = (p[1],)


def p_step_matched(p: yacc.YaccProduction) -> None:
    "step : MATCHED delimiter conversion"
    delim, delim_span = p[2]
    span = _step_span(p, delim_span, p[3])
    p[0] = MatchedStep(span=span, into=_into(p[3]), delim=delim)


def p_step_mismatched(p: yacc.YaccProduction) -> None:
    "step : MISMATCHED delimiter delimiter conversion"
    start, _ = p[2]
    end, end_span = p[3]
    span = _step_span(p, end_span, p[4])
    p[0] = MismatchedStep(span=span, into=_into(p[4]), start=start, end=end)


def p_step_prefixed(p: yacc.YaccProduction) -> None:
    "step : PREFIXED delimiter length conversion"
    delim, _ = p[2]
    length, length_span = p[3]
    span = _step_span(p, length_span, p[4])
    p[0] = PrefixedStep(span=span, into=_into(p[4]), delim=delim, length=length)


def p_delimiter(p: yacc.YaccProduction) -> None:
    "delimiter : STRING"
    span = _tok_span(cast(lex.LexToken, p.slice[1]))
    if not p[1]:
        raise RecipeError("Delimiter must not be empty", span, _SOURCE)
    p[0] = (p[1], span)


def p_length(p: yacc.YaccProduction) -> None:
    "length : INT"
    span = _tok_span(cast(lex.LexToken, p.slice[1]))
    if p[1] < 1:
        raise RecipeError("Length must be positive", span, _SOURCE)
    p[0] = (p[1], span)


def p_conversion(p: yacc.YaccProduction) -> None:
    "conversion : AS IDENT"
    name_span = _tok_span(cast(lex.LexToken, p.slice[2]))
    if p[2] not in CONVERTERS:
        raise RecipeError(f"Unknown type {p[2]!r}", name_span, _SOURCE)
    as_tok = cast(lex.LexToken, p.slice[1])
    p[0] = (p[2], Span(as_tok.lexpos, name_span.end))


def p_conversion_empty(p: yacc.YaccProduction) -> None:
    "conversion :"
    p[0] = None


def p_error(p: lex.LexToken | None) -> None:
    if p is None:
        span = Span(len(_SOURCE), len(_SOURCE))
        raise RecipeError("Unexpected end of recipe", span, _SOURCE)
    span = _tok_span(cast(lex.LexToken, p))
    raise RecipeError("Unexpected token", span, _SOURCE)


_PARSER = None


def parse_recipe(source: str) -> Recipe:
    global _SOURCE, _PARSER
    _SOURCE = source
    lexer = lex.lex()
    if _PARSER is None:
        _PARSER = yacc.yacc(start="recipe", debug=False, write_tables=False)
    recipe = cast(Recipe, _PARSER.parse(source, lexer=lexer))
    if recipe is None:
        span = Span(len(source), len(source))
        raise RecipeError("Empty recipe", span, source)
    return recipe
