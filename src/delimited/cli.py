"""``delimited-extract``: run a recipe over every line of the input."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from contextlib import nullcontext
from typing import Any, ContextManager, TextIO

from delimited.common.logging import configure_logging
from delimited.errors import ParseError, RecipeError, SettingsError
from delimited.recipe.parse import parse_recipe
from delimited.recipe.steps import Recipe
from delimited.settings import Settings, load_settings

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE = 2

STDIN_NAME = "<stdin>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="delimited-extract",
        description="Extract delimited fields from each input line.",
    )
    parser.add_argument("recipe", help='e.g. \'matched ":" as int; prefixed "#" 2\'')
    parser.add_argument("files", nargs="*", help="input files (default: stdin)")
    parser.add_argument("--separator", help="output field separator (default: tab)")
    parser.add_argument("--missing", help="placeholder printed for absent fields")
    parser.add_argument("--log-level", help="logging level (default: WARNING)")
    return parser


def _format(values: Sequence[Any], settings: Settings) -> str:
    return settings.separator.join(
        settings.missing if value is None else str(value) for value in values
    )


def _open(name: str, stdin: TextIO) -> ContextManager[TextIO]:
    if name == STDIN_NAME:
        return nullcontext(stdin)
    return open(name, encoding="utf-8")


def _run_lines(
    recipe: Recipe, name: str, lines: Iterable[str], settings: Settings, stdout: TextIO
) -> int:
    for lineno, line in enumerate(lines, start=1):
        try:
            values = recipe.run(line.rstrip("\r\n"))
        except ParseError as exc:
            LOGGER.error("%s:%d: %s", name, lineno, exc)
            print(f"{name}:{lineno}: error: {exc}", file=sys.stderr)
            return EXIT_PARSE_ERROR
        print(_format(values, settings), file=stdout)
    return EXIT_OK


def run(
    recipe: Recipe,
    files: Sequence[str],
    settings: Settings,
    stdin: TextIO,
    stdout: TextIO,
) -> int:
    for name in files or [STDIN_NAME]:
        LOGGER.info("reading %s", name)
        try:
            with _open(name, stdin) as lines:
                code = _run_lines(recipe, name, lines, settings, stdout)
        except UnicodeDecodeError as exc:
            LOGGER.error("%s: %s", name, exc)
            print(f"{name}: error: {exc}", file=sys.stderr)
            return EXIT_USAGE
        if code != EXIT_OK:
            return code
    return EXIT_OK


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
        overrides = {
            key: value
            for key, value in (
                ("separator", args.separator),
                ("missing", args.missing),
                ("log_level", args.log_level),
            )
            if value is not None
        }
        if overrides:
            settings = settings.updated(**overrides)
    except SettingsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(settings.log_level)
    try:
        recipe = parse_recipe(args.recipe)
    except RecipeError as exc:
        print(f"error: invalid recipe: {exc}", file=sys.stderr)
        return EXIT_USAGE

    LOGGER.debug("recipe has %d steps", len(recipe.steps))
    try:
        return run(
            recipe,
            args.files,
            settings,
            stdin if stdin is not None else sys.stdin,
            stdout if stdout is not None else sys.stdout,
        )
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
