"""Recipe steps: one scanner extraction each."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from delimited.common.span import Span
from delimited.convert import CONVERTERS, Converter
from delimited.scanner import Scanner


@dataclass(frozen=True)
class Step:
    span: Span
    into: str | None

    @property
    def converter(self) -> Converter[Any] | None:
        return None if self.into is None else CONVERTERS[self.into]

    def apply(self, scanner: Scanner[str]) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class MatchedStep(Step):
    delim: str

    def apply(self, scanner: Scanner[str]) -> Any:
        return scanner.matched(self.delim, self.converter)


@dataclass(frozen=True)
class MismatchedStep(Step):
    start: str
    end: str

    def apply(self, scanner: Scanner[str]) -> Any:
        return scanner.mismatched(self.start, self.end, self.converter)


@dataclass(frozen=True)
class PrefixedStep(Step):
    delim: str
    length: int

    def apply(self, scanner: Scanner[str]) -> Any:
        return scanner.prefixed(self.delim, self.length, self.converter)


@dataclass(frozen=True)
class Recipe:
    steps: tuple[Step, ...]

    def run(self, source: str) -> list[Any]:
        """Apply every step to a fresh scanner over ``source``.

        A step that finds nothing yields ``None`` and leaves the cursor in
        place for the steps after it.
        """
        scanner = Scanner(source)
        return [step.apply(scanner) for step in self.steps]
