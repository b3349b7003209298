"""Half-open source ranges shared by the search, scanner and recipe layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AnyStr


@dataclass(frozen=True)
class Span:
    """Offsets ``[start, end)`` into a ``str`` or ``bytes`` source."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            # Local import: errors renders spans, so it imports this module.
            from delimited.errors import PatternError

            raise PatternError(f"Invalid span {self.start}:{self.end}")

    def __len__(self) -> int:
        return self.end - self.start

    def extract(self, source: AnyStr) -> AnyStr:
        return source[self.start : self.end]
