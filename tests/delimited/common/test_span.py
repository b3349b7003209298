import pytest

from delimited.common.span import Span
from delimited.errors import PatternError


def test_extract_str_and_bytes() -> None:
    span = Span(4, 6)
    assert span.extract("abc:12;def") == "12"
    assert span.extract(b"abc:12;def") == b"12"


def test_len() -> None:
    assert len(Span(3, 3)) == 0
    assert len(Span(2, 7)) == 5


@pytest.mark.parametrize(("start", "end"), [(-1, 2), (5, 4)])
def test_invalid_span(start: int, end: int) -> None:
    with pytest.raises(PatternError, match="Invalid span"):
        Span(start, end)
