import pytest

from delimited.common.span import Span
from delimited.errors import RecipeError
from delimited.recipe.parse import parse_recipe
from delimited.recipe.steps import MatchedStep, MismatchedStep, PrefixedStep


def test_single_matched_step() -> None:
    recipe = parse_recipe('matched ":"')
    assert recipe.steps == (MatchedStep(span=Span(0, 11), into=None, delim=":"),)


def test_all_step_forms() -> None:
    src = 'matched ":" as int; mismatched "<" ">"; prefixed "#" 2 as hex;'
    recipe = parse_recipe(src)
    matched, mismatched, prefixed = recipe.steps
    assert matched == MatchedStep(span=Span(0, 18), into="int", delim=":")
    assert isinstance(mismatched, MismatchedStep)
    assert (mismatched.start, mismatched.end, mismatched.into) == ("<", ">", None)
    assert mismatched.span.extract(src) == 'mismatched "<" ">"'
    assert isinstance(prefixed, PrefixedStep)
    assert (prefixed.delim, prefixed.length, prefixed.into) == ("#", 2, "hex")
    assert prefixed.span.extract(src) == 'prefixed "#" 2 as hex'


def test_multi_character_and_escaped_delimiters() -> None:
    recipe = parse_recipe(r'mismatched "\"" "\\"; matched "\t"; matched "<<"')
    first, second, third = recipe.steps
    assert isinstance(first, MismatchedStep)
    assert (first.start, first.end) == ('"', "\\")
    assert isinstance(second, MatchedStep) and second.delim == "\t"
    assert isinstance(third, MatchedStep) and third.delim == "<<"


def test_comments_and_newlines() -> None:
    src = """
    # header id
    matched ":" as int;  # trailing comment
    prefixed "#" 3
    """
    recipe = parse_recipe(src)
    assert len(recipe.steps) == 2
    prefixed = recipe.steps[1]
    assert isinstance(prefixed, PrefixedStep) and prefixed.delim == "#"


def test_empty_delimiter_rejected() -> None:
    with pytest.raises(RecipeError, match="Delimiter must not be empty") as info:
        parse_recipe('matched ""')
    assert info.value.span == Span(8, 10)


def test_zero_length_rejected() -> None:
    with pytest.raises(RecipeError, match="Length must be positive"):
        parse_recipe('prefixed "#" 0')


def test_unknown_type_rejected() -> None:
    with pytest.raises(RecipeError, match="Unknown type 'date'") as info:
        parse_recipe('matched ":" as date')
    assert info.value.span == Span(15, 19)


def test_unknown_escape_rejected() -> None:
    with pytest.raises(RecipeError, match="Unknown escape"):
        parse_recipe(r'matched "\q"')


def test_unterminated_string() -> None:
    with pytest.raises(RecipeError, match="Unterminated string"):
        parse_recipe('matched ":')


def test_unexpected_character() -> None:
    with pytest.raises(RecipeError, match="Unexpected character '@'"):
        parse_recipe('matched @')


def test_unexpected_token() -> None:
    with pytest.raises(RecipeError, match="Unexpected token"):
        parse_recipe('matched ":" ":"')


def test_missing_operand() -> None:
    with pytest.raises(RecipeError, match="Unexpected end of recipe"):
        parse_recipe("mismatched \"<\"")


def test_empty_recipe() -> None:
    with pytest.raises(RecipeError, match="Unexpected end of recipe"):
        parse_recipe("")


def test_parser_is_reusable_after_error() -> None:
    with pytest.raises(RecipeError):
        parse_recipe("prefixed")
    assert len(parse_recipe('matched "|"').steps) == 1
