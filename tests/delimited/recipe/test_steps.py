from decimal import Decimal

import pytest

from delimited.common.span import Span
from delimited.errors import ParseError
from delimited.recipe.parse import parse_recipe
from delimited.recipe.steps import MatchedStep, Recipe


def test_run_applies_steps_in_order() -> None:
    recipe = parse_recipe('matched ":" as int; mismatched "<" ">"; prefixed "#" 2 as hex')
    assert recipe.run("id:42: <name> #ff") == [42, "name", 255]


def test_missing_field_does_not_stop_later_steps() -> None:
    recipe = parse_recipe('mismatched "[" "]"; matched "|" as decimal')
    assert recipe.run("no brackets |1.25| here") == [None, Decimal("1.25")]


def test_each_run_uses_a_fresh_scanner() -> None:
    recipe = parse_recipe('matched ":"')
    assert recipe.run("a:1:") == ["1"]
    assert recipe.run("b:2:") == ["2"]


def test_parse_failure_propagates() -> None:
    recipe = parse_recipe('matched ":" as bool')
    with pytest.raises(ParseError, match="as boolean"):
        recipe.run("flag:maybe:")


def test_step_converter_lookup() -> None:
    step = MatchedStep(span=Span(0, 1), into="float", delim=":")
    assert step.converter is float
    assert MatchedStep(span=Span(0, 1), into=None, delim=":").converter is None


def test_empty_recipe_runs_nothing() -> None:
    assert Recipe(steps=()).run("a:b:c") == []
