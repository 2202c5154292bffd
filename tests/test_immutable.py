from dataclasses import FrozenInstanceError
from typing import Any

import pytest
from hypothesis import given
from hypothesis.strategies import integers

from ncurry import Curried, Immutable, curry
from ncurry.hypothesis_strategies import anything


class Point(Immutable):
    x: int
    y: int = 0


class Labelled(Point):
    label: Any = None


@given(integers(), integers())
def test_fields_are_frozen(x, y):
    point = Point(x, y)
    with pytest.raises(FrozenInstanceError):
        point.x = y
    assert point == Point(x, y)


@given(integers(), anything())
def test_subclass_fields_are_frozen(x, label):
    labelled = Labelled(x, label=label)
    with pytest.raises(FrozenInstanceError):
        labelled.label = label
    assert labelled.y == 0


@given(integers(), integers(), integers())
def test_clone_replaces_fields(x, y, new):
    point = Point(x, y)
    moved = point.clone(y=new)
    assert moved == Point(x, new)
    assert point == Point(x, y)


def test_clone_keeps_subclass():
    assert isinstance(Labelled(1).clone(x=2), Labelled)


def test_curried_steps_share_nothing():
    step = curry(lambda a, b, c: (a, b, c))(1)
    assert isinstance(step, Curried)
    with pytest.raises(FrozenInstanceError):
        step.args = ()
    assert step.clone(args=(2, 3)).args == (2, 3)
    assert step.args == (1, )
