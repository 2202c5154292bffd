import functools

import pytest

from ncurry.arity import (IndeterminateArity, arity, keyword_names,
                          max_positional)


def positional(a, b, /, c):
    pass


def defaults(a, b=1, c=2):
    pass


def variadic(a, *args, b, **kwargs):
    pass


def keyword_only(*, a):
    pass


class Adder:
    def __init__(self, a, b):
        pass

    def __call__(self, c):
        pass

    def method(self, a, b):
        pass


@pytest.mark.parametrize('f,expected', [
    (lambda: None, 0),
    (positional, 3),
    (defaults, 1),
    (variadic, 1),
    (keyword_only, 0),
    (lambda *args, **kwargs: None, 0),
    (Adder, 2),
    (Adder(1, 2), 1),
    (Adder(1, 2).method, 2),
    (Adder.method, 3),
    (functools.partial(defaults, 1), 0),
    (functools.partial(positional, 1), 2),
])
def test_arity(f, expected):
    assert arity(f) == expected


def test_strict_rejects_variadic():
    with pytest.raises(IndeterminateArity) as e:
        arity(variadic, strict=True)
    assert e.value.function is variadic


def test_strict_accepts_fixed():
    assert arity(defaults, strict=True) == 1


def test_indeterminate_arity_is_type_error():
    with pytest.raises(TypeError) as e:
        arity(None)
    assert isinstance(e.value, IndeterminateArity)
    assert isinstance(e.value.__cause__, TypeError)


@pytest.mark.parametrize('f,expected', [
    (lambda: None, 0),
    (positional, 3),
    (defaults, 3),
    (variadic, None),
    (keyword_only, 0),
    (str.upper, 1),
])
def test_max_positional(f, expected):
    assert max_positional(f) == expected


def test_max_positional_indeterminate():
    with pytest.raises(IndeterminateArity):
        max_positional(42)


@pytest.mark.parametrize('f,n,expected', [
    (positional, 3, (None, None, 'c')),
    (defaults, 2, ('a', 'b')),
    (variadic, 3, ('a', None, None)),
    (lambda *args: None, 2, (None, None)),
    (42, 1, (None, )),
    (Adder(1, 2).method, 2, ('a', 'b')),
])
def test_keyword_names(f, n, expected):
    assert keyword_names(f, n) == expected
