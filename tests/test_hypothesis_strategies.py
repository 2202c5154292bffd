import inspect

from hypothesis import given
from hypothesis.strategies import data, lists

from ncurry.arity import arity
from ncurry.hypothesis_strategies import anything, arities, functions, splits


@given(arities(), data())
def test_functions_have_given_arity(n, data):
    f = data.draw(functions(n))
    assert arity(f, strict=True) == n
    assert len(inspect.signature(f).parameters) == n


@given(lists(anything()), data())
def test_splits_partition_arguments(args, data):
    batches = data.draw(splits(args))
    assert all(batches)
    assert [a for batch in batches for a in batch] == args
