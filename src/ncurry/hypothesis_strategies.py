import inspect
from typing import Any, Callable, List, Sequence, Tuple, TypeVar, Union

try:
    from hypothesis.strategies import (
        SearchStrategy,
        booleans,
        composite,
        floats,
        integers,
        just,
        one_of,
        sets,
        text
    )
except ImportError:
    raise ImportError(
        'Could not import hypothesis. To use ncurry.hypothesis_strategies, '
        'install ncurry with \n\n\tpip install ncurry[test]'
    )

A = TypeVar('A')


def anything(allow_nan: bool = False
             ) -> SearchStrategy[Union[int, bool, str, float]]:
    """
    Create a search strategy that produces one of int, bool, str or floats.

    Args:
        allow_nan: whether to allow nan values
    Return:
        Search strategy that produces ints, bools, str or floats
    """
    return one_of(integers(), booleans(), text(), floats(allow_nan=allow_nan))


def arities(min_arity: int = 0,
            max_arity: int = 5) -> SearchStrategy[int]:
    """
    Create a search strategy that produces arities from ``min_arity``
    to ``max_arity``

    Args:
        min_arity: the smallest arity to produce
        max_arity: the largest arity to produce
    Return:
        Search strategy that produces non-negative ints
    """
    return integers(min_value=min_arity, max_value=max_arity)


def functions(
    arity: int, return_strategy: SearchStrategy[A] = anything()
) -> SearchStrategy[Callable[..., Tuple[A, tuple, dict]]]:
    """
    Create a search strategy that produces functions of exactly
    ``arity`` positional parameters. The functions return the value
    drawn from ``return_strategy`` together with the arguments they
    were called with.

    Example:
        >>> f = functions(2, integers()).example()
        >>> inspect.signature(f)
        <Signature (a0, a1)>
        >>> f('x', 'y')
        (-12, ('x', 'y'), {})

    Args:
        arity: number of positional parameters
        return_strategy: strategy used to draw return values
    Return:
        Search strategy that produces callables of ``arity`` parameters
    """
    parameters = [
        inspect.Parameter(f'a{i}', inspect.Parameter.POSITIONAL_OR_KEYWORD)
        for i in range(arity)
    ]

    @composite
    def _(draw):
        a: A = draw(return_strategy)

        def f(*args, **kwargs):
            return a, args, kwargs

        f.__signature__ = inspect.Signature(parameters)  # type: ignore
        return f

    return _()


def splits(args: Sequence[Any]) -> SearchStrategy[List[Tuple[Any, ...]]]:
    """
    Create a search strategy that splits ``args`` into non-empty
    batches, keeping the order of ``args``

    Example:
        >>> splits((1, 2, 3)).example()
        [(1,), (2, 3)]

    Args:
        args: the arguments to split
    Return:
        Search strategy that produces lists of batches
    """
    args = tuple(args)
    if len(args) < 2:
        return just([args] if args else [])

    @composite
    def _(draw):
        cuts = sorted(draw(sets(integers(1, len(args) - 1))))
        bounds = [0] + cuts + [len(args)]
        return [args[start:end] for start, end in zip(bounds, bounds[1:])]

    return _()


__all__ = ['anything', 'arities', 'functions', 'splits']
