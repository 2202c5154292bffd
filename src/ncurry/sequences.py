from collections import Counter
from typing import (Any, Callable, Dict, Hashable, Iterable, List, Mapping,
                    Sequence, TypeVar, Union)

from typing_extensions import Final

from .arity import IndeterminateArity, max_positional
from .functions import curry

A = TypeVar('A')
B = TypeVar('B')

CALLBACK_ARGUMENTS: Final = 3


def _callback_arguments(f: Callable) -> int:
    try:
        n = max_positional(f)
    except IndeterminateArity:
        return 1
    if n is None:
        return CALLBACK_ARGUMENTS
    return max(1, min(n, CALLBACK_ARGUMENTS))


def _callbacks(f: Callable, items: Sequence[A]) -> Iterable[Any]:
    n = _callback_arguments(f)
    for index, value in enumerate(items):
        yield f(*(value, index, items)[:n])


def flatten(nested: Iterable[Any]) -> List[Any]:
    """
    Flatten arbitrarily nested lists and tuples

    Example:
        >>> flatten([1, [2, [3, (4,)]], 5])
        [1, 2, 3, 4, 5]

    Args:
        nested: Iterable to flatten
    Return:
        `list` of all non-list, non-tuple values in ``nested``, \
            in left-to-right order
    """
    stack = list(nested)
    result = []
    while stack:
        value = stack.pop()
        if isinstance(value, (list, tuple)):
            stack.extend(value)
        else:
            result.append(value)
    result.reverse()
    return result


@curry
def group_by(key: Union[Callable[[A], B], Hashable],
             iterable: Iterable[A]) -> Dict[B, List[A]]:
    """
    Group elements of ``iterable`` by ``key``

    Example:
        >>> people = [
        ...     {'name': 'Alice', 'city': 'New York'},
        ...     {'name': 'Bob', 'city': 'London'}
        ... ]
        >>> group_by('city')(people)
        {'New York': [{'name': 'Alice', 'city': 'New York'}],
         'London': [{'name': 'Bob', 'city': 'London'}]}
        >>> group_by(len, ['a', 'bb', 'c'])
        {1: ['a', 'c'], 2: ['bb']}

    Args:
        key: Function that computes the group of an element, or \
            the name of an item or attribute to group by
        iterable: Elements to group
    Return:
        `dict` from group to elements, in the order they were encountered
    """
    grouped: Dict[B, List[A]] = {}
    for value in iterable:
        group = key(value) if callable(key) else _lookup(value, key)
        grouped.setdefault(group, []).append(value)
    return grouped


def _lookup(value: Any, key: Hashable) -> Any:
    if isinstance(value, Mapping):
        return value[key]
    if isinstance(key, str) and hasattr(value, key):
        return getattr(value, key)
    raise KeyError(key)


def find_duplicates(iterable: Iterable[A]) -> List[A]:
    """
    Find elements that occur more than once

    Example:
        >>> find_duplicates([1, 2, 1, 3, 1])
        [1, 1]

    Args:
        iterable: Elements to search. Must be hashable
    Return:
        Every occurrence of an element that was already seen
    """
    seen = set()
    duplicates = []
    for value in iterable:
        if value in seen:
            duplicates.append(value)
        seen.add(value)
    return duplicates


def count_frequencies(iterable: Iterable[A]) -> Dict[A, int]:
    """
    Count how many times each element occurs

    Example:
        >>> count_frequencies(['apple', 'banana', 'apple'])
        {'apple': 2, 'banana': 1}

    Args:
        iterable: Elements to count. Must be hashable
    Return:
        `dict` from element to count, in first-seen order
    """
    return dict(Counter(iterable))


@curry
def map_(f: Callable[..., B], iterable: Iterable[A]) -> List[B]:
    """
    Apply ``f`` to each element of ``iterable``. ``f`` is called with
    the element, its index and the sequence of all elements, but only
    with as many of those as it accepts.

    Example:
        >>> map_(lambda v: v * 2)([1, 2])
        [2, 4]
        >>> map_(lambda v, i: (i, v), 'ab')
        [(0, 'a'), (1, 'b')]

    Args:
        f: Function to apply
        iterable: Elements to apply ``f`` to
    Return:
        `list` of results
    """
    return list(_callbacks(f, tuple(iterable)))


@curry
def for_each(f: Callable[..., Any], iterable: Iterable[A]) -> None:
    """
    Call ``f`` with each element of ``iterable`` for its side effects.
    ``f`` is called like in `map_`.

    Example:
        >>> for_each(lambda v: print(v), ['a', 'b'])
        a
        b

    Args:
        f: Function to call
        iterable: Elements to call ``f`` with
    """
    for _ in _callbacks(f, tuple(iterable)):
        pass


@curry
def filter_(predicate: Callable[..., bool], iterable: Iterable[A]) -> List[A]:
    """
    Keep the elements of ``iterable`` that satisfy ``predicate``.
    ``predicate`` is called like in `map_`.

    Example:
        >>> filter_(lambda v: v % 2 == 0)(range(5))
        [0, 2, 4]

    Args:
        predicate: Function to test elements with
        iterable: Elements to filter
    Return:
        `list` of elements for which ``predicate`` is truthy
    """
    items = tuple(iterable)
    return [
        value for value, keep in zip(items, _callbacks(predicate, items))
        if keep
    ]


__all__ = [
    'flatten',
    'group_by',
    'find_duplicates',
    'count_frequencies',
    'map_',
    'for_each',
    'filter_'
]
