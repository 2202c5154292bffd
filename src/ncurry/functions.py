import functools
import logging
from typing import Any, Callable, Optional, Tuple

from .arity import arity as get_arity
from .arity import keyword_names
from .immutable import Immutable

log = logging.getLogger(__name__)


class Curried(Immutable):
    """
    A partially applied function that collects arguments until all of
    its first ``arity`` positional parameters are bound, and then
    calls ``f``. A keyword argument named in ``names`` binds that
    parameter, and positional arguments fill the remaining ones in order.

    Example:
        >>> c = Curried(lambda a, b: a + b, 2, names=('a', 'b'))
        >>> c(1)
        Curried(f=<function <lambda> at ...>, arity=2, args=(1,), ...)
        >>> c(1)(2)
        3
        >>> c(b=2)(1)
        3
    """
    f: Callable
    arity: int
    args: Tuple[Any, ...] = ()
    kwargs: Tuple[Tuple[str, Any], ...] = ()
    names: Tuple[Optional[str], ...] = ()

    def __call__(self, /, *args, **kwargs):
        combined = self.args + args
        merged = self.kwargs
        if kwargs:
            merged = tuple({**dict(self.kwargs), **kwargs}.items())
        keywords = dict(merged)
        slots = self.names + (None, ) * (self.arity - len(self.names))
        bound = {name for name in slots if name is not None} & keywords.keys()
        wanted = self.arity - len(bound)
        if len(combined) < wanted:
            return self.clone(args=combined, kwargs=merged)
        if len(combined) > wanted:
            log.debug(
                'ignoring %d trailing argument(s) to %r',
                len(combined) - wanted,
                self.f
            )
        log.debug('invoking %r with %d argument(s)', self.f, self.arity)
        positional = iter(combined[:wanted])
        ordered = [
            keywords.pop(name) if name in bound else next(positional)
            for name in slots
        ]
        return self.f(*ordered, **keywords)


def curry(
    f: Optional[Callable] = None,
    *,
    arity: Optional[int] = None,
    strict: bool = False
) -> Callable:
    """
    Get a version of ``f`` that can be partially applied. Positional
    arguments are collected over as many calls as needed, and ``f`` is
    called as soon as its arity is reached. Positional arguments
    beyond the arity are dropped. Keyword arguments are collected
    as well and passed on when ``f`` is called. A keyword argument
    that names one of the first ``arity`` parameters counts towards
    the arity, and the positional arguments fill the other ones.

    Example:
        >>> f = curry(lambda a, b, c: a * b * c)
        >>> f(2)(3)(4)
        24
        >>> f(2, 3)(4)
        24
        >>> @curry(arity=2)
        ... def add(*args):
        ...     return sum(args)
        >>> add(1)(2)
        3

    Args:
        f: The function to curry
        arity: Number of positional arguments to collect before \
            calling ``f``. Determined from the signature of ``f`` \
            if not given
        strict: Refuse to curry functions that take ``*args`` \
            (unless ``arity`` is given)
    Raises:
        IndeterminateArity: if the arity of ``f`` can't be determined
        ValueError: if ``arity`` is not a non-negative `int`
    Return:
        Curried version of ``f``, or a decorator if ``f`` is not given
    """
    if f is None:
        return functools.partial(curry, arity=arity, strict=strict)
    if arity is None:
        arity = get_arity(f, strict=strict)
    elif isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
        raise ValueError(f'arity must be a non-negative int, got {arity!r}')
    curried = Curried(f, arity, names=keyword_names(f, arity))

    @functools.wraps(f)
    def decorator(*args, **kwargs):
        return curried(*args, **kwargs)

    return decorator


__all__ = ['curry', 'Curried']
