import inspect
from typing import Callable, List, Optional, Tuple

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD
)


class IndeterminateArity(TypeError):
    """
    Raised when the number of parameters of a callable can't be determined
    """
    def __init__(self, function: Callable, message: str):
        super().__init__(message)
        self.function = function


def _signature(f: Callable) -> inspect.Signature:
    try:
        return inspect.signature(f)
    except (TypeError, ValueError) as e:
        raise IndeterminateArity(
            f, f'could not determine the arity of {f!r}: {e}'
        ) from e


def _is_variadic(signature: inspect.Signature) -> bool:
    return any(
        p.kind is inspect.Parameter.VAR_POSITIONAL
        for p in signature.parameters.values()
    )


def arity(f: Callable, strict: bool = False) -> int:
    """
    Get the number of required leading positional parameters of ``f``.
    Counting stops at the first parameter that has a default value,
    or that is not positional.

    Example:
        >>> arity(lambda a, b, c=0: None)
        2
        >>> arity(lambda a, *rest: None)
        1
        >>> arity(lambda *rest: None)
        0

    Args:
        f: The callable to inspect
        strict: Raise `IndeterminateArity` if ``f`` takes ``*args``
    Return:
        The arity of ``f``
    """
    signature = _signature(f)
    if strict and _is_variadic(signature):
        raise IndeterminateArity(
            f, f'{f!r} takes a variable number of positional arguments'
        )
    n = 0
    for parameter in signature.parameters.values():
        if parameter.kind not in _POSITIONAL:
            break
        if parameter.default is not inspect.Parameter.empty:
            break
        n += 1
    return n


def max_positional(f: Callable) -> Optional[int]:
    """
    Get the number of positional arguments ``f`` accepts,
    including those with default values

    Example:
        >>> max_positional(lambda a, b=1: None)
        2
        >>> max_positional(print) is None
        True

    Args:
        f: The callable to inspect
    Return:
        The number of positional parameters, or `None` if ``f``
        takes ``*args``
    """
    signature = _signature(f)
    if _is_variadic(signature):
        return None
    return sum(
        1 for p in signature.parameters.values() if p.kind in _POSITIONAL
    )


def keyword_names(f: Callable, n: int) -> Tuple[Optional[str], ...]:
    """
    Get the names by which the first ``n`` positional parameters of ``f``
    can be passed as keywords. Positional-only parameters, and positions
    the signature of ``f`` doesn't name, give `None`.

    Example:
        >>> keyword_names(lambda a, b, /, c: None, 3)
        (None, None, 'c')
        >>> keyword_names(lambda *args: None, 2)
        (None, None)

    Args:
        f: The callable to inspect
        n: The number of positions
    Return:
        Tuple of ``n`` names or `None`
    """
    try:
        parameters = list(_signature(f).parameters.values())
    except IndeterminateArity:
        parameters = []
    names: List[Optional[str]] = []
    for parameter in parameters[:n]:
        if parameter.kind not in _POSITIONAL:
            break
        if parameter.kind is inspect.Parameter.POSITIONAL_OR_KEYWORD:
            names.append(parameter.name)
        else:
            names.append(None)
    return tuple(names + [None] * (n - len(names)))


__all__ = ['arity', 'max_positional', 'keyword_names', 'IndeterminateArity']
