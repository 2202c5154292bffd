from dataclasses import dataclass, replace
from typing import Any, TypeVar

T = TypeVar('T', bound='Immutable')


class Immutable:
    """
    Super class that makes subclasses frozen dataclasses

    Example:
        >>> class Point(Immutable):
        ...     x: int
        ...     y: int = 0
        >>> p = Point(1)
        >>> p.x = 2
        dataclasses.FrozenInstanceError: cannot assign to field 'x'
        >>> p.clone(y=2)
        Point(x=1, y=2)

    """

    def __init_subclass__(cls, repr: bool = True, eq: bool = True) -> None:
        super().__init_subclass__()
        if not hasattr(cls, '__annotations__'):
            cls.__annotations__ = {}
        dataclass(frozen=True, repr=repr, eq=eq)(cls)

    def clone(self: T, **changes: Any) -> T:
        """
        Copy this instance with some fields replaced

        Args:
            changes: new values by field name
        Return:
            New instance with ``changes`` applied
        """
        return replace(self, **changes)  # type: ignore


__all__ = ['Immutable']
