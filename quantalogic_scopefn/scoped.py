# quantalogic_scopefn/scoped.py
"""
Scope functions for types that cannot inherit the mixins: built-ins and
third-party classes.

    >>> scoped([3, 1, 2]).also(lambda a: a.sort())
    [1, 2, 3]
    >>> scoped(10).take_if(lambda n: n > 100) is None
    True
"""

import dataclasses
import logging
from typing import Any, Callable, Generic, Optional, TypeVar

from .scope_functions import also_copy, also_ref, let_copy, let_ref, take_if_copy, take_if_ref
from .scope_mixin import ScopeFunction, ValueScopeFunction

logger = logging.getLogger(__name__)

T = TypeVar('T')
V = TypeVar('V')

VALUE_TYPES = (int, float, complex, str, bytes, bytearray, tuple, frozenset, list, dict, set)


def has_value_semantics(value: Any) -> bool:
    """
    Check whether ``value`` defaults to copy semantics when scoped.

    Instances of the ``ScopeFunction`` and ``ValueScopeFunction`` mixins keep
    the semantics their class declares. Otherwise built-in scalars and
    containers, and dataclass instances, behave as values; every other object
    is treated as a shared reference.
    """
    if isinstance(value, ScopeFunction):
        return False
    if isinstance(value, (ValueScopeFunction,) + VALUE_TYPES):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


class Scoped(Generic[T]):
    def __init__(self, value: T, copy: Optional[bool] = None, deep: bool = True) -> None:
        self.value: T = value
        self.copy: bool = has_value_semantics(value) if copy is None else copy
        self.deep: bool = deep
        logger.debug(f"Scoped {type(value).__name__} with {'value' if self.copy else 'reference'} semantics")

    def let(self, block: Callable[[T], V]) -> V:
        if self.copy:
            return let_copy(self.value, block, deep=self.deep)
        return let_ref(self.value, block)

    def also(self, block: Callable[[T], Any]) -> T:
        if self.copy:
            return also_copy(self.value, block, deep=self.deep)
        return also_ref(self.value, block)

    def take_if(self, block: Callable[[T], Any]) -> Optional[T]:
        if self.copy:
            return take_if_copy(self.value, block, deep=self.deep)
        return take_if_ref(self.value, block)

    def __repr__(self):
        semantics = 'copy' if self.copy else 'ref'
        return f"Scoped({self.value!r}, {semantics})"


def scoped(value: T, *, copy: Optional[bool] = None, deep: bool = True) -> Scoped[T]:
    """
    Wrap ``value`` so it can use ``let``, ``also`` and ``take_if``.

    Args:
        value: The subject.
        copy: Force value (True) or reference (False) semantics. None picks
            from the subject's type, see ``has_value_semantics``.
        deep: Duplication depth for value semantics.
    """
    return Scoped(value, copy=copy, deep=deep)
