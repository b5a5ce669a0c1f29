# quantalogic_scopefn/scope_functions.py
"""
Scope functions: run a closure against a subject inline.

Two families share the same shape. The ``*_copy`` functions hand the closure a
private duplicate of the subject, so the caller's binding is never touched.
The ``*_ref`` functions hand it the live instance, so every mutation is seen by
all holders of the reference.

    >>> with_copy(5, lambda x: x + 1)
    6
    >>> take_if_copy([1, 2, 3], lambda a: a.append(4) or len(a) == 4)
    [1, 2, 3, 4]

Whatever the closure raises propagates unchanged.
"""

import logging
from typing import Any, Callable, Optional, TypeVar

from .duplication import duplicate

logger = logging.getLogger(__name__)

T = TypeVar('T')
V = TypeVar('V')


def with_copy(value: T, block: Callable[[T], V], *, deep: bool = True) -> V:
    """Call ``block`` with a duplicate of ``value`` and return its result."""
    copy = duplicate(value, deep=deep)
    logger.debug(f"with_copy on {type(value).__name__}")
    return block(copy)


def with_ref(value: T, block: Callable[[T], V]) -> V:
    """Call ``block`` with ``value`` itself and return its result."""
    logger.debug(f"with_ref on {type(value).__name__}")
    return block(value)


# Struct/object spellings of the copy/reference pair.
with_struct = with_copy
with_object = with_ref


def let_copy(value: T, block: Callable[[T], V], *, deep: bool = True) -> V:
    copy = duplicate(value, deep=deep)
    logger.debug(f"let_copy on {type(value).__name__}")
    return block(copy)


def also_copy(value: T, block: Callable[[T], Any], *, deep: bool = True) -> T:
    """
    Let ``block`` mutate a duplicate of ``value`` and return that duplicate.

    The return value of ``block`` is ignored, so in-place mutation is the only
    way to shape the result. Rebinding the argument inside ``block`` has no
    effect; immutable subjects therefore come back equal to ``value``.
    """
    copy = duplicate(value, deep=deep)
    logger.debug(f"also_copy on {type(value).__name__}")
    block(copy)
    return copy


def take_if_copy(value: T, block: Callable[[T], Any], *, deep: bool = True) -> Optional[T]:
    """
    Pass a duplicate of ``value`` to the predicate ``block``.

    Returns:
        The (possibly mutated) duplicate when ``block`` returns a truthy
        verdict, otherwise None. ``value`` itself is never mutated.
    """
    copy = duplicate(value, deep=deep)
    verdict = bool(block(copy))
    logger.debug(f"take_if_copy on {type(value).__name__}: verdict={verdict}")
    return copy if verdict else None


def let_ref(value: T, block: Callable[[T], V]) -> V:
    logger.debug(f"let_ref on {type(value).__name__}")
    return block(value)


def also_ref(value: T, block: Callable[[T], Any]) -> T:
    """Let ``block`` act on ``value`` and return the very same instance."""
    logger.debug(f"also_ref on {type(value).__name__}")
    block(value)
    return value


def take_if_ref(value: T, block: Callable[[T], Any]) -> Optional[T]:
    """
    Pass ``value`` itself to the predicate ``block``.

    Returns ``value`` when the verdict is truthy, otherwise None. Mutations
    made by ``block`` stay on the instance even when it is rejected.
    """
    verdict = bool(block(value))
    logger.debug(f"take_if_ref on {type(value).__name__}: verdict={verdict}")
    return value if verdict else None


__all__ = [
    'with_copy',
    'with_ref',
    'with_struct',
    'with_object',
    'let_copy',
    'also_copy',
    'take_if_copy',
    'let_ref',
    'also_ref',
    'take_if_ref',
]
