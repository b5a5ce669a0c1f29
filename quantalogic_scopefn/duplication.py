# quantalogic_scopefn/duplication.py
"""
Structural duplication for the value-semantics scope functions.
"""

import copy
import logging
from typing import Any, Protocol, TypeVar, runtime_checkable

from .exceptions import DuplicationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


@runtime_checkable
class Cloneable(Protocol):
    """An object that knows how to produce its own independent copy."""

    def clone(self) -> Any:
        ...


def duplicate(value: T, *, deep: bool = True) -> T:
    """
    Return a structural copy of ``value``.

    Objects with a callable ``clone()`` duplicate themselves, and whatever
    ``clone()`` raises propagates unchanged. Anything else, including objects
    whose ``clone`` attribute is plain data, goes through ``copy.deepcopy``
    (or ``copy.copy`` when ``deep`` is False).

    Args:
        value: The subject to copy.
        deep: Whether nested containers are copied as well.

    Returns:
        The copy. Immutable scalars may come back as the same object.

    Raises:
        DuplicationError: If the copy machinery rejects the subject.
    """
    if not isinstance(value, type) and callable(getattr(value, 'clone', None)):
        logger.debug(f"Duplicating {type(value).__name__} via clone()")
        return value.clone()
    try:
        return copy.deepcopy(value) if deep else copy.copy(value)
    except (TypeError, copy.Error) as e:
        raise DuplicationError(value, e) from e
