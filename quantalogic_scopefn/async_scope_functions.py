# quantalogic_scopefn/async_scope_functions.py
"""
Async-aware scope functions.

The closure may be a coroutine function or any callable returning an
awaitable; the awaitable is resolved before its result is used. Plain
callables work too, so one helper serves both kinds of closures.
"""

import inspect
import logging
from typing import Any, Callable, Optional, TypeVar

from .duplication import duplicate

logger = logging.getLogger(__name__)

T = TypeVar('T')


async def _call_block(block: Callable[[Any], Any], subject: Any) -> Any:
    """Call ``block`` on ``subject`` and await the result if it is awaitable."""
    if not callable(block):
        raise TypeError(f"Object {block} is not callable")
    result = block(subject)
    if inspect.isawaitable(result):
        return await result
    return result


async def alet_copy(value: T, block: Callable[[T], Any], *, deep: bool = True) -> Any:
    copy = duplicate(value, deep=deep)
    logger.debug(f"alet_copy on {type(value).__name__}")
    return await _call_block(block, copy)


async def aalso_copy(value: T, block: Callable[[T], Any], *, deep: bool = True) -> T:
    copy = duplicate(value, deep=deep)
    logger.debug(f"aalso_copy on {type(value).__name__}")
    await _call_block(block, copy)
    return copy


async def atake_if_copy(value: T, block: Callable[[T], Any], *, deep: bool = True) -> Optional[T]:
    copy = duplicate(value, deep=deep)
    verdict = bool(await _call_block(block, copy))
    logger.debug(f"atake_if_copy on {type(value).__name__}: verdict={verdict}")
    return copy if verdict else None


async def alet_ref(value: T, block: Callable[[T], Any]) -> Any:
    logger.debug(f"alet_ref on {type(value).__name__}")
    return await _call_block(block, value)


async def aalso_ref(value: T, block: Callable[[T], Any]) -> T:
    logger.debug(f"aalso_ref on {type(value).__name__}")
    await _call_block(block, value)
    return value


async def atake_if_ref(value: T, block: Callable[[T], Any]) -> Optional[T]:
    verdict = bool(await _call_block(block, value))
    logger.debug(f"atake_if_ref on {type(value).__name__}: verdict={verdict}")
    return value if verdict else None
