# quantalogic_scopefn/scope_mixin.py
"""
Method-style scope functions for classes that opt in by inheritance.
"""

from typing import Any, Callable, Optional, TypeVar

from .scope_functions import also_copy, also_ref, let_copy, let_ref, take_if_copy, take_if_ref

V = TypeVar('V')
S = TypeVar('S', bound='ScopeFunction')
VS = TypeVar('VS', bound='ValueScopeFunction')


class ScopeFunction:
    """
    Reference semantics: ``let``, ``also`` and ``take_if`` act on ``self``.

        label = Label().also(lambda l: setattr(l, 'text', 'hi'))
    """

    def let(self: S, block: Callable[[S], V]) -> V:
        return let_ref(self, block)

    def also(self: S, block: Callable[[S], Any]) -> S:
        return also_ref(self, block)

    def take_if(self: S, block: Callable[[S], Any]) -> Optional[S]:
        return take_if_ref(self, block)


class ValueScopeFunction:
    """
    Value semantics: every call works on a duplicate of ``self``.

    Subclasses pick shallow duplication by setting ``scope_deep_copy = False``.
    A subclass may also define ``clone()`` to control how it is duplicated.
    """

    scope_deep_copy: bool = True

    def let(self: VS, block: Callable[[VS], V]) -> V:
        return let_copy(self, block, deep=self.scope_deep_copy)

    def also(self: VS, block: Callable[[VS], Any]) -> VS:
        return also_copy(self, block, deep=self.scope_deep_copy)

    def take_if(self: VS, block: Callable[[VS], Any]) -> Optional[VS]:
        return take_if_copy(self, block, deep=self.scope_deep_copy)
