# quantalogic_scopefn/__init__.py
from .exceptions import DuplicationError
from .duplication import Cloneable, duplicate
from .scope_functions import (
    also_copy,
    also_ref,
    let_copy,
    let_ref,
    take_if_copy,
    take_if_ref,
    with_copy,
    with_object,
    with_ref,
    with_struct,
)
from .scope_mixin import ScopeFunction, ValueScopeFunction
from .scoped import Scoped, has_value_semantics, scoped
from .async_scope_functions import aalso_copy, aalso_ref, alet_copy, alet_ref, atake_if_copy, atake_if_ref

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
    'alet_copy',
    'aalso_copy',
    'atake_if_copy',
    'alet_ref',
    'aalso_ref',
    'atake_if_ref',
    'ScopeFunction',
    'ValueScopeFunction',
    'Scoped',
    'scoped',
    'has_value_semantics',
    'Cloneable',
    'duplicate',
    'DuplicationError',
]
