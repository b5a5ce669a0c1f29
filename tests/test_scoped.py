import pytest
from dataclasses import dataclass

from quantalogic_scopefn import ScopeFunction, Scoped, ValueScopeFunction, has_value_semantics, scoped


class Session:
    def __init__(self):
        self.user = None


@dataclass
class Insets:
    top: int = 0
    left: int = 0


@dataclass
class Toolbar(ScopeFunction):
    title: str = ''


class Cursor(ValueScopeFunction):
    def __init__(self):
        self.line = 0


@pytest.mark.parametrize('value', [1, 1.5, True, 'text', b'raw', (1,), frozenset(), [1], {'a': 1}, {1}, Insets()])
def test_value_semantics_defaults(value):
    assert has_value_semantics(value)


@pytest.mark.parametrize('value', [Session(), object(), Insets])
def test_reference_semantics_defaults(value):
    assert not has_value_semantics(value)


def test_scoped_list_also_returns_sorted_copy():
    numbers = [3, 1, 2]
    assert scoped(numbers).also(lambda a: a.sort()) == [1, 2, 3]
    assert numbers == [3, 1, 2]


def test_scoped_dict_let():
    launch_options = {'url': 'https://example.com'}
    assert scoped(launch_options).let(lambda d: d.setdefault('type', 'web')) == 'web'
    assert 'type' not in launch_options


def test_scoped_int_take_if():
    assert scoped(10).take_if(lambda n: n > 100) is None
    assert scoped(10).take_if(lambda n: n > 1) == 10


def test_scoped_object_uses_reference():
    session = Session()
    result = scoped(session).also(lambda s: setattr(s, 'user', 'allen'))
    assert result is session
    assert session.user == 'allen'
    assert scoped(session).take_if(lambda s: s.user == 'allen') is session


def test_scoped_forced_reference_on_list():
    items = [1]
    result = scoped(items, copy=False).also(lambda a: a.append(2))
    assert result is items
    assert items == [1, 2]


def test_scoped_forced_copy_on_object():
    session = Session()
    copy = scoped(session, copy=True).also(lambda s: setattr(s, 'user', 'x'))
    assert copy is not session
    assert session.user is None


def test_scoped_dataclass_is_copied():
    insets = Insets()
    wider = scoped(insets).also(lambda i: setattr(i, 'left', 8))
    assert wider == Insets(0, 8)
    assert insets == Insets()


def test_scoped_shallow():
    grid = [[0]]
    scoped(grid, deep=False).also(lambda g: g[0].append(1))
    assert grid == [[0, 1]]


def test_scoped_repr_and_value():
    wrapper = scoped([1])
    assert isinstance(wrapper, Scoped)
    assert wrapper.value == [1]
    assert repr(wrapper) == "Scoped([1], copy)"
    assert repr(scoped(Session(), copy=False)).endswith(", ref)")


def test_reference_mixin_dataclass_keeps_reference_semantics():
    toolbar = Toolbar()
    assert not has_value_semantics(toolbar)
    result = scoped(toolbar).also(lambda t: setattr(t, 'title', 'Edit'))
    assert result is toolbar
    assert toolbar.title == 'Edit'
    assert toolbar.also(lambda t: setattr(t, 'title', 'View')) is toolbar


def test_value_mixin_plain_class_keeps_value_semantics():
    cursor = Cursor()
    assert has_value_semantics(cursor)
    moved = scoped(cursor).also(lambda c: setattr(c, 'line', 4))
    assert moved is not cursor
    assert moved.line == 4
    assert cursor.line == 0


@pytest.mark.parametrize('copy', [True, False])
@pytest.mark.parametrize('method', ['let', 'also', 'take_if'])
def test_scoped_block_exception_propagates_unchanged(method, copy):
    error = KeyError("missing")

    def fail(_):
        raise error

    with pytest.raises(KeyError) as exc_info:
        getattr(scoped({'a': 1}, copy=copy), method)(fail)
    assert exc_info.value is error
