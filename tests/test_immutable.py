from dataclasses import FrozenInstanceError
from typing import Any

import pytest
from hypothesis import given

from algeff import Handler, Immutable, Return, ret
from algeff.hypothesis_strategies import anything


class C(Immutable):
    a: Any


class D(C):
    a2: Any


class WithValue(Handler):
    value: Any


@given(anything(), anything())
def test_derived_is_immutable(a, a2):
    d = D(a, a2)
    with pytest.raises(FrozenInstanceError):
        d.a = a
    with pytest.raises(FrozenInstanceError):
        d.a2 = a2


@given(anything())
def test_return_is_immutable(value):
    computation = ret(value)
    with pytest.raises(FrozenInstanceError):
        computation.value = value
    assert computation == Return(value)


@given(anything())
def test_handler_is_immutable(value):
    handler = WithValue(value)
    with pytest.raises(FrozenInstanceError):
        handler.value = value
