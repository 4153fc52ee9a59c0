from hypothesis import given

from algeff import functions
from algeff.hypothesis_strategies import anything, unaries


@given(unaries(anything()), unaries(anything()), anything())
def test_compose(f, g, arg):
    h = functions.compose(f, g)
    assert h(arg) == f(g(arg))


def test_compose_applies_right_to_left():
    h = functions.compose(str, lambda v: v * 2, lambda v: v + 1)
    assert h(2) == '6'
