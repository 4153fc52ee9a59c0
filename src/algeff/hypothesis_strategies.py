from typing import Any, Callable, Tuple, TypeVar, Union

from .computation import Computation, io, op, ret, sequence
from .handler import with_handler

try:
    from hypothesis.strategies import (
        SearchStrategy,
        booleans,
        builds,
        composite,
        floats,
        integers,
        lists,
        one_of,
        recursive,
        text
    )
except ImportError:
    raise ImportError(
        'Could not import hypothesis. To use algeff.hypothesis_strategies, '
        'install algeff with \n\n\tpip install algeff[test]'
    )

A = TypeVar('A')

ECHO = 'echo'


def _everything(allow_nan: bool = False) -> Tuple[SearchStrategy[int],
                                                  SearchStrategy[bool],
                                                  SearchStrategy[str],
                                                  SearchStrategy[float]]:
    return integers(), booleans(), text(), floats(allow_nan=allow_nan)


def anything(allow_nan: bool = False
             ) -> SearchStrategy[Union[int, bool, str, float]]:
    """
    Create a search strategy that produces one of int, bool, str or floats.

    Args:
        allow_nan: whether to allow nan values
    Return:
        Search strategy that produces ints, bools, str or floats
    """
    return one_of(*_everything(allow_nan))


def unaries(return_strategy: SearchStrategy[A]
            ) -> SearchStrategy[Callable[[object], A]]:
    """
    Create a search strategy that produces functions of 1 argument

    Example:
        >>> f = unaries(integers()).example()
        >>> f(None)
        2

    Args:
        return_strategy: strategy used to draw return values
    Return:
        Search strategy that produces callables of 1 argument
    """
    @composite
    def _(draw):
        a: A = draw(return_strategy)
        return lambda _: a

    return _()


def nullaries(value_strategy: SearchStrategy[A]
              ) -> SearchStrategy[Callable[[], A]]:
    def f(v: A) -> Callable[[], A]:
        return lambda: v

    return builds(f, value_strategy)


def _echo(computation: Computation[Any]) -> Computation[Any]:
    return with_handler({ECHO: lambda payload, resume: resume(payload)}
                        ).handle(computation)


def computations(value_strategy: SearchStrategy[A]
                 ) -> SearchStrategy[Computation[Any]]:
    """
    Create a search strategy that produces computations that can be
    given directly to `algeff.run`. Leaves are returns, ``io`` effects
    and handled ``echo`` effects, combined with ``and_then``, ``map``
    and `algeff.sequence`.

    Example:
        >>> run(computations(integers()).example())
        0

    Args:
        value_strategy: search strategy to draw values from
    Return:
        search strategy that produces computations
    """
    returns = builds(ret, value_strategy)
    ios = nullaries(value_strategy).map(io)
    echoes = value_strategy.map(lambda v: _echo(op(ECHO, v)))

    def extend(children: SearchStrategy[Computation[Any]]
               ) -> SearchStrategy[Computation[Any]]:
        maps = children.flatmap(
            lambda c: unaries(value_strategy).map(lambda f: c.map(f))
        )
        and_thens = children.flatmap(
            lambda c: unaries(children).map(lambda f: c.and_then(f))
        )
        handled = children.map(_echo)
        sequences = lists(children, max_size=5).map(sequence)
        return one_of(maps, and_thens, handled, sequences)

    return recursive(returns | ios | echoes, extend, max_leaves=10)


__all__ = ['anything', 'unaries', 'nullaries', 'computations']
