"""
State effects.

==========  ===========  ============
effect      payload      resume value
==========  ===========  ============
``'get'``   ``None``     the state
``'set'``   new state    ``None``
==========  ===========  ============

`State` handles both by turning the handled computation into one that
completes with a function from an initial state to the final result.
"""
from typing import Any, Callable, TypeVar

from ..computation import Computation, op, ret, seq
from ..handler import Handler, Resume, with_handler

A = TypeVar('A')

GET = 'get'
SET = 'set'

Stateful = Callable[[Any], Computation[Any]]


def get() -> Computation[Any]:
    """
    Get a computation that reads the current state
    """
    return op(GET)


def put(state: Any) -> Computation[None]:
    """
    Get a computation that replaces the current state

    Args:
        state: the new state
    Return:
        computation raising the ``set`` effect
    """
    return op(SET, state)


class State(Handler):
    """
    Threads a state through ``get`` and ``set``. The handled computation
    completes with a function that takes the initial state and returns
    a computation of the final result.

    Example:
        >>> counter = get().and_then(lambda v: put(v + 1))
        >>> run(run_state(counter.and_then(lambda _: get()), 1))
        2
    """
    def return_(self, value: Any) -> Computation[Stateful]:
        return ret(lambda _: ret(value))

    def get(self, _: Any, resume: Resume) -> Computation[Stateful]:
        return ret(lambda s: seq(resume(s), lambda f: f(s)))

    def set(self, state: Any, resume: Resume) -> Computation[Stateful]:
        return ret(lambda _: seq(resume(None), lambda f: f(state)))


class Transaction(State):
    """
    Like `State`, but works on a local copy of an outer state: when the
    handled computation returns, its final local state is written back with
    ``set`` for an outer handler to resolve. If the computation never
    returns, e.g because an exception handler discards it, the outer state
    is left unchanged.
    """
    def return_(self, value: Any) -> Computation[Stateful]:
        return ret(lambda s: seq(put(s), lambda _: ret(value)))


def run_state(computation: Computation[A], initial: Any) -> Computation[A]:
    """
    Handle ``computation`` with `State` and apply the result
    to ``initial``

    Example:
        >>> doubled = get().and_then(lambda v: put(v * 2))
        >>> run(run_state(doubled.and_then(lambda _: get()), 10))
        20

    Args:
        computation: computation raising ``get`` and ``set``
        initial: the initial state
    Return:
        computation of the final result
    """
    return seq(with_handler(State()).handle(computation), lambda f: f(initial))


__all__ = ['get', 'put', 'State', 'Transaction', 'run_state', 'GET', 'SET']
