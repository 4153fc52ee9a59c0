from abc import ABC
from functools import wraps
from typing import (Any, Callable, Generator, Generic, Iterable, Tuple,
                    TypeVar, cast)

from .errors import MalformedComputation
from .functions import compose, curry
from .immutable import Immutable
from .monad import Monad

A = TypeVar('A')
B = TypeVar('B')

IO = 'io'
FAIL = 'fail'


class Computation(Immutable, Generic[A], Monad, ABC):
    """
    Base class for computations. A computation is either a `Return`
    wrapping a final value, or an `Operation` suspended on an effect.
    Computations are plain data: chaining and handling them builds new
    computations rather than running anything.
    """
    def and_then(self, f: 'Callable[[A], Computation[B]]'
                 ) -> 'Computation[B]':
        """
        Chain ``f`` after this computation. Equivalent to ``seq(self, f)``

        Example:
            >>> run(ret(1).and_then(lambda v: ret(v + 1)))
            2

        Args:
            f: function producing the rest of the computation from the \
                result of this computation
        Return:
            New computation that continues with ``f``
        """
        return seq(self, f)

    def map(self, f: Callable[[A], B]) -> 'Computation[B]':
        """
        Map ``f`` over the final value of this computation

        Example:
            >>> run(ret(1).map(str))
            '1'

        Args:
            f: function to apply to the final value
        Return:
            New computation with ``f`` applied to its final value
        """
        return seq(self, compose(Return, f))


class Return(Computation[A]):
    """
    A completed computation
    """
    value: A


class Operation(Computation[A]):
    """
    A computation suspended on the effect named ``effect``. Whoever handles
    the effect resumes the computation by calling ``cont`` with a resume
    value, any number of times.
    """
    effect: str
    payload: Any
    cont: Callable[[Any], Computation[A]]


def ret(value: A) -> Computation[A]:
    """
    Lift a plain value into a completed computation

    Example:
        >>> ret(1)
        Return(value=1)

    Args:
        value: The final value
    Return:
        `Return` wrapping ``value``
    """
    return Return(value)


def operation(effect: str, payload: Any,
              cont: Callable[[Any], Computation[A]]) -> Computation[A]:
    """
    Create a computation suspended on ``effect``

    Args:
        effect: effect name
        payload: value handed to the effect handler
        cont: function from the resume value to the rest of the computation
    Return:
        `Operation` wrapping ``effect``, ``payload`` and ``cont``
    """
    return Operation(effect, payload, cont)


def op(effect: str, payload: Any = None) -> Computation[Any]:
    """
    Raise a single occurrence of ``effect``. The resulting computation
    completes with whatever value the effect is resumed with.

    Example:
        >>> run(handle({'id': lambda p, k: k(p)}, op('id', 1)))
        1

    Args:
        effect: effect name
        payload: value handed to the effect handler
    Return:
        `Operation` that returns its resume value
    """
    return Operation(effect, payload, ret)


def io(action: Callable[[], A]) -> Computation[A]:
    """
    Raise the builtin ``io`` effect. The driver calls ``action`` when
    it reaches this operation and resumes with the result.

    Example:
        >>> run(io(lambda: 'hello'))
        'hello'

    Args:
        action: zero-argument callable to execute
    Return:
        computation that completes with the result of ``action``
    """
    return op(IO, action)


def fail() -> Computation[Any]:
    """
    Raise the builtin ``fail`` effect. Unless a handler intercepts it,
    `run` raises `Failure`.
    """
    return op(FAIL)


def seq(current: Computation[A],
        then: Callable[[A], Computation[B]]) -> Computation[B]:
    """
    Sequence ``current`` with ``then``. A `Return` is passed directly to
    ``then``, an `Operation` is kept suspended with ``then`` chained onto
    its continuation.

    Example:
        >>> run(seq(ret(2), lambda v: ret(v * 2)))
        4

    Args:
        current: the computation to run first
        then: function producing the rest of the computation
    Return:
        the combined computation
    """
    if isinstance(current, Return):
        return then(current.value)
    if isinstance(current, Operation):
        return Operation(
            current.effect,
            current.payload,
            lambda x: seq(current.cont(x), then)
        )
    raise MalformedComputation(current)


def sequence(iterable: Iterable[Computation[A]]
             ) -> Computation[Tuple[A, ...]]:
    """
    Evaluate each computation in ``iterable`` from left to right and
    collect the results

    Example:
        >>> run(sequence([ret(v) for v in range(3)]))
        (0, 1, 2)

    Args:
        iterable: The computations to collect results from
    Return:
        computation of collected results
    """
    computations = tuple(iterable)

    def collect(start: int, results: Tuple[A, ...]
                ) -> Computation[Tuple[A, ...]]:
        for i in range(start, len(computations)):
            computation = computations[i]
            if isinstance(computation, Operation):
                return computation.and_then(
                    lambda v: collect(i + 1, results + (v, ))
                )
            if not isinstance(computation, Return):
                raise MalformedComputation(computation)
            results = results + (computation.value, )
        return Return(results)

    return collect(0, ())


@curry
def for_each(f: Callable[[A], Computation[B]],
             iterable: Iterable[A]) -> Computation[Tuple[B, ...]]:
    """
    Map each element in ``iterable`` to a computation by applying ``f``,
    combine them from left to right and collect the results

    Example:
        >>> run(for_each(ret, range(3)))
        (0, 1, 2)

    Args:
        f: Function to map over ``iterable``
        iterable: Iterable to map ``f`` over
    Return:
        ``f`` mapped over ``iterable`` and combined from left to right
    """
    return sequence(f(x) for x in iterable)


@curry
def filter_(f: Callable[[A], Computation[bool]],
            iterable: Iterable[A]) -> Computation[Tuple[A, ...]]:
    """
    Map each element in ``iterable`` by applying ``f``,
    filter the results by the value computed by ``f``
    and combine from left to right.

    Example:
        >>> run(filter_(lambda v: ret(v % 2 == 0), range(3)))
        (0, 2)

    Args:
        f: Function to map ``iterable`` by
        iterable: Iterable to map by ``f``
    Return:
        `iterable` mapped and filtered by `f`
    """
    elements = tuple(iterable)
    return for_each(f, elements).map(
        lambda keep: tuple(x for x, b in zip(elements, keep) if b)
    )


Computations = Generator[Computation[Any], Any, A]


def with_effect(f: Callable[..., Computations[A]]
                ) -> Callable[..., Computation[A]]:
    """
    Decorator for generator functions that yield computations and return
    a final result. Each yielded computation is chained with ``and_then``
    and its result is sent back into the generator.

    Generators can only be resumed once, so every resumption replays
    the generator from the start with the results seen so far. This keeps
    continuations multi-shot, but the generator body must be
    deterministic between yields.

    Example:
        >>> @with_effect
        ... def f():
        ...     a = yield ret(2)
        ...     b = yield ret(2)
        ...     return a + b
        >>> run(f())
        4

    Args:
        f: generator function to decorate
    Return:
        `f` decorated such that yielded computations \
        will be chained together with `and_then`
    """
    @wraps(f)
    def decorator(*args, **kwargs) -> Computation[A]:
        def resume(sent: Tuple[Any, ...]) -> Computation[A]:
            g = f(*args, **kwargs)
            try:
                computation = next(g)
                for value in sent:
                    computation = g.send(value)
                while isinstance(computation, Return):
                    sent = sent + (computation.value, )
                    computation = g.send(computation.value)
            except StopIteration as e:
                return Return(cast(A, e.value))
            if not isinstance(computation, Operation):
                raise MalformedComputation(computation)
            return computation.and_then(lambda v: resume(sent + (v, )))

        return resume(())

    return decorator


__all__ = [
    'Computation',
    'Return',
    'Operation',
    'ret',
    'operation',
    'op',
    'io',
    'fail',
    'seq',
    'sequence',
    'for_each',
    'filter_',
    'with_effect',
    'Computations',
    'IO',
    'FAIL'
]
