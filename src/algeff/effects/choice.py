"""
Non-deterministic choice.

=============  ==========  ============
effect         payload     resume value
=============  ==========  ============
``'decide'``   ``None``    ``bool``
=============  ==========  ============

Handlers in this module show the multi-shot use of continuations:
`PickMax` and `PickAll` resume the same continuation twice, and
`Backtrack` resumes it again with ``False`` when the first branch
raises ``fail``.
"""
from typing import Any, List, TypeVar

from ..computation import Computation, fail, op, ret, seq
from ..handler import Handler, Resume, with_handler

A = TypeVar('A')
B = TypeVar('B')

DECIDE = 'decide'


def decide() -> Computation[bool]:
    """
    Get a computation that asks its handler for a boolean decision
    """
    return op(DECIDE)


def choose(x: A, y: B) -> Computation[Any]:
    """
    Choose between ``x`` and ``y`` by raising ``decide``

    Example:
        >>> run(handle(PickAll(), choose(1, 2)))
        [1, 2]

    Args:
        x: the value chosen on ``True``
        y: the value chosen on ``False``
    Return:
        computation of the chosen value
    """
    return seq(decide(), lambda b: ret(x) if b else ret(y))


def choose_int(m: int, n: int) -> Computation[int]:
    """
    Choose an integer in the closed range ``[m, n]``. Raises ``fail`` when
    the range is empty, so under `Backtrack` each candidate is tried in
    increasing order until the rest of the computation stops failing.

    Args:
        m: lower bound
        n: upper bound
    Return:
        computation of the chosen integer
    """
    if m > n:
        return fail()
    return seq(decide(), lambda b: ret(m) if b else choose_int(m + 1, n))


class PickTrue(Handler):
    """
    Always decides ``True``
    """
    def decide(self, _: Any, resume: Resume) -> Computation[Any]:
        return resume(True)


class PickMax(Handler):
    """
    Runs both branches and keeps the larger result
    """
    def decide(self, _: Any, resume: Resume) -> Computation[Any]:
        return seq(
            resume(True),
            lambda t: seq(resume(False), lambda f: ret(max(t, f)))
        )


class PickAll(Handler):
    """
    Runs both branches of every decision and collects all results in
    a list, ``True`` branches first
    """
    def return_(self, value: Any) -> Computation[List[Any]]:
        return ret([value])

    def decide(self, _: Any, resume: Resume) -> Computation[List[Any]]:
        return seq(
            resume(True),
            lambda t: seq(resume(False), lambda f: ret(t + f))
        )


class FailContinuation(Handler):
    """
    Resolves ``fail`` by resuming ``resume_false`` with ``False``
    """
    resume_false: Resume

    def fail(self, _: Any, __: Resume) -> Computation[Any]:
        return self.resume_false(False)


class Backtrack(Handler):
    """
    Tries the ``True`` branch of each decision and falls back to the
    ``False`` branch if the former raises ``fail``
    """
    def decide(self, _: Any, resume: Resume) -> Computation[Any]:
        return with_handler(FailContinuation(resume)).handle(resume(True))


__all__ = [
    'decide',
    'choose',
    'choose_int',
    'PickTrue',
    'PickMax',
    'PickAll',
    'FailContinuation',
    'Backtrack',
    'DECIDE'
]
