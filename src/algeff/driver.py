import logging
from typing import TypeVar

from .computation import FAIL, IO, Computation, Operation, Return
from .errors import Failure, MalformedComputation, UnhandledEffect

A = TypeVar('A')

logger = logging.getLogger(__name__)


def run(computation: Computation[A]) -> A:
    """
    Drive ``computation`` to completion. ``io`` operations are executed
    as they are reached and ``fail`` aborts the run. Every other effect
    must have been resolved by a handler layer.

    The driver steps in a loop, so long chains of ``io`` effects
    do not grow the call stack.

    Example:
        >>> run(io(lambda: 1).and_then(lambda v: ret(v + 1)))
        2

    Args:
        computation: the fully handled computation
    Return:
        the final value of ``computation``
    Raises:
        Failure: if ``fail`` reaches the driver
        UnhandledEffect: if any other effect reaches the driver
        MalformedComputation: if a step is not a computation
    """
    while not isinstance(computation, Return):
        if not isinstance(computation, Operation):
            raise MalformedComputation(computation)
        if computation.effect == IO:
            computation = computation.cont(computation.payload())
        elif computation.effect == FAIL:
            logger.debug('run aborted by unhandled fail')
            raise Failure()
        else:
            logger.debug(
                'run reached unhandled effect %r with payload %r',
                computation.effect,
                computation.payload
            )
            raise UnhandledEffect(computation.effect)
    return computation.value


__all__ = ['run']
