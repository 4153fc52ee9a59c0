"""
Logging effect.

==========  =====================  ============
effect      payload                resume value
==========  =====================  ============
``'log'``   ``(level, message)``   ``None``
==========  =====================  ============

`Logging` writes records to a standard library `logging.Logger`
through the ``io`` effect.
"""
import logging
from typing import Any, Tuple

from ..computation import Computation, io, op, seq
from ..handler import Handler, Resume

LOG = 'log'


def log(level: int, msg: str) -> Computation[None]:
    """
    Get a computation that logs ``msg`` at ``level``

    Example:
        >>> import logging
        >>> logger = logging.getLogger('foo')
        >>> run(handle(Logging(logger), log(logging.WARNING, 'hello!')))
        WARNING:foo:hello!

    Args:
        level: a `logging` level such as `logging.INFO`
        msg: the log message
    Return:
        computation raising the ``log`` effect
    """
    return op(LOG, (level, msg))


def debug(msg: str) -> Computation[None]:
    return log(logging.DEBUG, msg)


def info(msg: str) -> Computation[None]:
    return log(logging.INFO, msg)


def warning(msg: str) -> Computation[None]:
    return log(logging.WARNING, msg)


def error(msg: str) -> Computation[None]:
    return log(logging.ERROR, msg)


class Logging(Handler):
    """
    Writes ``log`` records to ``logger``
    """
    logger: logging.Logger

    def log(self, record: Tuple[int, str],
            resume: Resume) -> Computation[Any]:
        level, msg = record
        return seq(io(lambda: self.logger.log(level, msg)), resume)


__all__ = ['log', 'debug', 'info', 'warning', 'error', 'Logging', 'LOG']
