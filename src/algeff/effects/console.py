"""
Console effects.

============  ==========  ============
effect        payload     resume value
============  ==========  ============
``'print'``   ``str``     ``None``
``'read'``    ``None``    ``str``
============  ==========  ============
"""
import sys
from typing import Any, List, Tuple

from ..computation import Computation, io, op, ret, seq
from ..handler import Handler, Resume

PRINT = 'print'
READ = 'read'


def print_line(msg: str = '') -> Computation[None]:
    """
    Get a computation that prints ``msg``

    Example:
        >>> run(handle(Console(), print_line('Hello algeff!')))
        Hello algeff!

    Args:
        msg: Message to print
    Return:
        computation raising the ``print`` effect
    """
    return op(PRINT, msg)


def get_line() -> Computation[str]:
    """
    Get a computation that reads a line of input

    Example:
        >>> run(handle(AlwaysRead('Bob'), get_line()))
        'Bob'

    Return:
        computation raising the ``read`` effect
    """
    return op(READ)


def join(first: str, second: str) -> str:
    if not first:
        return second
    if not second:
        return first
    return f'{first} {second}'


class AlwaysRead(Handler):
    """
    Resolves every ``read`` with the same ``text``
    """
    text: str

    def read(self, _: Any, resume: Resume) -> Computation[Any]:
        return resume(self.text)


class MemPrint(Handler):
    """
    Appends printed messages to ``buffer`` through the ``io`` effect
    """
    buffer: List[str]

    def print(self, msg: str, resume: Resume) -> Computation[Any]:
        return seq(io(lambda: self.buffer.append(msg)), resume)


class Collect(Handler):
    """
    Collects printed output. The handled computation completes with a
    pair of its result and the printed messages joined by spaces.
    """
    def return_(self, value: Any) -> Computation[Tuple[Any, str]]:
        return ret((value, ''))

    def print(self, msg: str, resume: Resume) -> Computation[Any]:
        return seq(
            resume(None),
            lambda result: ret((result[0], join(msg, result[1])))
        )


class ReversePrint(Handler):
    """
    Re-raises each ``print`` after the rest of the computation has run,
    reversing the order of output
    """
    def print(self, msg: str, resume: Resume) -> Computation[Any]:
        return seq(
            resume(None),
            lambda result: seq(print_line(msg), lambda _: ret(result))
        )


class Console(Handler):
    """
    Prints to stdout and reads from stdin through the ``io`` effect
    """
    def print(self, msg: str, resume: Resume) -> Computation[Any]:
        return seq(io(lambda: print(msg, file=sys.stdout)), resume)

    def read(self, _: Any, resume: Resume) -> Computation[Any]:
        return seq(io(sys.stdin.readline), lambda line: resume(line.rstrip('\n')))


__all__ = [
    'print_line',
    'get_line',
    'AlwaysRead',
    'MemPrint',
    'Collect',
    'ReversePrint',
    'Console',
    'PRINT',
    'READ'
]
