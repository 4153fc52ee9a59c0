"""
Exception effect.

=============  ==========  ============
effect         payload     resume value
=============  ==========  ============
``'raise'``    reason      never resumed
=============  ==========  ============
"""
from typing import Any

from ..computation import Computation, op, ret
from ..handler import Handler, Resume

RAISE = 'raise'


def raise_(reason: Any = None) -> Computation[Any]:
    """
    Get a computation that raises an exception effect with ``reason``

    Example:
        >>> safe_div = lambda a, b: raise_('division by zero') if b == 0 else ret(a / b)
        >>> run(handle(Default(42), safe_div(1, 0)))
        42

    Args:
        reason: description of the exception
    Return:
        computation raising the ``raise`` effect
    """
    return op(RAISE, reason)


class Default(Handler):
    """
    Replaces the rest of a computation that raises with ``value``
    """
    value: Any

    def raise_(self, reason: Any, resume: Resume) -> Computation[Any]:
        return ret(self.value)


__all__ = ['raise_', 'Default', 'RAISE']
