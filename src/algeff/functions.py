import functools
import inspect
from typing import Any, Callable, Tuple, TypeVar

from .immutable import Immutable

A = TypeVar('A')
B = TypeVar('B')

Unary = Callable[[A], B]


class Composition(Immutable):
    functions: Tuple[Callable, ...]

    def __call__(self, *args, **kwargs):
        first, *rest = reversed(self.functions)
        result = first(*args, **kwargs)
        for f in rest:
            result = f(result)
        return result


def compose(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    *functions: Callable[[Any], Any]
) -> Callable[[Any], Any]:
    """
    Compose functions from left to right

    Example:
        >>> g = compose(str, lambda v: v * 2)
        >>> g(3)
        '6'

    Args:
        f: the outermost function in the composition
        g: the function to be composed with f
        functions: functions to be composed with `f` \
        and `g` from left to right

    Return:
        `f` composed with `g` composed with `functions` from left to right
    """
    return Composition((f, g) + functions)


class Curry:
    _f: Callable

    def __init__(self, f: Callable):
        functools.wraps(f)(self)
        self._f = f  # type: ignore

    def __repr__(self):
        return repr(self._f)

    def __call__(self, *args, **kwargs):
        signature = inspect.signature(self._f)
        bound = signature.bind_partial(*args, **kwargs)
        bound.apply_defaults()
        missing = set(signature.parameters) - set(bound.arguments)
        if not missing:
            return self._f(*args, **kwargs)
        return Curry(functools.partial(self._f, *args, **kwargs))


def curry(f: Callable) -> Callable:
    """
    Get a version of ``f`` that can be partially applied. Used for the
    two-argument combinators so that handlers and effect functions can be
    supplied first and the computation later.

    Example:
        >>> add = curry(lambda a, b: a + b)
        >>> add(1)(1)
        2

    Args:
        f: The function to curry
    Return:
        Curried version of ``f``
    """
    @functools.wraps(f)
    def decorator(*args, **kwargs):
        return Curry(f)(*args, **kwargs)

    return decorator


__all__ = ['curry', 'compose', 'Unary']
