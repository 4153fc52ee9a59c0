from keyword import iskeyword
from typing import Any, Callable, Mapping, Optional, TypeVar, Union

from typing_extensions import Protocol

from .computation import Computation, Operation, Return
from .errors import MalformedComputation
from .functions import curry
from .immutable import Immutable

A = TypeVar('A')
B = TypeVar('B')

Resume = Callable[[Any], Computation[Any]]

RETURN = 'return'


class Clause(Protocol):
    """
    Function that resolves one occurrence of an effect, given its payload
    and a continuation that resumes the rest of the computation with
    the same handler installed
    """
    def __call__(self, payload: Any, resume: Resume) -> Computation[Any]:
        ...


class Handler(Immutable):
    """
    Base class for handlers written as classes. Methods named after
    effects are clauses, and the optional ``return_`` method transforms
    the final value of the handled computation. Effects named after
    Python keywords are looked up with a trailing underscore, so an
    effect literally named ``'raise_'`` never matches ``raise_``.

    Example:
        >>> class Default(Handler):
        ...     value: int
        ...     def raise_(self, reason, resume):
        ...         return ret(self.value)
        >>> run(with_handler(Default(42)).handle(op('raise', 'oops')))
        42
    """
    pass


ReturnClause = Callable[[Any], Computation[Any]]

HandlerLike = Union[Mapping[str, Union[Clause, ReturnClause]], Handler]


def _attribute_name(name: str) -> Optional[str]:
    if name.startswith('_'):
        return None
    if iskeyword(name):
        return name + '_'
    if name.endswith('_') and iskeyword(name[:-1]):
        return None
    return name


def _lookup(handler: HandlerLike,
            name: str) -> Optional[Union[Clause, ReturnClause]]:
    if isinstance(handler, Mapping):
        return handler.get(name)
    attribute = _attribute_name(name)
    if attribute is None:
        return None
    clause = getattr(handler, attribute, None)
    return clause if callable(clause) else None


def _clause(handler: HandlerLike, effect: str) -> Optional[Clause]:
    if effect == RETURN:
        return None
    return _lookup(handler, effect)  # type: ignore


def _return_clause(handler: HandlerLike) -> Optional[ReturnClause]:
    return _lookup(handler, RETURN)  # type: ignore


class WithHandler(Immutable):
    """
    A handler layer. `handle` rewrites a computation so that effects the
    handler has clauses for are resolved by it, and all other effects
    are forwarded unchanged with the handler re-installed around
    the rest of the computation.
    """
    handler: HandlerLike

    def handle(self, computation: Computation[A]) -> Computation[B]:
        """
        Install this handler around ``computation``

        Example:
            >>> pick_true = with_handler({'decide': lambda _, k: k(True)})
            >>> run(pick_true.handle(op('decide')))
            True

        Args:
            computation: the computation to handle
        Return:
            ``computation`` with the effects of this handler resolved
        """
        if isinstance(computation, Return):
            on_return = _return_clause(self.handler)
            if on_return is None:
                return computation  # type: ignore
            return on_return(computation.value)
        if isinstance(computation, Operation):
            cont = computation.cont

            def resume(y: Any) -> Computation[B]:
                return self.handle(cont(y))

            clause = _clause(self.handler, computation.effect)
            if clause is None:
                return Operation(computation.effect, computation.payload, resume)
            return clause(computation.payload, resume)
        raise MalformedComputation(computation)

    __call__ = handle


def with_handler(handler: HandlerLike) -> WithHandler:
    """
    Create a handler layer from a handler object. ``handler`` is either
    a mapping from effect names to clauses, with an optional ``'return'``
    key, or an object with clause methods named after effects and an
    optional ``return_`` method (see `Handler`).

    Example:
        >>> collect = with_handler({
        ...     'return': lambda v: ret([v]),
        ...     'decide': lambda _, k: k(True).and_then(
        ...         lambda t: k(False).map(lambda f: t + f)
        ...     )
        ... })
        >>> run(collect.handle(op('decide')))
        [True, False]

    Args:
        handler: the handler object
    Return:
        `WithHandler` installing ``handler``
    """
    return WithHandler(handler)


@curry
def handle(handler: HandlerLike,
           computation: Computation[A]) -> Computation[B]:
    """
    Shorthand for ``with_handler(handler).handle(computation)``

    Args:
        handler: the handler object
        computation: the computation to handle
    Return:
        ``computation`` handled by ``handler``
    """
    return WithHandler(handler).handle(computation)


__all__ = ['Handler', 'WithHandler', 'with_handler', 'handle', 'Clause']
