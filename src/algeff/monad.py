from abc import ABC, abstractmethod
from typing import Any, Callable


class Functor(ABC):
    """
    Abstract base class for functors
    """
    @abstractmethod
    def map(self, f: Callable[[Any], Any]) -> 'Functor':
        """
        Map function ``f`` over the value wrapped by this functor

        Args:
            f: The function to apply to the wrapped value
        Return:
            The result of applying ``f`` to the wrapped value
        """
        pass


class Monad(Functor, ABC):
    """
    Base class for monadic types
    """
    @abstractmethod
    def and_then(self, f: Callable[[Any], Any]) -> 'Monad':
        pass


__all__ = ['Functor', 'Monad']
