from dataclasses import dataclass


class Immutable:
    """
    Super class that makes subclasses frozen dataclasses. Computations
    and handler objects are built on it so that constructing new values
    never mutates existing ones.

    Example:
        >>> class Default(Immutable):
        ...     value: int
        >>> d = Default(42)
        >>> d.value = 0
        dataclasses.FrozenInstanceError: cannot assign to field 'value'

    """

    def __init_subclass__(cls,
                          init: bool = True,
                          repr: bool = True,
                          eq: bool = True,
                          order: bool = False) -> None:
        super().__init_subclass__()
        dataclass(
            frozen=True, init=init, repr=repr, eq=eq, order=order
        )(cls)


__all__ = ['Immutable']
