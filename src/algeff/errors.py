from typing import Any


class MalformedComputation(TypeError):
    """
    Raised when a value that is neither a `Return` nor an `Operation`
    is used where a computation is expected
    """
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f'unknown computation: {value!r}')


class UnhandledEffect(LookupError):
    """
    Raised by `run` when an effect other than ``io`` or ``fail``
    reaches the driver, i.e a handler layer is missing
    """
    def __init__(self, effect: str):
        self.effect = effect
        super().__init__(f'unhandled effect: {effect}')


class Failure(RuntimeError):
    """
    Raised by `run` when the ``fail`` effect is not intercepted by any
    handler
    """
    def __init__(self, message: str = 'computation failed!'):
        self.message = message
        super().__init__(message)


__all__ = ['MalformedComputation', 'UnhandledEffect', 'Failure']
