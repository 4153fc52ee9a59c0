"""
Effect catalogs built on top of the core. Each module documents the
effects it defines by name, payload and resume value, and provides
handlers for them.
"""
from . import choice, console, exception, logging, state  # noqa
