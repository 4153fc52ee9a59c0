from .computation import *  # noqa
from .driver import run  # noqa
from .errors import *  # noqa
from .functions import *  # noqa
from .handler import *  # noqa
from .immutable import Immutable  # noqa

from . import effects  # noqa
