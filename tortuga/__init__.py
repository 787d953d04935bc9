"""Tortuga: lexer, parser and interpreter for a tiny actor-message language."""

from . import constants as _constants
from . import errors as _errors
from . import reader as _reader
from . import runtime as _runtime
from .constants import *  # noqa: F401,F403
from .errors import *  # noqa: F401,F403
from .reader import *  # noqa: F401,F403
from .runtime import *  # noqa: F401,F403

__all__ = []
__all__ += getattr(_constants, "__all__", [])
__all__ += getattr(_errors, "__all__", [])
__all__ += getattr(_reader, "__all__", [])
__all__ += getattr(_runtime, "__all__", [])
__all__ = list(dict.fromkeys(__all__))
