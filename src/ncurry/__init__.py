from .arity import *  # noqa
from .functions import *  # noqa
from .immutable import Immutable  # noqa
from .sequences import *  # noqa

try:
    from . import hypothesis_strategies  # noqa
except ImportError:
    pass
