"""clparse: command line parsing engine.

See ``clparse.commands`` for the public API.
"""

from clparse.commands import *  # noqa: F401,F403
from clparse.commands import __all__

__version__ = "0.1.0"
