r"""
   ____  _____ _______ _____  ______          __  __
  / __ \/ ____|__   __|  __ \|  ____|   /\   |  \/  |
 | |  | | (___    | |  | |__) | |__     /  \  | \  / |
 | |  | |\___ \   | |  |  _  /|  __|   / /\ \ | |\/| |
 | |__| |____) |  | |  | | \ \| |____ / ____ \| |  | |
  \___\_\_____/   |_|  |_|  \_\______/_/    \_\_|  |_|
"""

import logging

# expose the main classes
from .stream import IStream, Stream

# expose the factory functions
from .factories import (
    of_iterable,
    of,
    of_generator,
    empty,
    concat,
    from_range,
    repeat,
    iterate,
    S
)

# expose configuration and errors
from .config import StreamConfig, config, configure
from .types import SourceConsumedError

# library code never configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "IStream",
    "Stream",
    "of_iterable",
    "of",
    "of_generator",
    "empty",
    "concat",
    "from_range",
    "repeat",
    "iterate",
    "S",
    "StreamConfig",
    "config",
    "configure",
    "SourceConsumedError"
]
