r"""
'     _                          _        _     _ _     _
'    (_)_ __ ___  _ __ ___  _   _| |_ __ _| |__ | (_)___| |_
'    | | '_ ` _ \| '_ ` _ \| | | | __/ _` | '_ \| | / __| __|
'    | | | | | | | | | | | | |_| | || (_| | |_) | | \__ \ |_
'    |_|_| |_| |_|_| |_| |_|\__,_|\__\__,_|_.__/|_|_|___/\__|
"""

import logging

# expose the list classes
from .lists import AbstractList, ImmutableList, BufferLazyList, StreamLazyList

# expose the lazy sequence adapter
from .stream import Stream

# expose the factory functions
from .factories import (
    of,
    from_iterable,
    from_json,
    empty,
    EMPTY,
    L
)

# expose the sentinel and error type
from .types import ABSENT, ImmutabilityViolation

# expose json glue
from .serialization import ListJSONEncoder, dumps, loads

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "AbstractList",
    "ImmutableList",
    "BufferLazyList",
    "StreamLazyList",
    "Stream",
    "of",
    "from_iterable",
    "from_json",
    "empty",
    "EMPTY",
    "L",
    "ABSENT",
    "ImmutabilityViolation",
    "ListJSONEncoder",
    "dumps",
    "loads"
]
