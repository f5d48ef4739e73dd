import logging

from .metadata import VERSION
from .option import (
    ABSENT,
    DEFAULT_INSPECT_DEPTH,
    Nothing,
    Option,
    Some,
    UnwrapError,
    as_option,
)
from .result import Err, Ok, Result, ResultError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = VERSION

__all__ = [
    "ABSENT",
    "DEFAULT_INSPECT_DEPTH",
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "Result",
    "ResultError",
    "Some",
    "UnwrapError",
    "as_option",
]
