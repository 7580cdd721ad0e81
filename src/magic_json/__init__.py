"""
magic-json - Parse and serialize JSON, preserving indentation and line endings.

Values returned by decode() remember how their source text was formatted;
encode() writes them back the same way, so edited documents keep their
original indentation, line endings and final newline.
"""

from .association import JSONArray, JSONObject
from .magic_json import (
    decode,
    encode,
    get_descriptor,
    is_managed,
    is_tracked,
    read_from,
    write_to,
)
from .types import (
    DEFAULT_DESCRIPTOR,
    ErrorType,
    FormattingDescriptor,
    MissingLocationError,
    ProcessingError,
    UntrackableValueError,
)

__version__ = "1.1.5"
__all__ = [
    "decode",
    "encode",
    "read_from",
    "write_to",
    "is_tracked",
    "is_managed",
    "get_descriptor",
    "FormattingDescriptor",
    "DEFAULT_DESCRIPTOR",
    "JSONObject",
    "JSONArray",
    "ErrorType",
    "ProcessingError",
    "MissingLocationError",
    "UntrackableValueError",
]
