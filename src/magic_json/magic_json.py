"""Parse and serialize JSON while preserving indentation and line endings."""

import dataclasses
import json
import logging
import threading
import warnings
from pathlib import Path
from typing import Any, Optional, Union
from .association import AssociationTable, is_trackable, make_trackable
from .detector import FormattingDetector
from .io.file_io import FileIO, PathLike
from .types import (
    COMPACT_SEPARATORS,
    DEFAULT_DESCRIPTOR,
    DEFAULT_ENCODING,
    MAX_INDENT,
    FormattingDescriptor,
    MissingLocationError,
)


logger = logging.getLogger(__name__)

_table = AssociationTable()
_detector = FormattingDetector()
_is_managed_warned = False
_is_managed_lock = threading.Lock()


def decode(s: Union[str, bytes, bytearray], **kwargs: Any) -> Any:
    """
    Deserialize a JSON document and remember how it was formatted.

    Accepts the same keyword arguments as json.loads(). When the result is
    a dict or a list, its indentation, line endings and final newline are
    recorded so that encode() can reproduce them.

    A plain dict or list root is returned as a JSONObject or JSONArray,
    which compare and serialize exactly like their base types.

    Raises:
        json.JSONDecodeError: If s is not valid JSON
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode(json.detect_encoding(s), "surrogatepass")

    value = json.loads(s, **kwargs)
    if not isinstance(value, (dict, list)):
        return value

    value = make_trackable(value)
    if not is_trackable(value):
        logger.debug(f"Not tracking formatting for {type(value).__name__} root")
        return value

    _table.associate(value, _detector.detect(s))
    return value


def normalize_indent(indent: Union[int, str, None]) -> Optional[str]:
    """
    Turn an indent argument into the string json.dumps() should use.

    Numbers mean that many spaces and strings are used as they are, both
    capped at MAX_INDENT characters. Zero and the empty string mean no
    indentation at all, so the output stays on one line.
    """
    if indent is None:
        return None
    if isinstance(indent, int):
        indent = " " * min(indent, MAX_INDENT)
    else:
        indent = indent[:MAX_INDENT]
    return indent or None


def encode(obj: Any, *, indent: Union[int, str, None] = None, **kwargs: Any) -> str:
    """
    Serialize obj to a JSON string, replaying its original formatting.

    Accepts the same keyword arguments as json.dumps(). For values that did
    not come from decode(), the output matches json.dumps() with
    ensure_ascii=False and, without indentation, compact separators.

    Args:
        obj: Value to serialize
        indent: Overrides the detected indentation; line endings and the
            final newline are still taken from the source text

    Returns:
        The JSON text
    """
    descriptor = _table.lookup(obj) or DEFAULT_DESCRIPTOR
    if indent is None:
        indent = descriptor.indent
    indent = normalize_indent(indent)

    kwargs.setdefault("ensure_ascii", False)
    if indent is None:
        kwargs.setdefault("separators", COMPACT_SEPARATORS)

    text = json.dumps(obj, indent=indent, **kwargs)
    if descriptor.has_final_newline:
        text += "\n"
    if descriptor.use_crlf:
        text = text.replace("\n", "\r\n")
    return text


async def read_from(path: PathLike, *, encoding: str = DEFAULT_ENCODING) -> Any:
    """
    Read and decode a JSON file.

    The absolute path of the file is remembered, so that write_to() can
    later be called without a path.

    Raises:
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
    """
    text = await FileIO(encoding, logger).read_text(path)
    value = decode(text)

    descriptor = _table.lookup(value)
    if descriptor is not None:
        source_path = Path(path).absolute()
        _table.associate(value, dataclasses.replace(descriptor, source_path=source_path))
    return value


async def write_to(obj: Any, path: Optional[PathLike] = None, *,
                   encoding: str = DEFAULT_ENCODING, **kwargs: Any) -> None:
    """
    Encode obj and write it to a file.

    Args:
        obj: Value to write
        path: Destination file. Defaults to the file obj was read from.
        encoding: Text encoding of the file
        **kwargs: Passed to encode(), e.g. indent

    Raises:
        MissingLocationError: If path is omitted and obj was not read from a file
        OSError: If the file cannot be written
    """
    if path is None:
        descriptor = _table.lookup(obj)
        path = descriptor.source_path if descriptor is not None else None
    if path is None:
        raise MissingLocationError(obj)

    await FileIO(encoding, logger).write_text(path, encode(obj, **kwargs))


def is_tracked(value: Any) -> bool:
    """Return True if value came from decode() and carries formatting."""
    return _table.is_tracked(value)


def get_descriptor(value: Any) -> Optional[FormattingDescriptor]:
    """Return the formatting recorded for value, or None."""
    return _table.lookup(value)


def is_managed(value: Any) -> bool:
    """Deprecated alias of is_tracked()."""
    global _is_managed_warned
    message = "is_managed() is deprecated, please use is_tracked() instead."
    with _is_managed_lock:
        first_call = not _is_managed_warned
        _is_managed_warned = True
    if first_call:
        logger.warning(message)
    warnings.warn(message, DeprecationWarning, stacklevel=2)
    return is_tracked(value)
