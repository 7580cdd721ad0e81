"""Core type definitions for magic-json."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Tuple


DEFAULT_ENCODING = "utf-8"
COMPACT_SEPARATORS: Tuple[str, str] = (",", ":")
MAX_INDENT = 10


class ErrorType(Enum):
    """Enumeration of error types."""
    STRUCTURE = "structure"
    LOCATION = "location"


@dataclass(frozen=True)
class FormattingDescriptor:
    """
    Formatting conventions inferred from a JSON source text.

    Attributes:
        indent: One level of indentation ("  ", "\\t", ...) or None
        use_crlf: CRLF line endings outnumber LF ones
        has_final_newline: The text ends with a line ending
        source_path: File the value was read from, if any
    """
    indent: Optional[str] = None
    use_crlf: bool = False
    has_final_newline: bool = False
    source_path: Optional[Path] = None

    @property
    def newline(self) -> str:
        """Line ending to use when writing text back."""
        return "\r\n" if self.use_crlf else "\n"


DEFAULT_DESCRIPTOR = FormattingDescriptor()


class ProcessingError(Exception):
    """Custom exception for magic-json errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class UntrackableValueError(ProcessingError, TypeError):
    """Raised when formatting is attached to something that cannot carry it."""

    def __init__(self, value: Any):
        super().__init__(
            f"cannot track a value of type {type(value).__name__}",
            ErrorType.STRUCTURE,
            context={"type": type(value).__name__},
        )


class MissingLocationError(ProcessingError, TypeError):
    """Raised by write_to() when neither an explicit nor a recorded path exists."""

    def __init__(self, value: Any = None):
        super().__init__(
            "no location available",
            ErrorType.LOCATION,
            context={"type": type(value).__name__},
        )
