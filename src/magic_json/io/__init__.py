"""I/O utilities for magic-json."""

from .file_io import FileIO

__all__ = ["FileIO"]
