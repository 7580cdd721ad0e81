"""Async text file access that keeps line endings untouched."""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Union
from ..types import DEFAULT_ENCODING


PathLike = Union[str, Path]


class FileIO:
    """
    Reads and writes JSON documents as text.

    Files are opened with newline="" so that CRLF sequences reach the
    formatting detector as they are on disk, and are written back without
    platform newline translation. Blocking calls run in a worker thread.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the file accessor.

        Args:
            encoding: Text encoding used for reads and writes
            logger: Optional logger instance
        """
        self.encoding = encoding
        self.logger = logger or logging.getLogger(__name__)

    async def read_text(self, path: PathLike) -> str:
        """
        Read the whole file as text.

        Args:
            path: File to read

        Returns:
            File contents with original line endings

        Raises:
            OSError: If the file cannot be read
        """
        try:
            text = await asyncio.to_thread(self._read, Path(path))
        except OSError as e:
            self.logger.error(f"Failed to read {path}: {e}")
            raise

        self.logger.info(f"Read {len(text)} characters from {path}")
        return text

    async def write_text(self, path: PathLike, text: str) -> None:
        """
        Replace the file contents with text.

        Args:
            path: File to write
            text: Text to write verbatim

        Raises:
            OSError: If the file cannot be written
        """
        try:
            await asyncio.to_thread(self._write, Path(path), text)
        except OSError as e:
            self.logger.error(f"Failed to write {path}: {e}")
            raise

        self.logger.info(f"Wrote {len(text)} characters to {path}")

    def _read(self, path: Path) -> str:
        with path.open("r", encoding=self.encoding, newline="") as f:
            return f.read()

    def _write(self, path: Path, text: str) -> None:
        with path.open("w", encoding=self.encoding, newline="") as f:
            f.write(text)
