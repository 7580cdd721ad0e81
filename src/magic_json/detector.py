"""Formatting detection for JSON source text."""

import logging
import re
from collections import Counter
from typing import Iterator, Optional, Tuple
from .types import FormattingDescriptor


_LEADING_INDENT = re.compile(r"^( +|\t+)")


class FormattingDetector:
    """
    Infers indentation and line-ending conventions from JSON text.

    The text is scanned once, line by line. Line endings are counted per
    style; indentation is measured as the difference between the leading
    whitespace of consecutive indented lines, so that one nesting level is
    isolated even in deeply nested documents.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the formatting detector.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def detect(self, text: str) -> FormattingDescriptor:
        """
        Detect the formatting conventions of a JSON text.

        Args:
            text: Raw JSON source text

        Returns:
            FormattingDescriptor describing the text
        """
        use_crlf, has_final_newline = self.detect_line_endings(text)
        indent = self.detect_indent(text)

        self.logger.debug(
            f"Detected formatting: indent={indent!r}, crlf={use_crlf}, "
            f"final_newline={has_final_newline}"
        )
        return FormattingDescriptor(
            indent=indent,
            use_crlf=use_crlf,
            has_final_newline=has_final_newline,
        )

    def detect_line_endings(self, text: str) -> Tuple[bool, bool]:
        """
        Count CRLF and LF line endings.

        Args:
            text: Raw JSON source text

        Returns:
            Tuple of (use_crlf, has_final_newline). CRLF wins only when it
            strictly outnumbers LF.
        """
        crlf_count = 0
        lf_count = 0
        pos = text.find("\n")
        while pos >= 0:
            if pos > 0 and text[pos - 1] == "\r":
                crlf_count += 1
            else:
                lf_count += 1
            pos = text.find("\n", pos + 1)

        return crlf_count > lf_count, text.endswith("\n")

    def detect_indent(self, text: str) -> Optional[str]:
        """
        Guess the string used for one level of indentation.

        Args:
            text: Raw JSON source text

        Returns:
            The most used indentation unit, or None if no line is indented
        """
        candidates: Counter = Counter()
        previous = ""
        key = ""

        for line in self._iter_lines(text):
            if not line:
                continue

            match = _LEADING_INDENT.match(line)
            if not match:
                previous = ""
                continue

            indent = match.group(1)
            if line[len(indent):len(indent) + 1] in (" ", "\t"):
                # Spaces followed by tabs or the reverse: no signal
                continue

            if indent == previous:
                candidates[key] += 1
            elif previous and indent[0] == previous[0]:
                key = indent[0] * abs(len(indent) - len(previous))
                candidates[key] += 1
            else:
                key = indent
                candidates[key] += 1
            previous = indent

        if not candidates:
            return None

        # most_common() keeps insertion order among equal counts
        return candidates.most_common(1)[0][0]

    @staticmethod
    def _iter_lines(text: str) -> Iterator[str]:
        """Yield lines of text without their LF or CRLF terminator."""
        lines = text.split("\n")
        for line in lines[:-1]:
            yield line[:-1] if line.endswith("\r") else line
        # The last segment has no LF, so a trailing CR is not a line ending
        yield lines[-1]
