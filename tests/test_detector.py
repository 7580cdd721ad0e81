"""Tests for the formatting detector."""

import pytest
from typing import List, Tuple
from magic_json.detector import FormattingDetector
from magic_json.types import FormattingDescriptor


def to_json(patterns: List[Tuple[str, str]], open_eol: str = "\n", close_eol: str = None) -> str:
    """Build a JSON object with one "keyN": "..." line per (indent, eol) pattern."""
    if close_eol is None:
        close_eol = open_eol
    last = len(patterns) - 1
    lines = []
    for index, (indent, eol) in enumerate(patterns):
        comma = "," if index < last else ""
        lines.append(f'{indent}"key{index}": "value"{comma}{eol}')
    return "{" + open_eol + "".join(lines) + close_eol + "}"


class TestIndentDetection:
    """Tests for FormattingDetector.detect_indent."""

    def setup_method(self):
        """Set up test fixtures."""
        self.detector = FormattingDetector()

    def test_detect_regular_space_indent(self):
        """Nested space indentation yields the single-level unit."""
        text = to_json([("  ", "\n"), ("    ", "\n"), ("      ", "\n"), ("    ", "\n"), ("  ", "\n")])
        assert self.detector.detect_indent(text) == "  "

    def test_detect_regular_tab_indent(self):
        """Nested tab indentation yields a single tab."""
        text = to_json([("\t", "\n"), ("\t\t", "\n"), ("\t\t\t", "\n"), ("\t\t", "\n"), ("\t", "\n")])
        assert self.detector.detect_indent(text) == "\t"

    def test_detect_four_space_indent(self):
        """Deeply nested four-space document yields four spaces."""
        text = '{\n    "a": {\n        "b": {\n            "c": 1\n        }\n    }\n}'
        assert self.detector.detect_indent(text) == "    "

    def test_more_spaces_than_tabs(self):
        """Spaces win when used more often than tabs."""
        text = to_json([("  ", "\n"), ("    ", "\n"), ("\t", "\n")])
        assert self.detector.detect_indent(text) == "  "

    def test_more_tabs_than_spaces(self):
        """Tabs win when used more often than spaces."""
        text = to_json([("\t", "\n"), ("\t\t", "\n"), ("  ", "\n")])
        assert self.detector.detect_indent(text) == "\t"

    def test_no_indent(self):
        """Unindented text has no indentation unit."""
        text = to_json([("", "\n"), ("", "\n")])
        assert self.detector.detect_indent(text) is None

    def test_single_line(self):
        """Compact single-line JSON has no indentation unit."""
        assert self.detector.detect_indent('{"a":1,"b":[1,2]}') is None

    def test_tie_keeps_first_seen_unit(self):
        """Equal counts resolve to the unit encountered first."""
        assert self.detector.detect_indent("[\n  1,\n2,\n    3,\n4\n]") == "  "
        assert self.detector.detect_indent("[\n    1,\n2,\n  3,\n4\n]") == "    "

    def test_same_indent_reuses_previous_unit(self):
        """Repeated depth counts toward the unit derived for that depth."""
        text = '{\n  "a": {\n      "b": 1,\n      "c": 2,\n      "d": 3\n  }\n}'
        # "  " is seen once, "    " (the step between 2 and 6) four times
        assert self.detector.detect_indent(text) == "    "

    def test_mixed_leading_whitespace_is_ignored(self):
        """A line starting with spaces then tabs gives no signal."""
        text = '[\n \t1,\n\t 2,\n  3\n]'
        assert self.detector.detect_indent(text) == "  "

    def test_crlf_lines_are_measured_without_carriage_return(self):
        """Carriage returns are not part of the measured lines."""
        text = '{\r\n  "a": [\r\n    1\r\n  ]\r\n}\r\n'
        assert self.detector.detect_indent(text) == "  "


class TestLineEndingDetection:
    """Tests for FormattingDetector.detect_line_endings."""

    def setup_method(self):
        """Set up test fixtures."""
        self.detector = FormattingDetector()

    def test_detect_lf(self):
        """LF-only text does not use CRLF."""
        text = to_json([("  ", "\n")] * 5)
        assert self.detector.detect_line_endings(text) == (False, False)

    def test_detect_crlf(self):
        """CRLF-only text uses CRLF."""
        text = to_json([("  ", "\r\n")] * 5, "\r\n")
        assert self.detector.detect_line_endings(text) == (True, False)

    def test_detect_mixed_majority_crlf(self):
        """CRLF wins when it strictly outnumbers LF."""
        text = to_json([("  ", "\r\n"), ("  ", "\n"), ("  ", "\r\n")], "\r\n")
        use_crlf, _ = self.detector.detect_line_endings(text)
        assert use_crlf is True

    def test_detect_mixed_majority_lf(self):
        """LF wins when it outnumbers CRLF."""
        text = to_json([("  ", "\n"), ("  ", "\r\n"), ("  ", "\n")], "\n")
        use_crlf, _ = self.detector.detect_line_endings(text)
        assert use_crlf is False

    def test_tie_resolves_to_lf(self):
        """Equal CRLF and LF counts resolve to LF."""
        use_crlf, _ = self.detector.detect_line_endings("[\r\n1\n]")
        assert use_crlf is False

    def test_leading_newline_is_lf(self):
        """A newline at position 0 is counted as LF."""
        assert self.detector.detect_line_endings("\n[1]") == (False, False)

    @pytest.mark.parametrize("text,expected", [
        ("{}", False),
        ("{}\n", True),
        ("{}\r\n", True),
        ("{\n}", False),
        ("{}\n\n", True),
    ])
    def test_final_newline(self, text, expected):
        """Final newline is detected from the last character."""
        _, has_final_newline = self.detector.detect_line_endings(text)
        assert has_final_newline is expected


class TestIterLines:
    """Tests for FormattingDetector._iter_lines."""

    def test_strips_only_terminating_carriage_returns(self):
        """A CR is removed only when an LF follows it."""
        lines = list(FormattingDetector._iter_lines("[\r\n  1\n]\r"))

        assert lines == ["[", "  1", "]\r"]

    def test_final_line_ending_yields_empty_segment(self):
        """Text ending with CRLF ends with an empty line."""
        assert list(FormattingDetector._iter_lines("{}\r\n")) == ["{}", ""]


class TestDetect:
    """Tests for FormattingDetector.detect."""

    def test_detect_two_space_manifest(self, two_space_json):
        """All three signals are combined into one descriptor."""
        descriptor = FormattingDetector().detect(two_space_json)

        assert descriptor == FormattingDescriptor(indent="  ", use_crlf=False, has_final_newline=True)
        assert descriptor.source_path is None

    def test_detect_tab_crlf_document(self, tab_crlf_json):
        """Tabs and CRLF are detected together."""
        descriptor = FormattingDetector().detect(tab_crlf_json)

        assert descriptor.indent == "\t"
        assert descriptor.use_crlf is True
        assert descriptor.has_final_newline is False
        assert descriptor.newline == "\r\n"
