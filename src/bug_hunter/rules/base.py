"""Shared building blocks for the rule sets.

A rule set scans a :class:`SourceFile` line by line. Simple checks are
declared as :class:`Rule` tables and applied with :func:`match_rules`; checks
that need state or a neighbouring line are written out in the language module.
"""

import itertools
import re
from typing import NamedTuple, Optional

from ..models import Bug, Severity


class Rule(NamedTuple):
    """A single-line pattern with its fixed report text."""

    name: str
    severity: Severity
    category: str
    message: str
    description: str
    suggestion: str
    regex: re.Pattern
    # A match is dropped when this also matches the raw line
    exclude: Optional[re.Pattern] = None
    # First token found gives the column; empty means no column
    anchors: tuple[str, ...] = ()
    # Match against the stripped line instead of the raw one
    stripped: bool = False


class SourceFile:
    """Source text split into lines, plus the bug factory for one analysis.

    Bug ids are ``<language>-<line>-<ordinal>`` where the ordinal counts the
    bugs created through this object, so the same input always yields the
    same ids.
    """

    def __init__(self, language: str, code: str):
        self.language = language
        self.code = code
        self.lines = code.split("\n")
        self._ordinal = itertools.count()

    def line_at(self, line_num: int) -> str:
        """Return the 1-based line, or an empty string past the end."""
        if 1 <= line_num <= len(self.lines):
            return self.lines[line_num - 1]
        return ""

    def next_line(self, index: int) -> Optional[str]:
        """Return the line after 0-based ``index``, or None on the last line."""
        if index + 1 < len(self.lines):
            return self.lines[index + 1]
        return None

    def bug(
        self,
        line_num: int,
        severity: Severity,
        category: str,
        message: str,
        description: str,
        suggestion: str,
        column: Optional[int] = None,
        snippet: Optional[str] = None,
    ) -> Bug:
        return Bug(
            id=f"{self.language}-{line_num}-{next(self._ordinal)}",
            line=line_num,
            column=column,
            severity=severity,
            category=category,
            message=message,
            description=description,
            suggestion=suggestion,
            code_snippet=snippet,
        )


def column_of(line: str, *tokens: str) -> Optional[int]:
    """Offset of the first token present in ``line``, or None."""
    for token in tokens:
        pos = line.find(token)
        if pos >= 0:
            return pos
    return None


def match_rules(source: SourceFile, line_num: int, line: str, rules: list[Rule]) -> list[Bug]:
    """Apply a rule table to one line, in table order."""
    bugs = []
    for rule in rules:
        text = line.strip() if rule.stripped else line
        if not rule.regex.search(text):
            continue
        if rule.exclude is not None and rule.exclude.search(line):
            continue
        bugs.append(source.bug(
            line_num,
            rule.severity,
            rule.category,
            rule.message,
            rule.description,
            rule.suggestion,
            column=column_of(line, *rule.anchors),
            snippet=line.strip(),
        ))
    return bugs


def scan_rules(source: SourceFile, rules: list[Rule]) -> list[Bug]:
    """Apply a rule table to every line of the source."""
    bugs = []
    for line_num, line in enumerate(source.lines, start=1):
        bugs.extend(match_rules(source, line_num, line, rules))
    return bugs


class FunctionSpan(NamedTuple):
    start_line: int
    name: str
    length: int


class BraceSpanTracker:
    """Brace-balance approximation of function extent.

    A line matching ``start`` opens a function and resets the counter. Every
    line then adds its ``{`` and subtracts its ``}``. The function closes on
    the first line containing ``}`` that brings the counter back to zero. The
    counter keeps running between functions.
    """

    def __init__(
        self,
        start: re.Pattern,
        name: re.Pattern,
        default_name: str,
        stripped: bool = False,
    ):
        self.start = start
        self.name = name
        self.default_name = default_name
        self.stripped = stripped
        self.in_function = False
        self.start_line = 0
        self.function_name = ""
        self.depth = 0

    def feed(self, line_num: int, line: str) -> Optional[FunctionSpan]:
        """Advance over one line; return the span when a function closes."""
        text = line.strip() if self.stripped else line
        if self.start.search(text):
            self.in_function = True
            self.start_line = line_num
            match = self.name.search(text)
            self.function_name = self.default_name
            if match:
                self.function_name = next((g for g in match.groups() if g), self.default_name)
            self.depth = 0

        self.depth += line.count("{")
        self.depth -= line.count("}")

        if self.in_function and self.depth == 0 and "}" in line:
            self.in_function = False
            return FunctionSpan(self.start_line, self.function_name, line_num - self.start_line)
        return None
