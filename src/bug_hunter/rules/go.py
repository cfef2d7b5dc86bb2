"""Go rule set.

The error checks only look at the line directly after the call; an empty
line there, or the end of the file, is not reported.
"""

import re

from ..models import Bug, Severity
from .base import Rule, SourceFile, column_of, match_rules
from .common import run_common_checks

LANGUAGE = "go"

FMT_PRINT_RULE = Rule(
    name="fmt_print",
    severity=Severity.info,
    category="Go",
    message="fmt.Print usage",
    description="Use a logging library instead of fmt.Print in production.",
    suggestion="Use log package or a structured logger like zap or logrus.",
    regex=re.compile(r"fmt\.Print(?:ln)?\s*\("),
    anchors=("fmt.Print",),
)

TODO_RULE = Rule(
    name="todo_comment",
    severity=Severity.info,
    category="Code Quality",
    message="TODO comment",
    description="There is an unfinished task marker.",
    suggestion="Address the TODO.",
    regex=re.compile(r"//\s*TODO"),
    anchors=("TODO",),
)

_ERR_ASSIGNMENT = re.compile(r"\berr\s*:=\s*")
_STRCONV_PARSE = re.compile(r"strconv\.(?:ParseInt|ParseFloat|ParseBool)\s*\(")


def check_go(source: SourceFile) -> list[Bug]:
    bugs: list[Bug] = []
    is_main_package = any("package main" in line for line in source.lines)

    for index, line in enumerate(source.lines):
        line_num = index + 1
        next_line = source.next_line(index)

        if is_main_package:
            bugs.extend(match_rules(source, line_num, line, [FMT_PRINT_RULE]))

        if _ERR_ASSIGNMENT.search(line):
            if next_line and "if err != nil" not in next_line and "return err" not in next_line:
                bugs.append(source.bug(
                    line_num,
                    Severity.warning,
                    "Go",
                    "Error not checked",
                    "Error return value is not being checked.",
                    "Handle the error or explicitly ignore it with _.",
                    column=column_of(line, "err :="),
                    snippet=line.strip(),
                ))

        bugs.extend(match_rules(source, line_num, line, [TODO_RULE]))

        if _STRCONV_PARSE.search(line):
            if next_line and "if err != nil" not in next_line:
                bugs.append(source.bug(
                    line_num,
                    Severity.warning,
                    "Go",
                    "Parse error not checked",
                    "strconv result should check for conversion errors.",
                    "Check the error return value.",
                    column=column_of(line, "strconv"),
                    snippet=line.strip(),
                ))

    return bugs


def analyze(code: str) -> list[Bug]:
    source = SourceFile(LANGUAGE, code)
    return run_common_checks(source) + check_go(source)
