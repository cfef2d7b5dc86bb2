"""Java rule set."""

import re

from ..models import Bug, Severity
from .base import BraceSpanTracker, Rule, SourceFile, match_rules
from .common import run_common_checks

LANGUAGE = "java"

METHOD_LENGTH_LIMIT = 30

OUTPUT_RULES: list[Rule] = [
    Rule(
        name="system_out",
        severity=Severity.info,
        category="Java",
        message="System.out usage",
        description="System.out is used for debugging. Use a logging framework in production.",
        suggestion="Use Log4j, SLF4J, or java.util.logging instead.",
        regex=re.compile(r"System\.out\.print(?:ln)?\s*\("),
        anchors=("System.out",),
    ),
]

COMPARISON_RULES: list[Rule] = [
    Rule(
        name="string_reference_equality",
        severity=Severity.warning,
        category="Java",
        message="String comparison with ==",
        description="Using == to compare strings compares references, not values.",
        suggestion="Use .equals() method for string comparison: str1.equals(str2)",
        regex=re.compile(r'\w+\s*==\s*"[^"]*"\s*;?\s*$|"[^"]*"\s*==\s*\w+'),
        anchors=("==",),
        stripped=True,
    ),
    Rule(
        name="generic_exception",
        severity=Severity.warning,
        category="Java",
        message="Catching generic Exception",
        description="Catching generic Exception catches all RuntimeExceptions too.",
        suggestion="Catch specific exceptions or rethrow after handling.",
        regex=re.compile(r"catch\s*\(\s*Exception\s+\w+\s*\)"),
        anchors=("catch",),
    ),
    Rule(
        name="empty_catch",
        severity=Severity.warning,
        category="Code Quality",
        message="Empty catch block",
        description="Empty catch blocks silently swallow exceptions.",
        suggestion="Log the exception or add a comment explaining why it is empty.",
        regex=re.compile(r"catch\s*\([^)]+\)\s*\{\s*\}"),
        anchors=("catch",),
    ),
]

# Checked after the method length bookkeeping for the line
TRAILING_RULES: list[Rule] = [
    Rule(
        name="thread_sleep",
        severity=Severity.warning,
        category="Java",
        message="Thread.sleep() usage",
        description="Thread.sleep() can cause unresponsive applications.",
        suggestion="Use proper concurrency mechanisms or scheduling.",
        regex=re.compile(r"Thread\.sleep\s*\("),
        anchors=("Thread.sleep",),
    ),
    Rule(
        name="system_exit",
        severity=Severity.warning,
        category="Java",
        message="System.exit() call",
        description="System.exit() terminates the JVM abruptly.",
        suggestion="Throw an exception instead to allow calling code to handle it.",
        regex=re.compile(r"System\.exit\s*\("),
        anchors=("System.exit",),
    ),
    Rule(
        name="todo_comment",
        severity=Severity.info,
        category="Code Quality",
        message="TODO/FIXME comment",
        description="There is an unfinished task marker in the code.",
        suggestion="Address the TODO or create a tracking issue.",
        regex=re.compile(r"//\s*TODO|/\*\s*TODO|//\s*FIXME"),
        anchors=("TODO", "FIXME"),
        stripped=True,
    ),
    Rule(
        name="sql_concatenation",
        severity=Severity.critical,
        category="Security",
        message="Potential SQL Injection",
        description="SQL query built with string concatenation is vulnerable to SQL injection.",
        suggestion="Use PreparedStatement with parameterized queries.",
        regex=re.compile(r"(?:SELECT|INSERT|UPDATE|DELETE|CREATE|DROP).*\+"),
        anchors=("SELECT", "INSERT"),
    ),
    Rule(
        name="hardcoded_password",
        severity=Severity.critical,
        category="Security",
        message="Hardcoded password",
        description="Hardcoded passwords are a security risk.",
        suggestion="Use environment variables or a configuration file with secure storage.",
        regex=re.compile(r"""(?:password|passwd|pwd|secret)\s*=\s*["'][^"']+["']""", re.IGNORECASE),
        anchors=("password", "passwd"),
    ),
]

_METHOD_START = re.compile(r"^\s*(?:public|private|protected)?\s*(?:static)?\s*\w+\s+\w+\s*\(")
_METHOD_NAME = re.compile(r"(?:public|private|protected)?\s*(?:static)?\s*\w+\s+(\w+)\s*\(")
_TO_STRING_CALL = re.compile(r"\.toString\(\)\s*;?\s*$")
_EQUALS_CALL = re.compile(r"\.equals\(")
_SUPPRESS_WARNINGS = re.compile(r"@SuppressWarnings\s*\(")


def _null_pointer_risk(source: SourceFile, index: int, line: str) -> bool:
    if not (_TO_STRING_CALL.search(line.strip()) or _EQUALS_CALL.search(line)):
        return False
    if "Objects.requireNonNull" in line or "@NonNull" in line:
        return False
    window = " ".join(source.lines[index:index + 3])
    return "get" in window and "null check" not in window


def check_java(source: SourceFile) -> list[Bug]:
    bugs: list[Bug] = []
    tracker = BraceSpanTracker(_METHOD_START, _METHOD_NAME, default_name="unknown", stripped=True)

    for index, line in enumerate(source.lines):
        line_num = index + 1
        bugs.extend(match_rules(source, line_num, line, OUTPUT_RULES))

        if _null_pointer_risk(source, index, line):
            bugs.append(source.bug(
                line_num,
                Severity.warning,
                "Java",
                "Potential NullPointerException",
                "Calling methods on objects without null checks can cause NullPointerException.",
                "Add null checks or use Optional.ofNullable().",
                snippet=line.strip(),
            ))

        bugs.extend(match_rules(source, line_num, line, COMPARISON_RULES))

        span = tracker.feed(line_num, line)
        if span and span.length > METHOD_LENGTH_LIMIT:
            bugs.append(source.bug(
                span.start_line,
                Severity.warning,
                "Code Quality",
                f"Long method '{span.name}'",
                f"Method has {span.length} lines. Consider breaking it into smaller methods.",
                f"Methods should be kept under {METHOD_LENGTH_LIMIT} lines for better readability.",
                snippet=source.line_at(span.start_line).strip(),
            ))

        bugs.extend(match_rules(source, line_num, line, TRAILING_RULES))

        if _SUPPRESS_WARNINGS.search(line):
            next_line = source.next_line(index)
            if next_line and not next_line.strip().startswith("@SuppressWarnings"):
                bugs.append(source.bug(
                    line_num,
                    Severity.info,
                    "Java",
                    "Suppressed warnings",
                    "Warnings are being suppressed. Consider addressing the root cause.",
                    "Remove @SuppressWarnings and fix the underlying issue.",
                    column=line.find("@SuppressWarnings"),
                    snippet=line.strip(),
                ))

    return bugs


def analyze(code: str) -> list[Bug]:
    source = SourceFile(LANGUAGE, code)
    return run_common_checks(source) + check_java(source)
