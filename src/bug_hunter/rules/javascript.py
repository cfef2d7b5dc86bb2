"""JavaScript rule set.

Detects:
- Loose equality (==)
- var declarations
- new Array(), document.write(), innerHTML assignment
- setTimeout with a string body
- Promise chains spread over consecutive lines
- debugger statements and explicit null checks
- console.log in code with no try/catch at all
"""

import re

from ..models import Bug, Severity
from .base import Rule, SourceFile, match_rules
from .common import run_common_checks

LANGUAGE = "javascript"

JAVASCRIPT_RULES: list[Rule] = [
    Rule(
        name="loose_equality",
        severity=Severity.warning,
        category="JavaScript",
        message="Use === instead of ==",
        description="Using loose equality (==) can lead to unexpected type coercion.",
        suggestion="Use strict equality (===) for comparisons.",
        regex=re.compile(r"\s==\s(?!=)"),
        exclude=re.compile(r"""===\s*["'0]"""),
        anchors=("==",),
    ),
    Rule(
        name="var_usage",
        severity=Severity.info,
        category="JavaScript",
        message="Use let or const instead of var",
        description="The var keyword has function scope which can lead to bugs. Use let or const instead.",
        suggestion="Replace var with let or const for block-scoped variables.",
        regex=re.compile(r"\bvar\s+\w+"),
        anchors=("var",),
    ),
    Rule(
        name="new_array",
        severity=Severity.warning,
        category="JavaScript",
        message="Avoid new Array()",
        description="new Array() has confusing behavior with single number arguments.",
        suggestion="Use array literal [] or Array.of() instead.",
        regex=re.compile(r"new\s+Array\s*\("),
        anchors=("new Array",),
    ),
    Rule(
        name="document_write",
        severity=Severity.warning,
        category="JavaScript",
        message="Avoid document.write()",
        description="document.write() can overwrite the entire page if called after page load.",
        suggestion="Use DOM manipulation methods like document.createElement() instead.",
        regex=re.compile(r"document\.write\s*\("),
        anchors=("document.write",),
    ),
    Rule(
        name="inner_html",
        severity=Severity.warning,
        category="Security",
        message="Potential XSS via innerHTML",
        description="Setting innerHTML with user input can lead to XSS attacks.",
        suggestion="Use textContent instead, or sanitize user input before using innerHTML.",
        regex=re.compile(r"\.innerHTML\s*="),
        anchors=("innerHTML",),
    ),
    Rule(
        name="string_timeout",
        severity=Severity.warning,
        category="JavaScript",
        message="setTimeout with string is dangerous",
        description="Using setTimeout/setInterval with string arguments uses eval() internally.",
        suggestion="Pass a function reference instead: setTimeout(() => {...}, 1000)",
        regex=re.compile(r"""setTimeout\s*\(\s*["']"""),
        anchors=("setTimeout",),
    ),
]

DEBUGGER_RULES: list[Rule] = [
    Rule(
        name="debugger_statement",
        severity=Severity.info,
        category="JavaScript",
        message="Debugger Statement",
        description="A debugger statement was found in the code.",
        suggestion="Remove debugger statements before deploying to production.",
        regex=re.compile(r"debugger;?$"),
        anchors=("debugger",),
        stripped=True,
    ),
]

# Runs after any extra rules supplied by the caller
NULL_CHECK_RULES: list[Rule] = [
    Rule(
        name="null_comparison",
        severity=Severity.info,
        category="JavaScript",
        message="Consider using optional chaining",
        description="Null checks can be simplified with optional chaining (?.) and nullish coalescing (??).",
        suggestion="Consider using optional chaining for safer property access.",
        regex=re.compile(r"===?\s*null|!==\s*null"),
    ),
]

_CONSOLE_LOG = re.compile(r"console\.log\s*\(")
_ERROR_HANDLING = re.compile(r"try\s*\{|catch\s*\(")


def _is_promise_step(line: str) -> bool:
    return ".then(" in line or ".catch(" in line


def check_javascript(source: SourceFile, extra_rules: list[Rule] | None = None) -> list[Bug]:
    """Run the JavaScript rules, plus ``extra_rules`` ahead of the null check."""
    line_rules = DEBUGGER_RULES + (extra_rules or []) + NULL_CHECK_RULES
    bugs: list[Bug] = []

    for index, line in enumerate(source.lines):
        line_num = index + 1
        bugs.extend(match_rules(source, line_num, line, JAVASCRIPT_RULES))

        if _is_promise_step(line):
            next_line = source.next_line(index)
            if next_line and _is_promise_step(next_line):
                bugs.append(source.bug(
                    line_num,
                    Severity.info,
                    "JavaScript",
                    "Consider using async/await",
                    'Chained promises can lead to "callback hell".',
                    "Consider using async/await for cleaner asynchronous code.",
                    snippet=line.strip(),
                ))

        bugs.extend(match_rules(source, line_num, line, line_rules))

    if _CONSOLE_LOG.search(source.code) and not _ERROR_HANDLING.search(source.code):
        line_num = next(i for i, line in enumerate(source.lines, start=1) if "console.log" in line)
        bugs.append(source.bug(
            line_num,
            Severity.info,
            "Code Quality",
            "Console logging without error handling",
            "Console statements should have appropriate error handling in production.",
            "Consider using a proper logging library with log levels.",
            snippet=source.line_at(line_num).strip(),
        ))

    return bugs


def analyze(code: str) -> list[Bug]:
    source = SourceFile(LANGUAGE, code)
    return run_common_checks(source) + check_javascript(source)
