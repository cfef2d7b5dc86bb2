"""Checks applied to every language.

Security:
- SQL built by string concatenation or template interpolation
- Hardcoded credentials
- eval() usage
- Math.random() in place of a secure generator
- Secrets passed to console logging

Code quality:
- Empty catch blocks
- TODO comments
- console.info debug statements
- Functions longer than 50 lines (brace counting)
"""

import re

from ..models import Bug, Severity
from .base import BraceSpanTracker, Rule, SourceFile, match_rules, scan_rules

FUNCTION_LENGTH_LIMIT = 50

SECURITY_RULES: list[Rule] = [
    Rule(
        name="sql_injection",
        severity=Severity.critical,
        category="Security",
        message="Potential SQL Injection",
        description=(
            "User input is being concatenated directly into SQL queries. "
            "This can allow attackers to inject malicious SQL code."
        ),
        suggestion="Use parameterized queries or prepared statements instead of string concatenation.",
        regex=re.compile(
            r"""(?:execute|query|select|insert|update|delete).*\+.*["']|"""
            r"""["'].*\$\{.*\}.*["']""",
            re.IGNORECASE,
        ),
        anchors=("execute", "query"),
    ),
    Rule(
        name="hardcoded_credentials",
        severity=Severity.critical,
        category="Security",
        message="Hardcoded Credentials",
        description="Sensitive information like passwords, API keys, or tokens are hardcoded in the source code.",
        suggestion="Use environment variables or a secure secrets management system instead.",
        regex=re.compile(
            r"""(?:password|passwd|pwd|secret|api_key|apikey|token)\s*[:=]\s*["'][^"']{4,}["']""",
            re.IGNORECASE,
        ),
    ),
    Rule(
        name="eval_usage",
        severity=Severity.critical,
        category="Security",
        message="Dangerous eval() Usage",
        description="The eval() function can execute arbitrary code and is a major security risk.",
        suggestion="Avoid using eval(). Use safer alternatives like JSON.parse() for JSON data.",
        regex=re.compile(r"eval\s*\("),
        anchors=("eval",),
    ),
    Rule(
        name="insecure_random",
        severity=Severity.warning,
        category="Security",
        message="Insecure Random Number Generation",
        description="Math.random() is not cryptographically secure.",
        suggestion="Use crypto.randomBytes() or the Web Crypto API for security-sensitive operations.",
        regex=re.compile(r"Math\.random\s*\(\s*\)"),
        anchors=("Math.random",),
    ),
    Rule(
        name="sensitive_console_log",
        severity=Severity.warning,
        category="Security",
        message="Sensitive Data in Console",
        description="Potential sensitive information being logged to console.",
        suggestion="Ensure no sensitive data is logged in production environments.",
        regex=re.compile(
            r"console\.(?:log|info|warn|error)\s*\(.*(?:password|token|secret|key|auth)",
            re.IGNORECASE,
        ),
    ),
]

QUALITY_RULES: list[Rule] = [
    Rule(
        name="empty_catch",
        severity=Severity.warning,
        category="Code Quality",
        message="Empty Catch Block",
        description="The catch block is empty, silently swallowing errors.",
        suggestion="At minimum, log the error or add a comment explaining why it is intentionally empty.",
        regex=re.compile(r"catch\s*\([^)]*\)\s*\{\s*\}"),
        anchors=("catch",),
    ),
    Rule(
        name="todo_comment",
        severity=Severity.info,
        category="Code Quality",
        message="TODO Comment",
        description="There is a TODO comment indicating unfinished work.",
        suggestion="Address the TODO or create a tracking issue for it.",
        regex=re.compile(r"//\s*TODO|/\*\s*TODO", re.IGNORECASE),
        anchors=("TODO",),
    ),
    # Lines containing console.log are left to the language rules
    Rule(
        name="console_statement",
        severity=Severity.info,
        category="Code Quality",
        message="Console Statement",
        description="Debug console statement found in code.",
        suggestion="Remove console statements before deploying to production.",
        regex=re.compile(r"console\.(?:log|info)\s*\("),
        exclude=re.compile(r"console\.log"),
        anchors=("console",),
    ),
]

_FUNCTION_START = re.compile(r"function\s+\w+|const\s+\w+\s*=\s*(?:async\s*)?\(|=>\s*\{")
_FUNCTION_NAME = re.compile(r"function\s+(\w+)|const\s+(\w+)")


def check_security(source: SourceFile) -> list[Bug]:
    """Run the cross-language security rules."""
    return scan_rules(source, SECURITY_RULES)


def check_quality(source: SourceFile) -> list[Bug]:
    """Run the cross-language quality rules, including function length."""
    bugs: list[Bug] = []
    tracker = BraceSpanTracker(_FUNCTION_START, _FUNCTION_NAME, default_name="anonymous")

    for line_num, line in enumerate(source.lines, start=1):
        bugs.extend(match_rules(source, line_num, line, QUALITY_RULES))

        span = tracker.feed(line_num, line)
        if span and span.length > FUNCTION_LENGTH_LIMIT:
            bugs.append(source.bug(
                span.start_line,
                Severity.warning,
                "Code Quality",
                "Long Function",
                (
                    f"Function '{span.name}' has {span.length} lines. "
                    "Consider breaking it into smaller functions."
                ),
                f"Functions should be kept under {FUNCTION_LENGTH_LIMIT} lines for better readability and maintainability.",
                snippet=source.line_at(span.start_line).strip(),
            ))

    return bugs


def run_common_checks(source: SourceFile) -> list[Bug]:
    """Security checks, then quality checks, over the whole source."""
    return check_security(source) + check_quality(source)
