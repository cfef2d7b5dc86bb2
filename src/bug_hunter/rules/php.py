"""PHP rule set."""

import re

from ..models import Bug, Severity
from .base import Rule, SourceFile, scan_rules
from .common import run_common_checks

LANGUAGE = "php"

PHP_RULES: list[Rule] = [
    Rule(
        name="request_in_sql",
        severity=Severity.critical,
        category="PHP",
        message="SQL Injection vulnerability",
        description="User input is directly used in SQL queries.",
        suggestion='Use prepared statements: $stmt = $pdo->prepare("SELECT * FROM users WHERE id = ?")',
        regex=re.compile(
            r"\$_(?:GET|POST|REQUEST)\s*\[.*\]\s*\.?\s*(?:SELECT|INSERT|UPDATE|DELETE)",
            re.IGNORECASE,
        ),
        anchors=("$_GET", "$_POST"),
    ),
    Rule(
        name="eval_usage",
        severity=Severity.critical,
        category="Security",
        message="Dangerous eval() usage",
        description="eval() can execute arbitrary code and is extremely dangerous.",
        suggestion="Never use eval() with user input.",
        regex=re.compile(r"eval\s*\("),
        anchors=("eval",),
    ),
    Rule(
        name="echo_request",
        severity=Severity.critical,
        category="PHP",
        message="XSS vulnerability",
        description="User input is being echoed without sanitization.",
        suggestion="Use htmlspecialchars() or a templating engine.",
        regex=re.compile(r"echo\s*\$_(?:GET|POST|REQUEST|COOKIE)\s*\["),
        anchors=("echo",),
    ),
    Rule(
        name="plaintext_password",
        severity=Severity.critical,
        category="Security",
        message="Insecure password storage",
        description="Passwords should be hashed using password_hash().",
        suggestion="Use: password_hash($password, PASSWORD_DEFAULT)",
        regex=re.compile(r"password\s*=\s*\$_POST", re.IGNORECASE),
        exclude=re.compile(r"password_hash"),
        anchors=("password",),
    ),
    Rule(
        name="debug_output",
        severity=Severity.info,
        category="PHP",
        message="Debug code in production",
        description="Debug functions should not be in production code.",
        suggestion="Remove var_dump, print_r, and console.log statements.",
        regex=re.compile(r"var_dump\s*\(|print_r\s*\(\s*\$_"),
        anchors=("var_dump", "print_r"),
    ),
    Rule(
        name="todo_comment",
        severity=Severity.info,
        category="Code Quality",
        message="TODO comment",
        description="There is an unfinished task marker.",
        suggestion="Address the TODO.",
        regex=re.compile(r"//\s*TODO|#\s*TODO"),
        anchors=("TODO",),
    ),
]


def analyze(code: str) -> list[Bug]:
    source = SourceFile(LANGUAGE, code)
    return run_common_checks(source) + scan_rules(source, PHP_RULES)
