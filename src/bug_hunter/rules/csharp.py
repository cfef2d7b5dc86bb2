"""C# rule set."""

import re

from ..models import Bug, Severity
from .base import Rule, SourceFile, scan_rules
from .common import run_common_checks

LANGUAGE = "csharp"

CSHARP_RULES: list[Rule] = [
    Rule(
        name="sql_concatenation",
        severity=Severity.critical,
        category="C#",
        message="Potential SQL Injection",
        description="SQL query built with string concatenation is vulnerable.",
        suggestion="Use parameterized queries or an ORM.",
        regex=re.compile(r'(?:SELECT|INSERT|UPDATE|DELETE)\s+.*\+|"\s*\+\s*\w+\s*\+\s*"'),
        anchors=("SELECT", "INSERT"),
    ),
    Rule(
        name="open_redirect",
        severity=Severity.warning,
        category="C#",
        message="Open Redirect vulnerability",
        description="Redirecting based on user input can lead to phishing attacks.",
        suggestion="Validate the redirect URL or use a whitelist of allowed URLs.",
        regex=re.compile(r"Response\.Redirect\s*\([^)]*(?:Request|QueryString|Form)", re.IGNORECASE),
        anchors=("Response.Redirect",),
    ),
    Rule(
        name="connection_string_credentials",
        severity=Severity.critical,
        category="Security",
        message="Hardcoded credentials",
        description="Connection string contains hardcoded credentials.",
        suggestion="Use secure configuration or Azure Key Vault.",
        regex=re.compile(
            r"""connectionString\s*=\s*["'][^"']*(?:password|pwd)[^"']*["']""",
            re.IGNORECASE,
        ),
        anchors=("connectionString",),
    ),
    Rule(
        name="empty_catch",
        severity=Severity.warning,
        category="Code Quality",
        message="Empty catch block",
        description="Empty catch blocks silently swallow exceptions.",
        suggestion="Log the exception or handle it appropriately.",
        regex=re.compile(r"catch\s*\([^)]+\)\s*\{\s*\}"),
        anchors=("catch",),
    ),
    Rule(
        name="todo_comment",
        severity=Severity.info,
        category="Code Quality",
        message="TODO comment",
        description="There is an unfinished task marker.",
        suggestion="Address the TODO.",
        regex=re.compile(r"//\s*TODO"),
        anchors=("TODO",),
    ),
]


def analyze(code: str) -> list[Bug]:
    source = SourceFile(LANGUAGE, code)
    return run_common_checks(source) + scan_rules(source, CSHARP_RULES)
