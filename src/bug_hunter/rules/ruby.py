"""Ruby rule set."""

import re

from ..models import Bug, Severity
from .base import Rule, SourceFile, scan_rules
from .common import run_common_checks

LANGUAGE = "ruby"

RUBY_RULES: list[Rule] = [
    Rule(
        name="interpolated_sql",
        severity=Severity.critical,
        category="Ruby",
        message="Potential SQL Injection",
        description="SQL query uses string interpolation which can be vulnerable.",
        suggestion='Use parameterized queries: User.where("name = ?", params[:name])',
        regex=re.compile(r"""execute\s*\(\s*["'][^"']*#\{|where\s*\(\s*[^:]+:\s*params"""),
        anchors=("execute", "where"),
    ),
    Rule(
        name="eval_usage",
        severity=Severity.critical,
        category="Security",
        message="Dangerous eval() usage",
        description="eval() can execute arbitrary code.",
        suggestion="Avoid eval() or sanitize input thoroughly.",
        regex=re.compile(r"\beval\s*\("),
        anchors=("eval",),
    ),
    Rule(
        name="unescaped_params",
        severity=Severity.warning,
        category="Ruby",
        message="Potential XSS",
        description="User parameters are being rendered without escaping.",
        suggestion="Use proper escaping or sanitize user input.",
        regex=re.compile(r"puts\s+params|render\s+text:\s*params"),
        anchors=("puts", "render"),
    ),
    Rule(
        name="todo_comment",
        severity=Severity.info,
        category="Code Quality",
        message="TODO comment",
        description="There is an unfinished task marker.",
        suggestion="Address the TODO.",
        regex=re.compile(r"#\s*TODO|#\s*FIXME"),
        anchors=("TODO",),
    ),
]


def analyze(code: str) -> list[Bug]:
    source = SourceFile(LANGUAGE, code)
    return run_common_checks(source) + scan_rules(source, RUBY_RULES)
