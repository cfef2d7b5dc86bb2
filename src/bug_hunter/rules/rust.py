"""Rust rule set."""

import re

from ..models import Bug, Severity
from .base import Rule, SourceFile, scan_rules
from .common import run_common_checks

LANGUAGE = "rust"

RUST_RULES: list[Rule] = [
    Rule(
        name="unwrap_call",
        severity=Severity.warning,
        category="Rust",
        message="unwrap() can panic",
        description="unwrap() will panic if the value is None or Err.",
        suggestion="Use proper error handling with ? or match.",
        regex=re.compile(r"\.unwrap\(\)"),
        anchors=("unwrap",),
    ),
    Rule(
        name="expect_call",
        severity=Severity.warning,
        category="Rust",
        message="expect() can panic",
        description="expect() will panic if the value is None or Err.",
        suggestion="Use proper error handling with ? or match.",
        regex=re.compile(r"\.expect\("),
        anchors=("expect",),
    ),
    Rule(
        name="unsafe_block",
        severity=Severity.warning,
        category="Rust",
        message="unsafe block",
        description="unsafe blocks bypass Rust's safety guarantees.",
        suggestion="Minimize unsafe code and document safety invariants.",
        regex=re.compile(r"unsafe\s*\{"),
        anchors=("unsafe",),
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
    return run_common_checks(source) + scan_rules(source, RUST_RULES)
