"""TypeScript rule set: the JavaScript rules plus type-system escapes."""

import re

from ..models import Bug, Severity
from .base import Rule, SourceFile
from .common import run_common_checks
from .javascript import check_javascript

LANGUAGE = "typescript"

TYPESCRIPT_RULES: list[Rule] = [
    Rule(
        name="any_type",
        severity=Severity.warning,
        category="TypeScript",
        message='Avoid using "any" type',
        description="Using \"any\" defeats the purpose of TypeScript's type system.",
        suggestion="Use proper types or unknown if type is truly unknown.",
        regex=re.compile(r"\w+:\s*any\b"),
        anchors=("any",),
    ),
    Rule(
        name="ts_ignore",
        severity=Severity.info,
        category="TypeScript",
        message="ts-ignore comment found",
        description="@ts-ignore bypasses TypeScript type checking.",
        suggestion="Address the underlying type error instead of ignoring it.",
        regex=re.compile(r"//\s*@ts-ignore|/\*\s*@ts-ignore"),
        anchors=("@ts-ignore",),
    ),
]


def analyze(code: str) -> list[Bug]:
    source = SourceFile(LANGUAGE, code)
    return run_common_checks(source) + check_javascript(source, extra_rules=TYPESCRIPT_RULES)
