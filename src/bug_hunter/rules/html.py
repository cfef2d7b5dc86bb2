"""HTML rule set.

Tags are matched on a single line; a tag whose attributes wrap onto the next
line is judged on its first line only.
"""

import re

from ..models import Bug, Severity
from .base import Rule, SourceFile, scan_rules
from .common import run_common_checks

LANGUAGE = "html"

_FORM_TAG = re.compile(r"<form[^>]*>", re.IGNORECASE)

HTML_RULES: list[Rule] = [
    Rule(
        name="inline_script",
        severity=Severity.warning,
        category="HTML",
        message="Inline script",
        description="Inline scripts can be XSS vectors. Use external scripts.",
        suggestion="Move JavaScript to external files.",
        regex=re.compile(r"<script\s+[^>]*>", re.IGNORECASE),
        exclude=re.compile(r"src="),
        anchors=("<script",),
    ),
    Rule(
        name="form_without_method",
        severity=Severity.warning,
        category="HTML",
        message="Form without method attribute",
        description="Default method is GET, which exposes data in URL.",
        suggestion='Use method="POST" for sensitive data.',
        regex=_FORM_TAG,
        exclude=re.compile(r"method=", re.IGNORECASE),
        anchors=("<form",),
    ),
    Rule(
        name="form_without_action",
        severity=Severity.info,
        category="HTML",
        message="Form without action",
        description="Form submits to current URL. Consider adding explicit action.",
        suggestion="Add action attribute or use JavaScript to handle submission.",
        regex=_FORM_TAG,
        exclude=re.compile(r"action=", re.IGNORECASE),
        anchors=("<form",),
    ),
    Rule(
        name="sensitive_autocomplete",
        severity=Severity.warning,
        category="HTML",
        message="Missing autocomplete on sensitive fields",
        description="Browsers may cache sensitive data.",
        suggestion='Set autocomplete="off" for sensitive fields.',
        regex=re.compile(r"<input[^>]*(?:password|credit|card|cvv)", re.IGNORECASE),
        exclude=re.compile(r"autocomplete", re.IGNORECASE),
        anchors=("<input",),
    ),
    Rule(
        name="blank_target_without_rel",
        severity=Severity.warning,
        category="HTML",
        message='Missing rel="noopener" on target="_blank"',
        description="New page can access window.opener (phishing risk).",
        suggestion='Add rel="noopener noreferrer" to links with target="_blank".',
        regex=re.compile(r"""<a[^>]*target\s*=\s*["']_blank["']""", re.IGNORECASE),
        exclude=re.compile(r"""rel\s*=\s*["']""", re.IGNORECASE),
        anchors=("target",),
    ),
    Rule(
        name="image_without_alt",
        severity=Severity.info,
        category="HTML",
        message="Missing alt attribute on image",
        description="Images should have alt text for accessibility.",
        suggestion='Add alt="description" to the img tag.',
        regex=re.compile(r"<img[^>]*>", re.IGNORECASE),
        exclude=re.compile(r"alt\s*=", re.IGNORECASE),
        anchors=("<img",),
    ),
]


def analyze(code: str) -> list[Bug]:
    source = SourceFile(LANGUAGE, code)
    return run_common_checks(source) + scan_rules(source, HTML_RULES)
