"""CSS rule set."""

import re

from ..models import Bug, Severity
from .base import Rule, SourceFile, scan_rules
from .common import run_common_checks

LANGUAGE = "css"

CSS_RULES: list[Rule] = [
    Rule(
        name="important_override",
        severity=Severity.warning,
        category="CSS",
        message="!important usage",
        description="Overusing !important makes CSS hard to maintain.",
        suggestion="Use more specific selectors instead.",
        regex=re.compile(r"\s!important"),
        anchors=("!important",),
    ),
    # Custom property declarations and var() references are exempt
    Rule(
        name="hardcoded_color",
        severity=Severity.info,
        category="CSS",
        message="Hardcoded color value",
        description="Consider using CSS custom properties for colors.",
        suggestion="Use CSS variables: color: var(--primary-color)",
        regex=re.compile(r"#[0-9a-fA-F]{6}\b|rgb\s*\("),
        exclude=re.compile(r"var\(|--"),
        anchors=("#", "rgb"),
    ),
    Rule(
        name="pixel_font_size",
        severity=Severity.info,
        category="CSS",
        message="Pixel font-size",
        description="Use relative units (rem, em) for better accessibility.",
        suggestion="Use rem or em units for scalable typography.",
        regex=re.compile(r"font-size:\s*\d+px"),
        anchors=("font-size",),
    ),
    Rule(
        name="vendor_prefix",
        severity=Severity.info,
        category="CSS",
        message="Vendor prefix",
        description="Vendor prefixes may not be needed for modern properties.",
        suggestion="Check if the unprefixed version is now supported.",
        regex=re.compile(r"-webkit-|-moz-|-ms-|-o-"),
        anchors=("-webkit", "-moz"),
    ),
]


def analyze(code: str) -> list[Bug]:
    source = SourceFile(LANGUAGE, code)
    return run_common_checks(source) + scan_rules(source, CSS_RULES)
