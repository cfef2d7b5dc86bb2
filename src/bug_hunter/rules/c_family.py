"""Rule set shared by C and C++.

Detects:
- gets(), strcpy()/strcat() and unbounded scanf("%s")
- printf format strings fed from input functions
- malloc() results used without a check
- free() of a variable already freed earlier in the text
- NULL comparison style
"""

import re

from ..models import Bug, Severity
from .base import Rule, SourceFile, match_rules
from .common import run_common_checks

CATEGORY = "C/C++"

C_FAMILY_RULES: list[Rule] = [
    Rule(
        name="gets_call",
        severity=Severity.critical,
        category=CATEGORY,
        message="Dangerous gets() function",
        description="gets() does not check buffer bounds and was removed from C11.",
        suggestion="Use fgets() instead: fgets(buffer, size, stdin)",
        regex=re.compile(r"\bgets\s*\("),
        anchors=("gets",),
    ),
    Rule(
        name="unbounded_string_copy",
        severity=Severity.critical,
        category=CATEGORY,
        message="Unbounded string operation",
        description="strcpy/strcat can cause buffer overflows.",
        suggestion="Use strncpy/strncat with size limits, or prefer safer alternatives.",
        regex=re.compile(r"\bstrcpy\s*\([^,]+,\s*[^)]+\)|\bstrcat\s*\([^,]+,\s*[^)]+\)"),
        anchors=("strcpy", "strcat"),
    ),
    Rule(
        name="format_string",
        severity=Severity.critical,
        category=CATEGORY,
        message="Format string vulnerability",
        description="printf with %s using unsanitized input can cause format string attacks.",
        suggestion='Use printf("%s", variable) instead of printf(variable)',
        regex=re.compile(r"printf\s*\([^)]*%s[^)]*\)\s*\([^)]*(?:scanf|gets|fgets)"),
        anchors=("printf",),
    ),
    Rule(
        name="scanf_without_width",
        severity=Severity.warning,
        category=CATEGORY,
        message="scanf without width limit",
        description="scanf %s has no buffer size limit.",
        suggestion='Use width specifier: scanf("%99s", buffer) for a 100-byte buffer.',
        regex=re.compile(r'scanf\s*\(\s*"%[^"]*s"'),
        anchors=("scanf",),
    ),
    Rule(
        name="unchecked_malloc",
        severity=Severity.warning,
        category=CATEGORY,
        message="Unchecked malloc return",
        description="malloc can return NULL on failure.",
        suggestion="Check the return value of malloc before use.",
        regex=re.compile(r"\bmalloc\s*\([^)]+\)\s*;?\s*$"),
        exclude=re.compile(r"if"),
        anchors=("malloc",),
    ),
]

TRAILING_RULES: list[Rule] = [
    Rule(
        name="null_comparison_style",
        severity=Severity.info,
        category=CATEGORY,
        message="Pointer comparison style",
        description="Consider using implicit check: if (ptr) instead of if (ptr == NULL)",
        suggestion="Modern C/C++ style prefers: if (ptr) or if (!ptr)",
        regex=re.compile(r"if\s*\(\s*\w+\s*==\s*(?:NULL|nullptr)\s*\)"),
        anchors=("==",),
    ),
    Rule(
        name="todo_comment",
        severity=Severity.info,
        category="Code Quality",
        message="TODO comment",
        description="There is an unfinished task marker in the code.",
        suggestion="Address the TODO or create a tracking issue.",
        regex=re.compile(r"//\s*TODO|/\*\s*TODO"),
        anchors=("TODO",),
    ),
]

_FREE_STATEMENT = re.compile(r"free\s*\([^)]+\)\s*;?\s*$")
_FREED_NAME = re.compile(r"free\s*\(\s*(\w+)\s*\)")


def _is_double_free(source: SourceFile, line: str) -> bool:
    """True when the text before this line's first occurrence frees the same name.

    The prefix is cut at the first occurrence of the line's text, so an
    identical earlier line hides the earlier free.
    """
    if not _FREE_STATEMENT.search(line):
        return False
    match = _FREED_NAME.search(line)
    if not match:
        return False
    prefix = source.code[:source.code.find(line)]
    previous = re.compile(rf"free\s*\(\s*{re.escape(match.group(1))}\s*\)")
    return previous.search(prefix) is not None


def check_c_family(source: SourceFile) -> list[Bug]:
    bugs: list[Bug] = []

    for line_num, line in enumerate(source.lines, start=1):
        bugs.extend(match_rules(source, line_num, line, C_FAMILY_RULES))

        if _is_double_free(source, line):
            bugs.append(source.bug(
                line_num,
                Severity.critical,
                CATEGORY,
                "Double free vulnerability",
                "This memory was already freed. Double free can cause crashes or security issues.",
                "Ensure memory is only freed once, or set pointer to NULL after freeing.",
                column=line.find("free"),
                snippet=line.strip(),
            ))

        bugs.extend(match_rules(source, line_num, line, TRAILING_RULES))

    return bugs


def analyze_c(code: str) -> list[Bug]:
    source = SourceFile("c", code)
    return run_common_checks(source) + check_c_family(source)


def analyze_cpp(code: str) -> list[Bug]:
    source = SourceFile("cpp", code)
    return run_common_checks(source) + check_c_family(source)
