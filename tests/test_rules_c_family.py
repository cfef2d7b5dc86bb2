"""Tests for the C and C++ rule set."""

import pytest

from bug_hunter.models import Severity
from bug_hunter.rules.c_family import analyze_c, analyze_cpp


def _messages(bugs):
    return [bug.message for bug in bugs]


class TestCFamilyRules:
    @pytest.mark.parametrize(
        ("line", "message", "severity"),
        [
            ("gets(buffer);", "Dangerous gets() function", Severity.critical),
            ("strcpy(dest, src);", "Unbounded string operation", Severity.critical),
            ("strcat(path, name);", "Unbounded string operation", Severity.critical),
            ('scanf("%s", name);', "scanf without width limit", Severity.warning),
            ("char *data = malloc(size);", "Unchecked malloc return", Severity.warning),
            ("if (ptr == NULL) {", "Pointer comparison style", Severity.info),
            ("/* TODO: free buffers */", "TODO comment", Severity.info),
        ],
    )
    def test_single_line_rules(self, line, message, severity):
        bugs = analyze_c(line)

        matching = [bug for bug in bugs if bug.message == message]
        assert len(matching) == 1
        assert matching[0].severity == severity
        assert matching[0].category in ("C/C++", "Code Quality")

    def test_fgets_is_not_reported(self):
        assert analyze_c("fgets(buffer, sizeof(buffer), stdin);") == []

    def test_checked_malloc_is_not_reported(self):
        assert analyze_c("if ((data = malloc(size)) == NULL)") == []

    def test_double_free(self):
        code = "free(node);\nif (retry) {\n    free(node);\n}"

        bugs = analyze_c(code)

        assert _messages(bugs) == ["Double free vulnerability"]
        assert bugs[0].line == 3
        assert bugs[0].column == 4

    def test_free_of_different_pointers(self):
        assert analyze_c("free(a);\nfree(b);") == []

    def test_identical_free_lines_hide_each_other(self):
        # The text before the first occurrence of an identical line is empty
        assert analyze_c("free(node);\nfree(node);") == []


class TestLanguageIds:
    def test_c_ids(self):
        assert analyze_c("gets(buffer);")[0].id == "c-1-0"

    def test_cpp_ids(self):
        assert analyze_cpp("gets(buffer);")[0].id == "cpp-1-0"
