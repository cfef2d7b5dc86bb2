"""Tests for the Python rule set."""

import pytest

from bug_hunter.models import Severity
from bug_hunter.rules import python
from bug_hunter.rules.python import FUNCTION_LENGTH_LIMIT


def _messages(bugs):
    return [bug.message for bug in bugs]


def _function(name: str, body_lines: int) -> str:
    body = ["    value = 1"] * body_lines
    return "\n".join([f"def {name}():", *body, "    return value"])


class TestPythonRules:
    @pytest.mark.parametrize(
        ("line", "message", "severity"),
        [
            ("def append(item, bucket=[]):", "Mutable default argument", Severity.critical),
            ("def merge(options={}):", "Mutable default argument", Severity.critical),
            ('print "hello"', "Python 2 print statement", Severity.warning),
            ("if result == None:", 'Use "is None" instead of "== None"', Severity.warning),
            ("from os import *", "Wildcard import", Severity.warning),
            ('os.system("rm -rf " + path)', "Shell injection vulnerability", Severity.critical),
            ("subprocess.run(cmd, shell=True)", "Shell injection vulnerability", Severity.critical),
            ("data = pickle.loads(blob)", "Insecure deserialization with pickle", Severity.critical),
            ("global counter", "Global variable modification", Severity.warning),
            ("if len(items) == 0:", "Unnecessary len() check", Severity.info),
            ("# FIXME handle unicode", "TODO/FIXME comment", Severity.info),
            ("class Empty: pass", "Empty block with pass", Severity.info),
            ('message += "!"', "String concatenation in loop", Severity.warning),
        ],
    )
    def test_single_line_rules(self, line, message, severity):
        bugs = python.analyze(line)

        matching = [bug for bug in bugs if bug.message == message]
        assert len(matching) == 1
        assert matching[0].severity == severity

    def test_mutable_default_on_simple_function(self):
        bugs = python.analyze("def f(x=[]):\n    return x")

        assert _messages(bugs) == ["Mutable default argument"]
        assert bugs[0].severity == Severity.critical
        assert bugs[0].line == 1

    def test_immutable_default_is_not_reported(self):
        assert python.analyze("def f(x=None):\n    return x") == []

    def test_bare_except(self):
        code = "try:\n    run()\nexcept:\n    handle()"

        bugs = python.analyze(code)

        assert _messages(bugs) == ["Bare except clause"]
        assert bugs[0].line == 3
        assert bugs[0].severity == Severity.warning

    def test_typed_except_is_not_reported(self):
        assert python.analyze("try:\n    run()\nexcept ValueError:\n    handle()") == []

    def test_eval_reported_by_common_and_python_rules(self):
        bugs = python.analyze("result = eval(expr)")

        assert _messages(bugs) == ["Dangerous eval() Usage", "Dangerous eval() usage"]
        assert [bug.category for bug in bugs] == ["Security", "Security"]

    def test_exec_usage(self):
        bugs = python.analyze("exec(source)")

        assert _messages(bugs) == ["Dangerous exec() usage"]


class TestLongFunction:
    def test_long_function_ends_at_return(self):
        code = _function("build_report", FUNCTION_LENGTH_LIMIT + 1)

        bugs = python.analyze(code)

        assert _messages(bugs) == ["Long function 'build_report'"]
        assert bugs[0].line == 1
        assert bugs[0].code_snippet == "def build_report():"

    def test_short_function(self):
        assert python.analyze(_function("helper", 5)) == []

    def test_function_ends_before_next_def(self):
        body = ["    value = 1"] * (FUNCTION_LENGTH_LIMIT + 5)
        code = "\n".join(["def first():", *body, "", "def second():", "    return 2"])

        bugs = python.analyze(code)

        assert _messages(bugs) == ["Long function 'first'"]
