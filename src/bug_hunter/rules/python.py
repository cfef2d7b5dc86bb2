"""Python rule set."""

import re

from ..models import Bug, Severity
from .base import Rule, SourceFile, match_rules
from .common import run_common_checks

LANGUAGE = "python"

FUNCTION_LENGTH_LIMIT = 30

PYTHON_RULES: list[Rule] = [
    Rule(
        name="bare_except",
        severity=Severity.warning,
        category="Python",
        message="Bare except clause",
        description="Bare except clauses catch all exceptions, including KeyboardInterrupt.",
        suggestion="Specify the exception type: except ValueError: or use except Exception:",
        regex=re.compile(r"except\s*:"),
        exclude=re.compile(r"except\s+\w+\s*:"),
        anchors=("except",),
    ),
    Rule(
        name="print_statement",
        severity=Severity.warning,
        category="Python",
        message="Python 2 print statement",
        description="This looks like a Python 2 print statement instead of a function.",
        suggestion='Use print() function: print("message")',
        regex=re.compile(r"^print\s+[^(]"),
        anchors=("print",),
        stripped=True,
    ),
    Rule(
        name="none_equality",
        severity=Severity.warning,
        category="Python",
        message='Use "is None" instead of "== None"',
        description='Use "is None" for None comparisons.',
        suggestion='Use "is None" or "is not None" for None comparisons.',
        regex=re.compile(r"\s==\s+None\b|\bNone\s+==\s"),
        anchors=("==",),
    ),
    Rule(
        name="mutable_default_argument",
        severity=Severity.critical,
        category="Python",
        message="Mutable default argument",
        description="Mutable default arguments are shared between all calls.",
        suggestion="Use None as default and create new objects inside the function.",
        regex=re.compile(r"def\s+\w+\s*\([^)]*=\s*[\[{]"),
        anchors=("[", "{"),
    ),
    Rule(
        name="wildcard_import",
        severity=Severity.warning,
        category="Python",
        message="Wildcard import",
        description="Wildcard imports pollute the namespace and make code harder to understand.",
        suggestion="Import specific names: from module import name1, name2",
        regex=re.compile(r"from\s+\w+\s+import\s+\*"),
        anchors=("import",),
    ),
    Rule(
        name="shell_injection",
        severity=Severity.critical,
        category="Security",
        message="Shell injection vulnerability",
        description="Using shell=True or os.system() can lead to shell injection attacks.",
        suggestion="Use subprocess with shell=False and pass arguments as a list.",
        regex=re.compile(r"os\.system\s*\(|subprocess\.(?:call|run|Popen)\s*\([^)]*shell\s*=\s*True"),
        anchors=("os.system", "subprocess"),
    ),
    Rule(
        name="pickle_load",
        severity=Severity.critical,
        category="Security",
        message="Insecure deserialization with pickle",
        description="pickle can deserialize malicious code. Never unpickle untrusted data.",
        suggestion="Use JSON for data serialization or a secure library.",
        regex=re.compile(r"pickle\.(?:load|loads)\s*\("),
        anchors=("pickle",),
    ),
    Rule(
        name="input_call",
        severity=Severity.warning,
        category="Python",
        message="input() behavior",
        description="In Python 2, input() evaluates the input. In Python 3, it behaves like raw_input().",
        suggestion="Ensure you are using Python 3 syntax.",
        regex=re.compile(r"^input\s*\("),
        anchors=("input",),
        stripped=True,
    ),
    Rule(
        name="global_statement",
        severity=Severity.warning,
        category="Python",
        message="Global variable modification",
        description="Modifying global variables can lead to hard-to-debug issues.",
        suggestion="Consider passing variables as parameters or using a class.",
        regex=re.compile(r"^global\s+\w+"),
        anchors=("global",),
        stripped=True,
    ),
    Rule(
        name="len_zero_check",
        severity=Severity.info,
        category="Python",
        message="Unnecessary len() check",
        description='Instead of len(x) == 0, use "not x" for cleaner code.',
        suggestion='Use "if not x:" instead of "if len(x) == 0:"',
        regex=re.compile(r"\blen\s*\([^)]+\)\s*(?:==|!=|>|<|>=|<=)\s*0\b"),
        anchors=("len",),
    ),
    Rule(
        name="todo_comment",
        severity=Severity.info,
        category="Code Quality",
        message="TODO/FIXME comment",
        description="There is an unfinished task marker in the code.",
        suggestion="Address the TODO or create a tracking issue.",
        regex=re.compile(r"#\s*TODO|#\s*FIXME|#\s*XXX"),
        anchors=("TODO", "FIXME"),
        stripped=True,
    ),
    Rule(
        name="empty_pass_block",
        severity=Severity.info,
        category="Python",
        message="Empty block with pass",
        description="Using pass in empty blocks. Consider adding a docstring.",
        suggestion="Add a comment or docstring explaining why the block is empty.",
        regex=re.compile(r":\s*pass\s*$"),
        anchors=("pass",),
        stripped=True,
    ),
    Rule(
        name="string_concatenation",
        severity=Severity.warning,
        category="Python",
        message="String concatenation in loop",
        description="Using + for string concatenation in a loop is inefficient.",
        suggestion='Use "".join() or f-strings for better performance.',
        regex=re.compile(r"""\+\s*=\s*["']|\+\s*=\s*\w+\s*\+"""),
        anchors=("+",),
    ),
    Rule(
        name="eval_usage",
        severity=Severity.critical,
        category="Security",
        message="Dangerous eval() usage",
        description="eval() can execute arbitrary code and is a major security risk.",
        suggestion="Avoid using eval(). Use ast.literal_eval() for safe evaluation of literals.",
        regex=re.compile(r"eval\s*\("),
        anchors=("eval",),
    ),
    Rule(
        name="exec_usage",
        severity=Severity.critical,
        category="Security",
        message="Dangerous exec() usage",
        description="exec() can execute arbitrary code and is a major security risk.",
        suggestion="Avoid using exec().",
        regex=re.compile(r"exec\s*\("),
        anchors=("exec",),
    ),
]

_DEF = re.compile(r"^def\s+(\w+)")


def check_python(source: SourceFile) -> list[Bug]:
    bugs: list[Bug] = []
    in_function = False
    start_line = 0
    function_name = ""

    for index, line in enumerate(source.lines):
        line_num = index + 1
        trimmed = line.strip()
        bugs.extend(match_rules(source, line_num, line, PYTHON_RULES))

        match = _DEF.match(trimmed)
        if match:
            in_function = True
            start_line = line_num
            function_name = match.group(1)

        # A function ends at a return, or at a blank line right before the next def
        next_line = source.next_line(index)
        ends_before_def = trimmed == "" and next_line is not None and next_line.strip().startswith("def ")
        if in_function and (trimmed.startswith("return") or ends_before_def):
            length = line_num - start_line
            if length > FUNCTION_LENGTH_LIMIT:
                bugs.append(source.bug(
                    start_line,
                    Severity.warning,
                    "Code Quality",
                    f"Long function '{function_name}'",
                    f"Function has {length} lines. Consider breaking it into smaller functions.",
                    f"Functions should be kept under {FUNCTION_LENGTH_LIMIT} lines for better readability.",
                    snippet=source.line_at(start_line).strip(),
                ))
            in_function = False

    return bugs


def analyze(code: str) -> list[Bug]:
    source = SourceFile(LANGUAGE, code)
    return run_common_checks(source) + check_python(source)
