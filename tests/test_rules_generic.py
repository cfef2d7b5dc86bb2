"""Tests for the C#, Go, Rust, PHP, Ruby, HTML and CSS rule sets."""

import pytest

from bug_hunter.models import Severity
from bug_hunter.rules import csharp, css, go, html, php, ruby, rust


def _messages(bugs):
    return [bug.message for bug in bugs]


def _find(bugs, message):
    return [bug for bug in bugs if bug.message == message]


class TestCSharpRules:
    def test_sql_concatenation(self):
        bugs = csharp.analyze('var q = "SELECT * FROM users WHERE id = " + id;')

        assert _messages(bugs) == ["Potential SQL Injection"]
        assert bugs[0].category == "C#"
        assert bugs[0].column == 9

    def test_open_redirect(self):
        bugs = csharp.analyze('Response.Redirect(Request.QueryString["next"]);')

        assert _messages(bugs) == ["Open Redirect vulnerability"]
        assert bugs[0].severity == Severity.warning

    def test_connection_string_credentials(self):
        bugs = csharp.analyze('connectionString = "Server=db;User=sa;Password=x";')

        assert _messages(bugs) == ["Hardcoded credentials"]
        assert bugs[0].category == "Security"

    def test_empty_catch(self):
        bugs = csharp.analyze("catch (Exception ex) { }")

        assert _find(bugs, "Empty catch block")


class TestGoRules:
    def test_fmt_print_in_main_package(self):
        code = 'package main\n\nfunc main() {\n    fmt.Println("hi")\n}'

        bugs = go.analyze(code)

        assert _messages(bugs) == ["fmt.Print usage"]
        assert bugs[0].line == 4

    def test_fmt_print_in_library_package(self):
        assert go.analyze('package util\n\nfunc Log() {\n    fmt.Println("hi")\n}') == []

    def test_unchecked_error(self):
        bugs = go.analyze("f, err := os.Open(path)\nuse(f)")

        assert _messages(bugs) == ["Error not checked"]
        assert bugs[0].severity == Severity.warning

    @pytest.mark.parametrize("next_line", ["if err != nil {", "    return err"])
    def test_checked_error(self, next_line):
        assert go.analyze(f"f, err := os.Open(path)\n{next_line}") == []

    def test_error_on_last_line_is_not_reported(self):
        assert go.analyze("f, err := os.Open(path)") == []

    def test_error_before_blank_line_is_not_reported(self):
        assert go.analyze("f, err := os.Open(path)\n\nuse(f)") == []

    def test_unchecked_parse(self):
        bugs = go.analyze("n, err := strconv.ParseInt(s, 10, 64)\nuse(n)")

        assert _messages(bugs) == ["Error not checked", "Parse error not checked"]


class TestRustRules:
    @pytest.mark.parametrize(
        ("line", "message"),
        [
            ("let value = parse(s).unwrap();", "unwrap() can panic"),
            ('let value = parse(s).expect("bad input");', "expect() can panic"),
            ("unsafe { ptr.read() }", "unsafe block"),
            ("// TODO: cache this", "TODO comment"),
        ],
    )
    def test_rules(self, line, message):
        bugs = rust.analyze(line)

        assert _find(bugs, message)


class TestPhpRules:
    def test_request_in_sql(self):
        bugs = php.analyze("mysql_query($_GET['filter'] . select_clause());")

        assert _messages(bugs) == ["SQL Injection vulnerability"]
        assert bugs[0].column == 12

    def test_eval_reported_twice(self):
        bugs = php.analyze("eval($payload);")

        assert _messages(bugs) == ["Dangerous eval() Usage", "Dangerous eval() usage"]

    def test_echo_request(self):
        bugs = php.analyze("echo $_GET['name'];")

        assert _messages(bugs) == ["XSS vulnerability"]
        assert bugs[0].severity == Severity.critical

    def test_plaintext_password(self):
        bugs = php.analyze("$password = $_POST['password'];")

        assert _messages(bugs) == ["Insecure password storage"]

    def test_debug_output(self):
        bugs = php.analyze("var_dump($user);")

        assert _messages(bugs) == ["Debug code in production"]
        assert bugs[0].severity == Severity.info

    def test_hash_comment_todo(self):
        assert _messages(php.analyze("# TODO validate input")) == ["TODO comment"]


class TestRubyRules:
    def test_interpolated_execute(self):
        bugs = ruby.analyze('execute("SELECT * FROM users WHERE id = #{id}")')

        assert _find(bugs, "Potential SQL Injection")

    def test_where_with_params(self):
        bugs = ruby.analyze("User.where(name: params[:name])")

        assert _messages(bugs) == ["Potential SQL Injection"]
        assert bugs[0].category == "Ruby"

    def test_unescaped_params(self):
        bugs = ruby.analyze("puts params[:query]")

        assert _messages(bugs) == ["Potential XSS"]

    def test_fixme(self):
        assert _messages(ruby.analyze("# FIXME: slow")) == ["TODO comment"]


class TestHtmlRules:
    def test_inline_script(self):
        bugs = html.analyze('<script type="text/javascript">')

        assert _messages(bugs) == ["Inline script"]

    def test_external_script(self):
        assert html.analyze('<script src="app.js"></script>') == []

    def test_bare_form(self):
        bugs = html.analyze("<form>")

        assert _messages(bugs) == ["Form without method attribute", "Form without action"]
        assert [bug.severity for bug in bugs] == [Severity.warning, Severity.info]

    def test_complete_form(self):
        assert html.analyze('<form method="post" action="/login">') == []

    def test_sensitive_input(self):
        bugs = html.analyze('<input type="password" name="pw">')

        assert _messages(bugs) == ["Missing autocomplete on sensitive fields"]

    def test_blank_target(self):
        bugs = html.analyze('<a href="https://example.com" target="_blank">link</a>')

        assert _messages(bugs) == ['Missing rel="noopener" on target="_blank"']

    def test_blank_target_with_rel(self):
        assert html.analyze('<a href="/x" target="_blank" rel="noopener">x</a>') == []

    def test_image_without_alt(self):
        bugs = html.analyze('<img src="logo.png">')

        assert _messages(bugs) == ["Missing alt attribute on image"]


class TestCssRules:
    @pytest.mark.parametrize(
        ("line", "message"),
        [
            ("  color: red !important;", "!important usage"),
            ("  color: #ff0000;", "Hardcoded color value"),
            ("  background: rgb(0, 0, 0);", "Hardcoded color value"),
            ("  font-size: 14px;", "Pixel font-size"),
            ("  -webkit-transition: all 1s;", "Vendor prefix"),
        ],
    )
    def test_rules(self, line, message):
        assert _messages(css.analyze(line)) == [message]

    def test_custom_property_is_not_reported(self):
        assert css.analyze("  --brand: #ff0000;") == []

    def test_var_reference_is_not_reported(self):
        assert css.analyze("  border: 1px solid var(--brand, #ff0000);") == []
