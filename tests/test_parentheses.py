import sys

import pytest

from crocsh.parentheses import (
    has_balanced_parentheses,
    run_parentheses,
    subshell_body,
)

UPPER = [sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read().upper())"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("(ls)", True),
        ("(ls; (pwd))", True),
        ("(ls", False),
        (")(", False),
        ("ls", False),
    ],
)
def test_has_balanced_parentheses(text, expected):
    assert has_balanced_parentheses(text) is expected


def test_subshell_body_blanks_parentheses_and_newlines():
    assert subshell_body("echo (ls\n)") == " ls "


def test_subshell_body_stops_at_first_closing():
    body = subshell_body("(ls) (pwd)")
    assert "pwd" not in body
    assert body.strip() == "ls"


def test_run_parentheses_ignores_plain_lines():
    assert run_parentheses("ls -l", UPPER) is None


def test_run_parentheses_feeds_body(capfd):
    status = run_parentheses("(ls)", UPPER)
    captured = capfd.readouterr()
    assert status == 0
    assert captured.out == " LS\n"