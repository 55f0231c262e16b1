import io
import os
import sys
from pathlib import Path

import pytest

from crocsh.crocus import render_digits
from crocsh.environment import DEFAULT_PATH
from crocsh.session import Shell, main
from crocsh.variables import DEFAULT_LOCAL_FILE


@pytest.fixture
def shell(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    environ = {"PATH": os.environ.get("PATH", ""), "HOME": str(tmp_path)}
    return Shell(environ, io.StringIO(), io.StringIO())


def test_empty_environment_gets_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shell = Shell({}, io.StringIO(), io.StringIO())
    assert shell.env.get("PATH") == DEFAULT_PATH
    assert shell.env.get("PWD") == os.getcwd()


def test_local_variable_file_reset_on_start(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / DEFAULT_LOCAL_FILE).write_text("a\tb\n")
    shell = Shell({}, io.StringIO(), io.StringIO())
    assert shell.status == 0
    assert (tmp_path / DEFAULT_LOCAL_FILE).read_text() == ""


def test_setenv_and_unsetenv(shell):
    assert shell.run_line("setenv FOO bar") == 0
    assert shell.env.get("FOO") == "bar"
    shell.run_line("setenv A 1; unsetenv FOO")
    assert shell.env.get("FOO") is None
    assert shell.env.get("A") == "1"


def test_undefined_variable(shell):
    assert shell.run_line("echo $NOPE") == 1
    assert shell.err.getvalue() == "NOPE: Undefined variable.\n"


def test_env_variable_expanded(shell):
    shell.run_line("setenv SRC value")
    shell.run_line("setenv DST $SRC")
    assert shell.env.get("DST") == "value"


def test_unmatched_backtick(shell):
    assert shell.run_line("echo `ls") == 1
    assert shell.err.getvalue() == "Unmatched '`'.\n"


def test_and_runs_right_after_success(shell):
    assert shell.run_line("setenv A 1 && setenv B 2") == 0
    assert shell.env.get("B") == "2"


def test_and_skips_right_after_failure(shell):
    assert shell.run_line("setenv 1A x && setenv B 2") == 1
    assert shell.env.get("B") is None


def test_or_runs_right_after_failure(shell):
    assert shell.run_line("setenv 1A x || setenv B 2") == 0
    assert shell.env.get("B") == "2"
    assert "setenv: Variable name must begin with a letter." in shell.err.getvalue()


def test_null_command_errors(shell):
    assert shell.run_line("&& ls") == 1
    assert shell.err.getvalue() == "Invalid null command.\n"


def test_missing_redirect_name(shell):
    assert shell.run_line("ls >") == 1
    assert shell.err.getvalue() == "Missing name for redirect.\n"


def test_status_is_last_command(shell):
    assert shell.run_line("setenv 1A x; setenv B 2") == 0
    assert shell.status == 0


def test_blank_line_keeps_status(shell):
    shell.run_line("setenv 1A x")
    assert shell.run_line("   ") == 1


def test_command_not_found(shell):
    assert shell.run_line("nonexistentcmd_xyz") == 1
    assert shell.err.getvalue() == "nonexistentcmd_xyz: Command not found.\n"


def test_alias_is_expanded(shell):
    shell.run_line("alias ll setenv")
    shell.run_line("ll X y")
    assert shell.env.get("X") == "y"


def test_history_recall(shell):
    shell.history.append("setenv H v")
    shell.run_line("!1")
    assert shell.env.get("H") == "v"


def test_history_event_not_found(shell):
    assert shell.run_line("!9") == 1
    assert "9: Event not found" in shell.out.getvalue()


def test_crocus_output(shell):
    assert shell.run_line("crocus -n 1") == 0
    expected = "".join(row + "\n" for row in render_digits("1"))
    assert shell.out.getvalue() == expected


def test_set_records_local_variable(shell):
    shell.run_line("set foo = bar")
    assert shell.locals.lookup("foo") == "bar"


def test_cd_changes_directory(shell, tmp_path):
    sub = tmp_path / "sub"
    sub.mkdir()
    assert shell.run_line(f"cd {sub}") == 0
    assert Path(os.getcwd()) == sub.resolve()
    assert shell.env.get("PWD") == os.getcwd()


def test_run_builtin_ignores_other_commands(shell):
    assert shell.run_builtin("ls -l") is None
    assert shell.run_builtin("setenv Z 3") == 0
    assert shell.env.get("Z") == "3"


def test_run_command_skips_newline(shell):
    assert shell.run_command("\n") == 0


def test_read_continuation(shell):
    lines = iter(["abc", None, 'd"e'])
    assert shell.read_continuation(lambda: next(lines)) == 'abcd"e'
    assert shell.out.getvalue() == "> > > "


def test_read_continuation_stops_at_end(shell):
    lines = iter(["abc", ""])
    assert shell.read_continuation(lambda: next(lines)) == "abc"


def test_unclosed_quote_uses_continuation(shell):
    shell.continuation = iter(['c"']).__next__
    shell.run_line('setenv Q "a b')
    assert shell.env.get("Q") == "a bc"


def test_run_stream(shell):
    status = shell.run_stream(io.StringIO("setenv A 1\nsetenv B 2\n"))
    assert status == 0
    assert shell.env.get("A") == "1"
    assert shell.env.get("B") == "2"


def test_run_stream_continues_quote(shell):
    shell.run_stream(io.StringIO('setenv Q "a b\nc"\n'))
    assert shell.env.get("Q") == "a bc"


def test_main_reads_stream(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("setenv 1A x\n"))
    assert main([]) == 1
    assert "setenv: Variable name must begin with a letter." in capsys.readouterr().err