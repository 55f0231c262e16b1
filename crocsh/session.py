"""The shell session: command loop, builtins and the program entry point."""

import os
import sys
from typing import Callable, Iterable, List, Mapping, Optional, TextIO, Union

from .aliases import AliasFile, alias_builtin
from .cd import cd_builtin
from .crocus import crocus_builtin
from .environment import Environment, check_environment, env_builtin
from .errors import ShellError
from .executor import run_external
from .expansion import glob_arguments, is_glob, split_command, substitute_backticks
from .history import History, history_builtin
from .lineedit import LineEditor
from .operators import dispatch_logical, dispatch_operators
from .parentheses import run_parentheses
from .prompt import show_prompt
from .repeat import expand_repeat
from .splitting import split_commands, split_words
from .text import is_alphanum
from .variables import LocalVariables, expand_env_vars, expand_local_vars, set_builtin

LineReader = Callable[[], Optional[str]]

_EXIT_LINES = ("exit\n", "exit")


def _is_void(command: str) -> bool:
    return not any(is_alphanum(char) for char in command)


def _entries(environ: Union[Mapping[str, str], Iterable[str], None]) -> List[str]:
    if environ is None:
        environ = os.environ
    if isinstance(environ, Mapping):
        return [f"{key}={value}" for key, value in environ.items()]
    return list(environ)


class Shell:
    """One shell session with its environment, history, aliases and variables."""

    def __init__(
        self,
        environ: Union[Mapping[str, str], Iterable[str], None] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.env = Environment(check_environment(_entries(environ)))
        self.history = History()
        self.aliases = AliasFile()
        self.locals = LocalVariables()
        self.locals.reset()
        self.status = 0
        self.continuation: Optional[LineReader] = None

    def _report(self, error: ShellError, stream: TextIO) -> int:
        stream.write(error.message + "\n")
        return error.status

    def run_builtin(self, command: str) -> Optional[int]:
        """Run ``command`` if it is a builtin; return its status, or None."""
        for attempt in (
            lambda: env_builtin(command, self.env, self.out, self.err),
            lambda: cd_builtin(command, self.env, self.err),
            lambda: history_builtin(command, self.history, self.out),
            lambda: alias_builtin(command, self.aliases, self.out, self.err),
            lambda: set_builtin(command, self.locals, self.out, self.err),
            lambda: crocus_builtin(split_words(command), self.out),
        ):
            status = attempt()
            if status is not None:
                return status
        return None

    def run_command(self, command: str) -> int:
        """Run one command produced by an operator and return its status."""
        if command.startswith("\n"):
            return 0
        status = dispatch_operators(command, self.run_command, self.err)
        if status is None:
            status = dispatch_logical(command, self.run_command, self.err)
        if status is None:
            status = self.run_builtin(command)
        if status is None:
            status = run_external(split_words(command), self.env, self.err)
        return status

    def read_continuation(self, read_line: LineReader) -> str:
        """Read more lines after an unclosed quote until the quotes balance.

        ``read_line`` returns a line, None for an empty line, or "" at the
        end of input.
        """
        parts: List[str] = []
        quotes = 0
        while True:
            self.out.write("> ")
            self.out.flush()
            piece = read_line()
            if piece is None:
                continue
            if piece == "":
                break
            quotes += piece.count('"')
            parts.append(piece)
            if quotes % 2:
                break
        return "".join(parts)

    def _run_piece(self, command: str) -> int:
        try:
            command = expand_local_vars(command, self.locals)
            command = expand_env_vars(command, self.env)
        except ShellError as error:
            return self._report(error, self.err)
        try:
            command = self.history.recall(command)
        except ShellError as error:
            return self._report(error, self.out)
        if command.count('"') % 2 and self.continuation is not None:
            command += self.read_continuation(self.continuation)
        vector = glob_arguments(*split_command(command)) if is_glob(command) else None
        command = self.aliases.expand(command)
        try:
            command = substitute_backticks(command)
        except ShellError as error:
            return self._report(error, self.err)
        if not command:
            return 0
        status = dispatch_logical(command, self.run_command, self.err)
        if status is None:
            status = dispatch_operators(command, self.run_command, self.err)
        if status is None:
            status = self.run_builtin(command)
        if status is None:
            status = run_external(vector or split_words(command), self.env, self.err)
        return status

    def run_line(self, line: str) -> int:
        """Run every ';'-separated command of ``line``; return the last status."""
        status = self.status
        for command in split_commands(line):
            if _is_void(command):
                continue
            status = self._run_piece(command)
        self.status = status
        return status

    def run_stream(self, stream: Iterable[str]) -> int:
        """Run each line of ``stream`` and return the final status."""
        lines = iter(stream)

        def more() -> Optional[str]:
            try:
                text = next(lines)
            except StopIteration:
                return ""
            return text.rstrip("\n") or None

        self.continuation = more
        for line in lines:
            self.run_line(line)
        return self.status

    def _interactive_loop(self, read_char: Callable[[], str]) -> int:
        subshell = [sys.executable, "-m", "crocsh.session"]
        while True:
            show_prompt(self.status, self.out)
            editor = LineEditor(self.env, self.history, self.status, self.out)

            def more(editor: LineEditor = editor) -> Optional[str]:
                text = editor.read_line(read_char)
                return "" if text == "exit\n" else text

            self.continuation = more
            line = editor.read_line(read_char)
            if line is None:
                continue
            self.history.append(line.rstrip("\n"))
            if run_parentheses(line, subshell) is not None:
                continue
            line = expand_repeat(line, self.err)
            if line in _EXIT_LINES:
                return self.status
            self.run_line(line)

    def interactive(self) -> int:
        """Run the prompt loop on the terminal until ``exit``."""
        import termios

        fd = sys.stdin.fileno()
        saved = termios.tcgetattr(fd)
        raw = termios.tcgetattr(fd)
        raw[3] &= ~(termios.ECHO | termios.ICANON)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSAFLUSH, raw)

        def read_char() -> str:
            return os.read(fd, 1).decode("utf-8", "replace")

        try:
            return self._interactive_loop(read_char)
        finally:
            self.out.flush()
            termios.tcflush(fd, termios.TCIOFLUSH)
            termios.tcsetattr(fd, termios.TCSAFLUSH, saved)


def main(argv: Optional[List[str]] = None) -> int:
    """Start the shell: interactive on a terminal, line by line otherwise."""
    shell = Shell(os.environ, sys.stdout, sys.stderr)
    if sys.stdin.isatty():
        return shell.interactive()
    return shell.run_stream(sys.stdin)


if __name__ == "__main__":
    raise SystemExit(main())