"""The shell's environment and the setenv / unsetenv builtins."""

import os
from typing import Dict, Iterable, List, Optional, TextIO

from .errors import ShellError
from .splitting import split_words
from .text import env_key_matches, is_alphanum

DEFAULT_PATH = "/usr/local/bin:/usr/bin:/usr/local/sbin"


class Environment:
    """An ordered list of ``KEY=value`` entries."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: List[str] = list(entries)

    def _index(self, name: str) -> Optional[int]:
        return next(
            (index for index, entry in enumerate(self._entries)
             if env_key_matches(entry, name)),
            None,
        )

    def get(self, name: str) -> Optional[str]:
        """Return the value of ``name``, or None when it is not set."""
        index = self._index(name)
        if index is None:
            return None
        return self._entries[index].partition("=")[2]

    def set(self, name: str, value: Optional[str] = None) -> None:
        """Set ``name``, replacing it in place or appending it at the end."""
        entry = f"{name}={value or ''}"
        index = self._index(name)
        if index is None:
            self._entries.append(entry)
        else:
            self._entries[index] = entry

    def unset(self, name: str) -> None:
        """Remove ``name`` if it is set."""
        index = self._index(name)
        if index is not None:
            del self._entries[index]

    def entries(self) -> List[str]:
        """Return a copy of the entries, in order."""
        return list(self._entries)

    def as_dict(self) -> Dict[str, str]:
        """Return the environment as a mapping, first entry of a key winning."""
        result: Dict[str, str] = {}
        for entry in self._entries:
            key, sep, value = entry.partition("=")
            if sep and key not in result:
                result[key] = value
        return result


def check_environment(entries: List[str]) -> List[str]:
    """Give an empty environment the minimal PATH, PWD and OLDPWD entries."""
    if entries:
        return entries
    cwd = os.getcwd()
    return [f"PATH={DEFAULT_PATH}", f"PWD={cwd}", f"OLDPWD={cwd}"]


def validate_name(name: str) -> None:
    """Raise ShellError unless ``name`` is a valid setenv variable name."""
    if not (name[:1].isascii() and name[:1].isalpha()):
        raise ShellError("setenv: Variable name must begin with a letter.")
    if not all(is_alphanum(char) for char in name):
        raise ShellError(
            "setenv: Variable name must contain alphanumeric characters."
        )


def find_executable(command: str, env: Environment) -> Optional[str]:
    """Look ``command`` up in the directories of the environment's PATH."""
    path = env.get("PATH")
    if path is None:
        return None
    for directory in filter(None, path.split(":")):
        if not directory.endswith("/"):
            directory += "/"
        candidate = directory + command
        if os.access(candidate, os.F_OK):
            return candidate
    return None


def _setenv(args: List[str], env: Environment, out: TextIO, err: TextIO) -> int:
    if len(args) == 1:
        for entry in env.entries():
            out.write(entry + "\n")
        return 0
    status = 0
    if len(args) > 3:
        err.write("setenv: Too many arguments.\n")
        status = 1
    try:
        validate_name(args[1])
    except ShellError as error:
        err.write(error.message + "\n")
        return error.status
    env.set(args[1], args[2] if len(args) > 2 else "")
    return status


def _unsetenv(args: List[str], env: Environment, err: TextIO) -> int:
    if len(args) == 1:
        err.write("unsetenv: Too few arguments.\n")
        return 1
    for name in args[1:]:
        env.unset(name)
    return 0


def env_builtin(line: str, env: Environment, out: TextIO, err: TextIO) -> Optional[int]:
    """Run setenv or unsetenv; return the status, or None for other commands."""
    args = split_words(line)
    if not args:
        return None
    if args[0] == "setenv":
        return _setenv(args, env, out, err)
    if args[0] == "unsetenv":
        return _unsetenv(args, env, err)
    return None