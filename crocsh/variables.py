"""Variable expansion and the set builtin with its local variable file."""

import os
from typing import List, Optional, TextIO

from .environment import Environment
from .errors import ShellError
from .splitting import split_lines, split_words
from .text import join_words

DEFAULT_LOCAL_FILE = "local_environement.txt"


class LocalVariables:
    """Shell-local variables kept in a tab-separated file."""

    def __init__(self, path: str = DEFAULT_LOCAL_FILE) -> None:
        self.path = path

    def reset(self) -> None:
        """Empty the file, creating it if needed."""
        with open(self.path, "w", encoding="utf-8"):
            pass

    def content(self) -> str:
        """Return the raw content of the file, empty when it is missing."""
        try:
            with open(self.path, encoding="utf-8") as handle:
                return handle.read()
        except FileNotFoundError:
            return ""

    def lookup(self, name: str) -> Optional[str]:
        """Return the value recorded for ``name``, or None."""
        for line in split_lines(self.content()):
            key, sep, value = line.partition("\t")
            if sep and key == name:
                return value
        return None

    def add(self, args: List[str]) -> None:
        """Record ``name=value``, ``name = value`` and bare ``name`` arguments."""
        records: List[str] = []
        count = len(args)
        index = 0
        while index < count:
            word = args[index]
            if word == "=":
                index += 1
                continue
            if "=" in word:
                name, _, rest = word.partition("=")
                records.append(f"{name}\t{rest.replace('=', '')}\n")
                index += 1
                continue
            if index + 1 == count:
                records.append(f"{word}\t\n")
                break
            if args[index + 1] == "=" and index + 2 != count:
                records.append(f"{word}\t{args[index + 2]}\n")
                index += 3
                continue
            records.append(f"{word}\t\n")
            index += 1
        with open(self.path, "a", encoding="utf-8") as handle:
            handle.write("".join(records))


def _dollar_word(words: List[str], start: int = 0) -> Optional[int]:
    return next(
        (index for index in range(start, len(words)) if "$" in words[index]),
        None,
    )


def expand_env_vars(line: str, env: Environment) -> str:
    """Replace each ``$NAME`` word part with its environment value."""
    words = split_words(line)
    index = _dollar_word(words)
    if index is None:
        return line
    while index is not None:
        word = words[index]
        prefix, _, name = word.partition("$")
        value = env.get(name)
        if value is None:
            raise ShellError(f"{name}: Undefined variable.")
        words[index] = prefix + value
        line = join_words(words)
        index = _dollar_word(words, index + 1)
    return line


def expand_local_vars(line: str, store: LocalVariables) -> str:
    """Replace the whole line with the value of its first local ``$name``."""
    words = split_words(line)
    index = _dollar_word(words)
    if index is None:
        return line
    name = words[index].partition("$")[2]
    value = store.lookup(name)
    if value is None:
        return line
    return value or "\n"


def _check_set_args(args: List[str]) -> None:
    if not (args[0][:1].isascii() and args[0][:1].isalpha()):
        raise ShellError("set: Variable name must begin with a letter.")
    for word in args:
        if not all((char.isascii() and char.isalnum()) or char == "=" for char in word):
            raise ShellError(
                "set: Variable name must contain alphanumeric characters."
            )


def set_builtin(line: str, store: LocalVariables, out: TextIO, err: TextIO) -> Optional[int]:
    """Run the set builtin; return the status, or None for other commands."""
    words = split_words(line)
    if not words or words[0] != "set":
        return None
    if len(words) == 1:
        out.write(store.content())
        return 0
    try:
        _check_set_args(words[1:])
    except ShellError as error:
        err.write(error.message + "\n")
        return error.status
    store.add(words[1:])
    return 0