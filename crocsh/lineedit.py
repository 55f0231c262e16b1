"""Interactive line reading with history recall and tab completion."""

import glob
from typing import Callable, List, Optional, TextIO

from .environment import Environment
from .history import History
from .splitting import split_commands, split_words

_ERASE = "\b \b"


def last_word(text: str) -> str:
    """Return the last word of the last command of ``text``."""
    word = ""
    for command in split_commands(text):
        words = split_words(command)
        if words:
            word = words[-1]
    return word


def _argument_in(words: List[str]) -> bool:
    result = False
    after_command = False
    for word in words:
        if after_command:
            result = True
        after_command = True
        if word[:1] in ("|", ">"):
            result = False
            after_command = False
    return result


def is_argument_position(text: str) -> bool:
    """Tell whether the last word of ``text`` is an argument rather than a command."""
    result = False
    for command in split_commands(text):
        result = _argument_in(split_words(command))
    return result


def complete_variable(prefix: str, env: Environment) -> Optional[str]:
    """Complete a variable name; None when several names match.

    With no match the prefix itself is returned.
    """
    names = [
        entry.partition("=")[0]
        for entry in env.entries()
        if entry.startswith(prefix)
    ]
    if len(names) > 1:
        return None
    return names[0] if names else prefix


def complete_command(prefix: str, path: str) -> Optional[str]:
    """Complete a command name from the directories of ``path``.

    The first directory holding exactly one match decides.
    """
    for directory in filter(None, path.split(":")):
        matches = glob.glob(f"{directory}/{prefix}*")
        if len(matches) == 1:
            return matches[0].rsplit("/", 1)[-1]
    return None


def complete_path(prefix: str) -> Optional[str]:
    """Complete a file name when exactly one file matches."""
    matches = glob.glob(prefix + "*")
    return matches[0] if len(matches) == 1 else None


def _replace_last_word(text: str, word: str) -> str:
    space = text.rfind(" ", 1)
    start = space + 1 if space != -1 else 0
    return text[:start] + word


class LineEditor:
    """Reads a line key by key, echoing it to ``out``."""

    def __init__(self, env: Environment, history: History, status: int, out: TextIO) -> None:
        self.env = env
        self.history = history
        self.status = status
        self.out = out

    def _show(self, old: str, new: str) -> str:
        self.out.write(_ERASE * len(old) + new)
        return new

    def read_line(self, read_char: Callable[[], str]) -> Optional[str]:
        """Read one line.

        Returns the typed text, None for an empty line, and ``"exit\\n"`` on
        Ctrl-C, Ctrl-D or end of input.
        """
        entries = self.history.entries()
        position = len(entries)
        text = ""
        arrow = False
        while True:
            char = read_char()
            if char in ("", "\x03", "\x04"):
                return "exit\n"
            if char == "\n":
                break
            if char == "[":
                arrow = True
                continue
            if char == "\t":
                text = self.complete(text)
                continue
            if arrow:
                arrow = False
                if char == "A":
                    if position > 0:
                        text = self._show(text, entries[position - 1])
                        position -= 1
                    continue
                if char == "B":
                    if 0 < position < len(entries):
                        text = self._show(text, entries[position])
                        position += 1
                    continue
                if char in ("C", "D"):
                    continue
            if char == "\x7f":
                if text:
                    self.out.write(_ERASE)
                    text = text[:-1]
            elif " " <= char <= "~":
                self.out.write(char)
                text += char
        self.out.write("\n")
        self.out.flush()
        return text or None

    def complete(self, text: str) -> str:
        """Complete the last word of ``text`` and return the new text."""
        if not text:
            return text
        word = last_word(text)
        replacement: Optional[str]
        if word.startswith("$"):
            name = complete_variable(word[1:], self.env)
            replacement = None if name is None else "$" + name
        elif not is_argument_position(text):
            replacement = complete_command(word, self.env.get("PATH") or "")
        else:
            replacement = complete_path(word)
        if replacement is None:
            return text
        return self._show(text, _replace_last_word(text, replacement))