"""Aliases kept in a file, and the alias / unalias builtins."""

import re
from typing import Dict, List, Optional, TextIO, Tuple

from .splitting import split_blanks, split_lines, split_words

DEFAULT_ALIAS_FILE = ".alias"

_VALUE_START = re.compile(r" (?! )")


def _format(name: str, words: List[str]) -> str:
    return f"{name}\t{' '.join(words)}\n"


def _alias_value(line: str) -> str:
    """Return what follows the first separator of a raw alias line."""
    text = line.replace("\t", " ")
    match = _VALUE_START.search(text)
    return text[match.end():] if match else text


class AliasFile:
    """Aliases stored one per line as ``name<TAB>words``."""

    def __init__(self, path: str = DEFAULT_ALIAS_FILE) -> None:
        self.path = path

    def _content(self) -> str:
        try:
            with open(self.path, encoding="utf-8") as handle:
                return handle.read()
        except FileNotFoundError:
            return ""

    def _write(self, entries: List[Tuple[str, List[str]]]) -> None:
        with open(self.path, "w", encoding="utf-8") as handle:
            handle.write("".join(_format(name, words) for name, words in entries))

    def read(self) -> List[Tuple[str, List[str]]]:
        """Return the aliases as (name, words) pairs, stopping at a blank line."""
        entries: List[Tuple[str, List[str]]] = []
        for line in split_lines(self._content()):
            words = split_blanks(line)
            if not words:
                break
            entries.append((words[0], words[1:]))
        return entries

    def display(self, out: TextIO) -> None:
        """Write every alias as ``name<TAB>words``."""
        for name, words in self.read():
            out.write(_format(name, words))

    def display_one(self, name: str, out: TextIO) -> None:
        """Write the words of the alias ``name``, if there is one."""
        for alias, words in self.read():
            if alias == name:
                if words:
                    out.write(" ".join(words) + "\n")
                break

    def set(self, name: str, words: List[str]) -> None:
        """Define or redefine an alias; a new alias leaves the file sorted."""
        replaced = False
        entries: List[Tuple[str, List[str]]] = []
        for alias, current in self.read():
            if alias == name:
                entries.append((name, list(words)))
                replaced = True
            else:
                entries.append((alias, current))
        if not replaced:
            entries.append((name, list(words)))
            entries.sort(key=lambda entry: _format(*entry))
        self._write(entries)

    def remove(self, name: str) -> None:
        """Delete the alias ``name``."""
        self._write([entry for entry in self.read() if entry[0] != name])

    def expand(self, line: str) -> str:
        """Replace every word of ``line`` that names an alias with its value."""
        content = self._content()
        words = split_words(line)
        if not content or not words or words[0] in ("alias", "unalias"):
            return line
        table: Dict[str, str] = {}
        for raw in split_lines(content):
            parts = split_blanks(raw)
            if parts:
                table.setdefault(parts[0], _alias_value(raw))
        return " ".join(table.get(word, word) for word in words) + "\n"


def alias_builtin(line: str, aliases: AliasFile, out: TextIO, err: TextIO) -> Optional[int]:
    """Run alias or unalias; return the status, or None for other commands."""
    words = split_words(line)
    if not words or words[0] not in ("alias", "unalias"):
        return None
    if words[0] == "alias":
        if len(words) == 1:
            aliases.display(out)
        elif len(words) == 2:
            aliases.display_one(words[1], out)
        else:
            aliases.set(words[1], words[2:])
        return 0
    if len(words) == 1:
        err.write("unalias: Too few arguments.\n")
        return 1
    for name in words[1:]:
        aliases.remove(name)
    return 0