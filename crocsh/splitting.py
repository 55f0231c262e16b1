"""Splitting of command lines, files and backtick segments into pieces."""

import re
from typing import List, Optional

_BACKTICK_PIECES = re.compile(r"`[^`]*(?:`|$)|[^`]+")


def squeeze_line(text: str) -> str:
    """Drop newlines and collapse each run of spaces to a single space."""
    kept = []
    for index, char in enumerate(text):
        if char == "\n":
            continue
        if char == " " and text[index + 1:index + 2] == " ":
            continue
        kept.append(char)
    return "".join(kept)


def split_words(text: str) -> List[str]:
    """Split a command into words on spaces and tabs.

    A word that starts with a double quote runs to the next double quote,
    which is removed. Splitting stops at the first empty word.
    """
    line = squeeze_line(text).replace("\t", " ")
    words: List[str] = []
    pos, size = 0, len(line)
    while True:
        while pos < size and line[pos] == " ":
            pos += 1
        if pos >= size:
            break
        if line[pos] == '"':
            end = line.find('"', pos + 1)
            if end == -1:
                end = size
            word = line[pos + 1:end]
            pos = end + 1
        else:
            end = line.find(" ", pos)
            if end == -1:
                end = size
            word = line[pos:end]
            pos = end
        if not word:
            break
        words.append(word)
    return words


def split_commands(text: str) -> List[str]:
    """Split a line into commands on ';' outside double quotes.

    Leading spaces and semicolons are skipped; empty commands are dropped.
    Quotes are kept in the commands.
    """
    pieces: List[str] = []
    current: List[str] = []
    quoted = False
    for char in text.lstrip(" ;"):
        if char == '"':
            quoted = not quoted
        if char == ";" and not quoted:
            pieces.append("".join(current))
            current = []
        else:
            current.append(char)
    pieces.append("".join(current))
    return [piece for piece in pieces if piece]


def split_blanks(text: str) -> List[str]:
    """Split on spaces and tabs; each word ends at its first newline."""
    return [
        token.split("\n", 1)[0]
        for token in text.replace("\t", " ").split(" ")
        if token
    ]


def split_lines(text: Optional[str]) -> List[str]:
    """Split file content into lines; a single final newline adds no line."""
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return text.split("\n")


def split_backticks(text: str) -> List[str]:
    """Cut a line into plain runs and backtick-enclosed segments, backticks kept."""
    return _BACKTICK_PIECES.findall(text)