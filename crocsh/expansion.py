"""Backtick substitution and wildcard expansion of command arguments."""

import glob
import subprocess
from typing import List, Tuple

from .errors import ShellError
from .splitting import split_backticks, split_words


def _command_output(command: str) -> str:
    completed = subprocess.run(
        command, shell=True, stdout=subprocess.PIPE, text=True, check=False
    )
    return completed.stdout or ""


def substitute_backticks(line: str) -> str:
    """Replace every backtick-enclosed command with its output.

    Each piece loses a single trailing newline. An odd number of backticks
    raises ShellError.
    """
    count = line.count("`")
    if count == 0:
        return line
    if count % 2:
        raise ShellError("Unmatched '`'.")
    pieces: List[str] = []
    for piece in split_backticks(line):
        if len(piece) >= 2 and piece[0] == "`" and piece[-1] == "`":
            piece = _command_output(piece[1:-1])
        if piece.endswith("\n"):
            piece = piece[:-1]
        pieces.append(piece)
    return "".join(pieces)


def is_glob(text: str) -> bool:
    """Tell whether ``text`` holds a wildcard or a pair of brackets."""
    wildcards = sum(text.count(char) for char in "?*")
    brackets = sum(text.count(char) for char in "[]")
    return wildcards > 0 or (brackets != 0 and brackets % 2 == 0)


def split_command(text: str) -> Tuple[str, str]:
    """Split a command line into its first word and the rest of the line."""
    stripped = text.lstrip(" ")
    end = stripped.find(" ")
    if end == -1:
        return stripped, ""
    return stripped[:end], stripped[end + 1:]


def glob_arguments(command: str, args: str) -> List[str]:
    """Build an argument vector, expanding each argument's wildcards.

    An argument that matches nothing is kept as written.
    """
    vector = [command]
    for word in split_words(args):
        matches = sorted(glob.glob(word))
        vector.extend(matches if matches else [word])
    return vector