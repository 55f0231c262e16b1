"""The repeat builtin, expanded into a ';'-separated command line."""

import re
from typing import TextIO

from .splitting import split_words

_ATOI = re.compile(r"\s*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def expand_repeat(line: str, err: TextIO) -> str:
    """Turn ``repeat N words...`` into N copies of the joined words separated by ';'.

    Other lines are returned unchanged; on an error a bare newline is returned.
    """
    words = split_words(line)
    if not words or words[0] != "repeat":
        return line
    if len(words) < 3:
        err.write("repeat: Too few arguments.\n")
        return "\n"
    count = _atoi(words[1])
    if count == 0 and words[1][:1] != "0":
        err.write("repeat: Badly formed number.\n")
        return "\n"
    command = "".join(words[2:])
    return ";".join(command for _ in range(count))