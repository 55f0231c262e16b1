"""Command history file, ``!N`` recall and the history builtin."""

from typing import List, Optional, TextIO

from .errors import ShellError
from .splitting import split_lines, split_words
from .text import parse_event_number, parse_leading_number

DEFAULT_HISTORY_FILE = ".history"

USAGE = "Usage: history [-chrSLMT] [# number of events].\n"


class History:
    """Command lines appended one per line to a file."""

    def __init__(self, path: str = DEFAULT_HISTORY_FILE) -> None:
        self.path = path

    def append(self, line: str) -> None:
        """Record a command line."""
        with open(self.path, "a", encoding="utf-8") as handle:
            handle.write(line + "\n")

    def entries(self) -> List[str]:
        """Return the recorded lines, oldest first."""
        try:
            with open(self.path, encoding="utf-8") as handle:
                return split_lines(handle.read())
        except FileNotFoundError:
            return []

    def clear(self) -> None:
        """Forget every recorded line."""
        with open(self.path, "w", encoding="utf-8"):
            pass

    def recall(self, text: str) -> str:
        """Replace ``!N`` with the N-th recorded line; other text is returned as is."""
        if not (text[:1] == "!" and text[1:2] != "!"):
            return text
        number = parse_event_number(text)
        event = -1 if number is None else number
        entries = self.entries()
        if event <= 0 or event > len(entries):
            raise ShellError(f"{event}: Event not found")
        return entries[event - 1] + "\n"


def history_builtin(line: str, history: History, out: TextIO) -> Optional[int]:
    """Run the history builtin; return the status, or None for other commands."""
    words = split_words(line)
    if not words:
        return None
    if words[0] == "history" and len(words) > 1 and words[1] == "-c":
        history.clear()
        return 0
    if words[0] == "history" and len(words) > 2 and words[1] == "-d":
        number = parse_leading_number(words[2])
        start = -1 if number is None else number
        entries = history.entries()
        if start < 0 or len(entries) < start:
            out.write(USAGE)
            return 1
        for index in range(start, len(entries)):
            out.write(f"{index}   {entries[index]}\n")
        return 0
    if words[0] == "history" or (words[0] == "!!" and len(words) == 1):
        for index, entry in enumerate(history.entries(), start=1):
            out.write(f"{index}   {entry}\n")
        return 0
    return None