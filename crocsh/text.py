"""Small string helpers shared by the shell."""

import re
import string
from typing import Iterable, Optional

_ALNUM = frozenset(string.ascii_letters + string.digits + "!")
_DIGITS = re.compile(r"[0-9]+")


def env_key_matches(entry: str, name: str) -> bool:
    """Tell whether an environment entry ``KEY=value`` has exactly the key ``name``."""
    key, sep, _ = entry.partition("=")
    return bool(sep) and key == name


def is_alphanum(char: str) -> bool:
    """ASCII letters, digits and '!' count as name characters."""
    return len(char) == 1 and char in _ALNUM


def parse_leading_number(text: str) -> Optional[int]:
    """Read the digits at the start of ``text``; None when there are none."""
    match = _DIGITS.match(text)
    return int(match.group()) if match else None


def parse_event_number(text: str) -> Optional[int]:
    """Read a number that may follow one leading marker character, as in ``!12``."""
    start = 0 if text[:1].isdigit() and text[:1] in string.digits else 1
    match = _DIGITS.match(text, start) if text else None
    return int(match.group()) if match else None


def join_words(words: Iterable[str]) -> str:
    """Join words back into a line, each followed by one space."""
    return "".join(word + " " for word in words)


def has_star(text: str) -> bool:
    """Tell whether ``text`` contains a '*'."""
    return "*" in text


def has_question(text: str) -> bool:
    """Tell whether ``text`` contains a '?'."""
    return "?" in text