"""The crocus builtin: numbers drawn in large digits."""

from typing import List, Optional, TextIO

_DIGITS = frozenset("0123456789")

_GLYPHS = {
    "0": (" ccc ", "c   c", "c   c", "c   c", " ccc "),
    "1": (" ccc ", "c cc ", "  cc ", "  cc ", " cccc"),
    "2": (" ccc ", "c   c", "   c ", " c   ", "ccccc"),
    "3": ("cccc ", "    c", " ccc ", "    c", "cccc "),
    "4": ("  cc ", " c c ", "c  c ", "ccccc", "   c "),
    "5": ("ccccc", "c    ", "cccc ", "    c", "cccc "),
    "6": (" ccc ", "c    ", "cccc ", "c   c", " ccc "),
    "7": ("ccccc", "    c", "   c ", "  c  ", " c   "),
    "8": (" ccc ", "c   c", " ccc ", "c   c", " ccc "),
    "9": (" ccc ", "c   c", " cccc", "    c", " ccc "),
}


def _fill(pattern: Optional[str], digit: str) -> str:
    if pattern is None:
        return "0"
    return pattern[(ord(digit) - ord("0")) % len(pattern)]


def render_digits(number: str, pattern: Optional[str] = None) -> List[str]:
    """Return the five rows that draw ``number``.

    Each digit is drawn with a character picked from ``pattern`` by its value,
    or with '0' when there is no pattern.
    """
    rows: List[str] = []
    for row in range(5):
        parts: List[str] = []
        for index, char in enumerate(number):
            glyph = _GLYPHS.get(char)
            if glyph is None:
                continue
            parts.append(glyph[row].replace("c", _fill(pattern, char)))
            if index + 1 != len(number):
                parts.append(" ")
        rows.append("".join(parts))
    return rows


def _is_num(text: str) -> bool:
    return all(char in _DIGITS for char in text)


def _valid(words: List[str]) -> bool:
    if len(words) == 3:
        return words[1] == "-n" and _is_num(words[2])
    if len(words) == 5:
        for index in (1, 3):
            option = words[index]
            if len(option) != 2 or option[0] != "-" or option[1] not in "ns":
                return False
            if option[1] == "n" and not _is_num(words[index + 1]):
                return False
        return True
    return False


def _option_value(words: List[str], flag: str) -> Optional[str]:
    for index, word in enumerate(words):
        if word.startswith(flag):
            return words[index + 1] if index + 1 < len(words) else None
    return None


def crocus_builtin(words: List[str], out: TextIO) -> Optional[int]:
    """Run ``crocus -n NUMBER [-s CHARS]``; return the status, or None for other commands."""
    if not words or words[0] != "crocus":
        return None
    if not _valid(words):
        return 1
    number = _option_value(words, "-n")
    if number is None:
        return 1
    pattern = _option_value(words, "-s")
    for row in render_digits(number, pattern):
        out.write(row + "\n")
    return 0