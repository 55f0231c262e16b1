"""Parenthesised commands, run in a fresh copy of the shell."""

import subprocess
from typing import Optional, Sequence


def has_balanced_parentheses(text: str) -> bool:
    """Tell whether every '(' is closed by a later ')'."""
    opened = closed = 0
    for char in text:
        if char == "(":
            opened += 1
        elif char == ")" and opened:
            closed += 1
    return bool(opened and closed and opened == closed)


def subshell_body(text: str) -> str:
    """Return the text from the first '(' to the next ')', parentheses and newlines blanked."""
    start = text.find("(")
    body = text[start:] if start != -1 else ""
    end = body.find(")")
    if end != -1:
        body = body[:end]
    return body.replace("(", " ").replace(")", " ").replace("\n", " ")


def run_parentheses(line: str, shell_command: Sequence[str]) -> Optional[int]:
    """Feed the parenthesised part of ``line`` to ``shell_command``.

    Returns the child's exit status, or None when ``line`` has no balanced
    parentheses.
    """
    if not has_balanced_parentheses(line):
        return None
    completed = subprocess.run(
        list(shell_command), input=subshell_body(line) + "\n", text=True, check=False
    )
    return completed.returncode