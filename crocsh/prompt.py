"""The coloured prompt showing the directory and git branch."""

import os
import subprocess
from typing import Optional, TextIO

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[1;36m"
_BLUE = "\033[34m"
_YELLOW = "\033[1;33m"
_RESET = "\033[0m"


def git_branch() -> Optional[str]:
    """Return the current git branch of the working directory, or None."""
    try:
        completed = subprocess.run(
            ["git", "branch", "--show-current"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            check=False,
        )
    except OSError:
        return None
    first = completed.stdout.splitlines()[0] if completed.stdout else ""
    return first or None


def render_prompt(status: int, cwd: str, branch: Optional[str]) -> str:
    """Build the prompt: red arrow after a failure, green otherwise."""
    parts = [_RED if status else _GREEN, "➜ ", _CYAN, cwd]
    if branch:
        parts += [_BLUE, " git:(", _RED, branch, _BLUE, ")"]
    parts += [_YELLOW, " ✗ ", _RESET]
    return "".join(parts)


def show_prompt(status: int, out: TextIO) -> None:
    """Write the prompt for the current directory to ``out``."""
    out.write(render_prompt(status, os.getcwd(), git_branch()))
    out.flush()