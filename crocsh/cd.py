"""The cd builtin."""

import os
from typing import Optional, TextIO

from .environment import Environment
from .errors import ShellError
from .splitting import split_words


def _target(env: Environment, arg: Optional[str]) -> str:
    if arg is None or arg == "~":
        target = env.get("HOME")
    elif arg == "-":
        target = env.get("OLDPWD")
    else:
        target = arg
    return target or ""


def change_directory(env: Environment, arg: Optional[str]) -> None:
    """Change directory and keep PWD and OLDPWD up to date.

    No argument or ``~`` goes to HOME, ``-`` to OLDPWD.
    """
    target = _target(env, arg)
    env.set("PWD", os.getcwd())
    try:
        os.chdir(target)
    except OSError:
        name = arg or ""
        if os.access(target, os.F_OK):
            raise ShellError(f"{name}: Not a directory.") from None
        raise ShellError(f"{name}: No such file or directory.") from None
    env.set("OLDPWD", env.get("PWD"))
    env.set("PWD", os.getcwd())


def cd_builtin(line: str, env: Environment, err: TextIO) -> Optional[int]:
    """Run cd; return the status, or None for other commands."""
    words = split_words(line)
    if not words or words[0] != "cd":
        return None
    try:
        change_directory(env, words[1] if len(words) > 1 else None)
    except ShellError as error:
        err.write(error.message + "\n")
        return error.status
    return 0