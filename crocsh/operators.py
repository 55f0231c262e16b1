"""The || and && operators, pipes and redirections."""

import os
import sys
import tempfile
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Sequence, TextIO, Tuple

from .errors import ShellError
from .splitting import split_words
from .text import join_words

Runner = Callable[[str], int]

_REDIRECTIONS = ("<", "<<", ">", ">>")
_FILE_MODE = 0o707


def has_redirection(words: Sequence[str]) -> bool:
    """Tell whether one of the words is a redirection operator."""
    return any(word in _REDIRECTIONS for word in words)


def _starts_alpha(word: str) -> bool:
    first = word[:1]
    return first.isascii() and first.isalpha()


def reorder_flags(words: Sequence[str]) -> List[str]:
    """Move each flag of a redirected command in front of the word it follows.

    A flag is placed just before the nearest earlier word that starts with a
    letter; commands without redirection are left as they are.
    """
    result = list(words)
    if not has_redirection(result):
        return result
    for index in range(len(result)):
        if not result[index].startswith("-"):
            continue
        anchor = next(
            (k for k in range(index, 0, -1) if _starts_alpha(result[k])), 0
        )
        if anchor:
            flag = result.pop(index)
            result.insert(anchor - 1, flag)
    return result


def _index(words: Sequence[str], target: str, start: int = 0) -> Optional[int]:
    return next(
        (index for index in range(start, len(words)) if words[index] == target),
        None,
    )


def _split_double(joined: str, char: str) -> Tuple[str, str]:
    """Cut around the first two-character operator made of ``char``."""
    cut = max(joined.find(char), 1)
    return joined[:cut - 1], joined[cut + 2:]


def dispatch_logical(line: str, run: Runner, err: TextIO) -> Optional[int]:
    """Run ``a || b`` or ``a && b`` through ``run``.

    Returns the final status, or None when the line has no such operator.
    """
    words = split_words(line)
    for operator, on_failure in (("||", True), ("&&", False)):
        index = _index(words, operator)
        if index is None:
            continue
        if index == 0 or index + 1 >= len(words):
            err.write("Invalid null command.\n")
            return 1
        left, right = _split_double(join_words(words), operator[0])
        status = run(left)
        if bool(status) == on_failure:
            status = run(right)
        return status
    return None


@contextmanager
def _redirected(fd: int, target: int) -> Iterator[None]:
    sys.stdout.flush()
    saved = os.dup(fd)
    os.dup2(target, fd)
    try:
        yield
    finally:
        sys.stdout.flush()
        os.dup2(saved, fd)
        os.close(saved)


def _open(filename: str, flags: int) -> int:
    try:
        return os.open(filename, flags, _FILE_MODE)
    except OSError as error:
        raise ShellError(f"{filename}: {error.strerror}.") from None


def _pipe(words: List[str], index: int, run: Runner) -> int:
    if index + 1 >= len(words):
        raise ShellError("Invalid null command.")
    joined = join_words(words)
    cut = joined.find("|")
    left, right = joined[:cut], joined[cut + 1:]
    with tempfile.TemporaryFile() as buffer:
        with _redirected(1, buffer.fileno()):
            status = run(left)
        os.lseek(buffer.fileno(), 0, os.SEEK_SET)
        with _redirected(0, buffer.fileno()):
            run(right)
    return status


def _target(words: List[str], index: int) -> str:
    if index + 1 >= len(words):
        raise ShellError("Missing name for redirect.")
    return words[index + 1]


def _redirect_input(words: List[str], index: int, run: Runner) -> int:
    filename = _target(words, index)
    command = join_words(words).split("<", 1)[0]
    if not os.access(filename, os.F_OK):
        raise ShellError(f"{filename}: No such file or directory.")
    fd = _open(filename, os.O_RDONLY)
    try:
        with _redirected(0, fd):
            return run(command)
    finally:
        os.close(fd)


def _redirect_output(words: List[str], index: int, run: Runner, append: bool) -> int:
    filename = _target(words, index)
    command = join_words(words).split(">", 1)[0]
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    fd = _open(filename, flags)
    try:
        with _redirected(1, fd):
            return run(command)
    finally:
        os.close(fd)


def _misplaced_operator(line: str) -> Optional[str]:
    for char in line:
        if char in "<>":
            return "Missing name for redirect."
        if char == "|":
            return "Invalid null command."
    return None


def dispatch_operators(line: str, run: Runner, err: TextIO) -> Optional[int]:
    """Run a pipe or a redirection of ``line`` through ``run``.

    Returns the status, or None when the line holds no such operator. A pipe
    has the status of its first command.
    """
    words = reorder_flags(split_words(line))
    try:
        index = _index(words, "|", 1)
        if index is not None:
            return _pipe(words, index, run)
        for operator in ("<", "<<"):
            index = _index(words, operator)
            if index is not None:
                return _redirect_input(words, index, run)
        for operator, append in ((">", False), (">>", True)):
            index = _index(words, operator)
            if index is not None:
                return _redirect_output(words, index, run, append)
    except ShellError as error:
        err.write(error.message + "\n")
        return error.status
    message = _misplaced_operator(line)
    if message is None:
        return None
    err.write(message + "\n")
    return 1