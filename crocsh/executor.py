"""Running external programs and reporting how they ended."""

import errno
import os
import signal
import subprocess
import sys
from typing import List, TextIO

from .environment import Environment, find_executable

_SIGNAL_MESSAGES = {
    int(signal.SIGSEGV): "Segmentation fault\n",
    int(signal.SIGFPE): "Floating exception\n",
    int(signal.SIGABRT): "Abort (core dumped)\n",
}


def describe_signal(returncode: int, err: TextIO) -> int:
    """Turn a child's return code into a shell status.

    A negative return code means the child was killed by a signal: a message
    is written for the well-known ones and the status is 128 plus the signal.
    """
    if returncode >= 0:
        return returncode
    signum = -returncode
    message = _SIGNAL_MESSAGES.get(signum)
    if message:
        err.write(message)
    return 128 + signum


def _failure_message(command: str, shown: str, error: OSError) -> str:
    if not os.access(command, os.F_OK):
        return f"{command}: Command not found.\n"
    if error.errno == errno.ENOEXEC:
        return f"{shown}: Exec format error. Wrong Architecture.\n"
    if os.path.isdir(command):
        return f"{shown}: Permission denied.\n"
    return f"{shown}: {error.strerror}\n"


def run_external(args: List[str], env: Environment, err: TextIO) -> int:
    """Run ``args`` as a program and return its status.

    ``env`` prints the environment. A command that is not a path to an
    existing file is looked up in PATH.
    """
    if not args:
        return 0
    if args[0] == "env":
        out = sys.stdout
        out.write("".join(entry + "\n" for entry in env.entries()))
        out.flush()
        return 0
    command = args[0]
    if os.access(command, os.F_OK):
        shown = command
        program = command if os.sep in command else os.path.join(".", command)
    else:
        found = find_executable(command, env)
        if found is None:
            err.write(f"{command}: Command not found.\n")
            return 1
        shown = program = found
    sys.stdout.flush()
    try:
        completed = subprocess.run(
            list(args), executable=program, env=env.as_dict(), check=False
        )
    except OSError as error:
        err.write(_failure_message(command, shown, error))
        return 1
    return describe_signal(completed.returncode, err)