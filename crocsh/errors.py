"""Exceptions raised by the shell."""


class ShellError(Exception):
    """A command failed; carries the message shown to the user and the exit status."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message