"""Provide exceptions used by tuidriver.

tuidriver.exc
~~~~~~~~~~~~~

Notes
-----
Every assertion failure raised while driving an application inherits from
:exc:`DriverAssertionError`, which is also an :exc:`AssertionError`. pytest
therefore reports these as test failures rather than errors.
"""

from __future__ import annotations


class TuiDriverException(Exception):
    """Base exception for all tuidriver errors."""


class DriverAssertionError(TuiDriverException, AssertionError):
    """Base exception for failures that end the running test."""


class WaitTimeout(DriverAssertionError):
    """Raised when a polled check never passed within the global timeout.

    The message is the diagnostic returned by the last failing attempt.

    Examples
    --------
    >>> err = WaitTimeout("Expected popup menu to be focused", attempts=3, elapsed=0.2)
    >>> str(err)
    'Expected popup menu to be focused'
    >>> err.attempts
    3
    """

    def __init__(
        self,
        message: str = "",
        attempts: int = 0,
        elapsed: float = 0.0,
        *args: object,
    ) -> None:
        self.message = message
        self.attempts = attempts
        self.elapsed = elapsed
        super().__init__(message)


class ManualFailure(DriverAssertionError):
    """Raised when test code fails the test explicitly."""


class UnknownKeybinding(TuiDriverException, KeyError):
    """Raised if a logical action has no key bound to it."""

    def __init__(self, action: str, *args: object) -> None:
        self.action = action
        super().__init__(f"No keybinding for action: {action}")

    def __str__(self) -> str:
        return str(self.args[0])


class ShellCommandError(TuiDriverException):
    """Raised if a background shell command exits with a non-zero status."""

    def __init__(
        self,
        cmd: str,
        returncode: int,
        output: str = "",
        *args: object,
    ) -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.output = output
        msg = f"Command '{cmd}' exited with status {returncode}"
        if output:
            msg += f":\n{output}"
        super().__init__(msg)
