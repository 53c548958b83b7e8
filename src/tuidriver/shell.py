"""Out-of-band shell activity for tests.

A test can use :class:`Shell` to change the world behind the application's
back while it is running, e.g. create a file or run a command that the
application should notice.
"""

from __future__ import annotations

import logging
import pathlib
import shlex
import subprocess
import typing as t

from tuidriver.exc import ShellCommandError

logger = logging.getLogger(__name__)

if t.TYPE_CHECKING:
    import sys
    from os import PathLike

    StrPath = t.Union[str, PathLike[str]]

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self


class Shell:
    """Run commands and touch files relative to a working directory.

    Parameters
    ----------
    cwd : str or :class:`os.PathLike`
        Directory commands run in and relative paths resolve against.

    Examples
    --------
    >>> shell = Shell(tmp_path)
    >>> _ = shell.create_file("notes.txt", "first")
    >>> (tmp_path / "notes.txt").read_text()
    'first'
    >>> shell.run_command("ls").splitlines()
    ['notes.txt']
    """

    def __init__(self, cwd: StrPath) -> None:
        self.cwd = pathlib.Path(cwd)

    def _path(self, path: StrPath) -> pathlib.Path:
        return self.cwd / path

    def _run(self, cmd: str) -> subprocess.CompletedProcess[str]:
        logger.debug("Running shell command in %s: %s", self.cwd, cmd)
        return subprocess.run(
            shlex.split(cmd),
            cwd=self.cwd,
            capture_output=True,
            text=True,
            check=False,
        )

    def run_command(self, cmd: str) -> str:
        """Run ``cmd`` and return its standard output.

        Raises
        ------
        ShellCommandError
            If the command exits with a non-zero status.
        """
        proc = self._run(cmd)
        if proc.returncode != 0:
            raise ShellCommandError(cmd, proc.returncode, proc.stdout + proc.stderr)
        return proc.stdout

    def run_command_expect_error(self, cmd: str) -> str:
        """Run ``cmd``, which must fail, and return its combined output.

        Raises
        ------
        ShellCommandError
            If the command unexpectedly succeeds.
        """
        proc = self._run(cmd)
        output = proc.stdout + proc.stderr
        if proc.returncode == 0:
            msg = f"Expected command '{cmd}' to fail, but it succeeded"
            raise ShellCommandError(cmd, proc.returncode, msg)
        return output

    def create_file(self, path: StrPath, content: str = "") -> Self:
        """Write ``content`` to a new file, creating parent directories."""
        target = self._path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return self

    def update_file(self, path: StrPath, content: str) -> Self:
        """Overwrite an existing file."""
        target = self._path(path)
        if not target.exists():
            msg = f"Cannot update missing file: {target}"
            raise FileNotFoundError(msg)
        target.write_text(content, encoding="utf-8")
        return self

    def delete_file(self, path: StrPath) -> Self:
        self._path(path).unlink()
        return self

    def create_dir(self, path: StrPath) -> Self:
        self._path(path).mkdir(parents=True, exist_ok=True)
        return self
