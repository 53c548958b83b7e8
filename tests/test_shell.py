"""Tests for tuidriver.shell."""

from __future__ import annotations

import typing as t

import pytest

from tuidriver import exc

if t.TYPE_CHECKING:
    import pathlib

    from tuidriver.shell import Shell


def test_run_command_in_cwd(shell: Shell, tmp_path: pathlib.Path) -> None:
    """Commands run in the shell's directory."""
    (tmp_path / "notes.txt").write_text("hello\n", encoding="utf-8")

    assert shell.run_command("cat notes.txt") == "hello\n"
    assert shell.run_command("pwd").strip() == str(tmp_path)


def test_run_command_quoting(shell: Shell) -> None:
    """Arguments are split the way a shell would split them."""
    assert shell.run_command("echo 'two words'") == "two words\n"


def test_run_command_failure(shell: Shell) -> None:
    """A non-zero exit raises with the command, status and output."""
    with pytest.raises(exc.ShellCommandError) as excinfo:
        shell.run_command("ls does-not-exist")

    err = excinfo.value
    assert err.cmd == "ls does-not-exist"
    assert err.returncode != 0
    assert "does-not-exist" in err.output
    assert str(err).startswith(
        f"Command 'ls does-not-exist' exited with status {err.returncode}:\n",
    )


def test_run_command_failure_without_output(shell: Shell) -> None:
    """A silent failure has no trailing output in its message."""
    with pytest.raises(exc.ShellCommandError) as excinfo:
        shell.run_command("false")

    assert str(excinfo.value) == "Command 'false' exited with status 1"


def test_run_command_expect_error(shell: Shell) -> None:
    """Expected failures return their output; successes raise."""
    output = shell.run_command_expect_error("ls does-not-exist")
    assert "does-not-exist" in output

    with pytest.raises(exc.ShellCommandError, match="Expected command 'true' to fail"):
        shell.run_command_expect_error("true")


def test_file_operations(shell: Shell, tmp_path: pathlib.Path) -> None:
    """Files and directories are created relative to the working directory."""
    shell.create_file("src/app.py", "print('v1')\n").create_dir("build/out")

    assert (tmp_path / "src" / "app.py").read_text() == "print('v1')\n"
    assert (tmp_path / "build" / "out").is_dir()

    shell.update_file("src/app.py", "print('v2')\n")
    assert (tmp_path / "src" / "app.py").read_text() == "print('v2')\n"

    shell.delete_file("src/app.py")
    assert not (tmp_path / "src" / "app.py").exists()


def test_update_missing_file(shell: Shell) -> None:
    """Updating a file that does not exist is an error."""
    with pytest.raises(FileNotFoundError, match="Cannot update missing file"):
        shell.update_file("missing.txt", "x")


def test_create_empty_file(shell: Shell, tmp_path: pathlib.Path) -> None:
    """Content defaults to empty."""
    shell.create_file("empty")
    assert (tmp_path / "empty").read_text() == ""
