"""tuidriver pytest plugin."""

from __future__ import annotations

import logging
import typing as t

import pytest

from tuidriver.config import DriverConfig
from tuidriver.driver import TestDriver
from tuidriver.keybindings import KeybindingConfig
from tuidriver.shell import Shell
from tuidriver.test.constants import FAST_TIMEOUT_SECONDS
from tuidriver.test.fake import FakeGui, FakeView

if t.TYPE_CHECKING:
    import pathlib

logger = logging.getLogger(__name__)


@pytest.fixture
def driver_config() -> DriverConfig:
    """Return timing that gives up quickly and presses keys without delay.

    Override this fixture to test against a slower application.
    """
    return DriverConfig(timeout=FAST_TIMEOUT_SECONDS, interval=0.01, key_delay=0)


@pytest.fixture
def keybindings() -> KeybindingConfig:
    """Return default :class:`~tuidriver.keybindings.KeybindingConfig`."""
    return KeybindingConfig()


@pytest.fixture
def fake_gui(keybindings: KeybindingConfig) -> FakeGui:
    """Return a :class:`~tuidriver.test.fake.FakeGui` focused on an empty list.

    The list view is called ``files``. Fill it in the test:

    >>> def test_example(fake_gui: FakeGui) -> None:
    ...     fake_gui.view("files").lines = ["README.md", "setup.cfg"]
    """
    return FakeGui(FakeView("files", is_list=True), keybindings=keybindings)


@pytest.fixture
def shell(tmp_path: pathlib.Path) -> Shell:
    """Return a :class:`~tuidriver.shell.Shell` rooted in ``tmp_path``."""
    return Shell(tmp_path)


@pytest.fixture
def test_driver(
    fake_gui: FakeGui,
    shell: Shell,
    keybindings: KeybindingConfig,
    driver_config: DriverConfig,
) -> TestDriver:
    """Return a :class:`~tuidriver.driver.TestDriver` wired to ``fake_gui``.

    To drive a real application, override ``fake_gui`` (or this fixture) in
    your ``conftest.py``.
    """
    logger.debug("Creating test driver with %r", driver_config)
    return TestDriver(fake_gui, shell=shell, keys=keybindings, config=driver_config)
