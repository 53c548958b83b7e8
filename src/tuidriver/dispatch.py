"""Deliver paced input to the application under test."""

from __future__ import annotations

import logging
import time
import typing as t

from tuidriver.config import DriverConfig

logger = logging.getLogger(__name__)

if t.TYPE_CHECKING:
    from tuidriver.gui import GuiDriver


class InputDispatcher:
    """Send key presses, each preceded by the configured key delay.

    The delay emulates human pacing and gives the application a chance to
    handle one event before the next arrives. It is separate from the retry
    engine's poll interval.

    Examples
    --------
    >>> from tuidriver.test.fake import FakeGui, FakeView
    >>> gui = FakeGui(FakeView("prompt", editable=True))
    >>> dispatcher = InputDispatcher(gui, DriverConfig(key_delay=0))
    >>> dispatcher.type_content("hi!")
    >>> gui.keys
    ['h', 'i', '!']
    """

    def __init__(self, gui: GuiDriver, config: DriverConfig | None = None) -> None:
        self.gui = gui
        self.config = config if config is not None else DriverConfig()

    def press(self, key: str) -> None:
        """Wait the key delay, then deliver ``key``."""
        self.wait(self.config.key_delay)
        logger.debug("Pressing %s", key)
        self.gui.press_key(key)

    def type_content(self, content: str) -> None:
        """Press each character of ``content`` in order."""
        for char in content:
            self.press(char)

    def wait(self, seconds: float) -> None:
        """Block for ``seconds``, letting the application catch up."""
        time.sleep(seconds)
