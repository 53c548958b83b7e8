"""The object end-to-end tests talk to.

tuidriver.driver
~~~~~~~~~~~~~~~~

:class:`TestDriver` ties the pieces together: input goes out through an
:class:`~tuidriver.dispatch.InputDispatcher`; mode checks go through a
:class:`~tuidriver.modes.ModeDetector`; everything that waits on the
application goes through :func:`~tuidriver.test.retry.assert_with_retries`.
"""

from __future__ import annotations

import logging
import typing as t

from tuidriver import navigation
from tuidriver.config import DriverConfig
from tuidriver.constants import REBASE_OPTIONS_TITLE
from tuidriver.dispatch import InputDispatcher
from tuidriver.exc import ManualFailure
from tuidriver.keybindings import KeybindingConfig
from tuidriver.matcher import contains, equals
from tuidriver.modes import ModeDetector
from tuidriver.popups import (
    AlertAsserter,
    CommitMessagePanelAsserter,
    ConfirmationAsserter,
    MenuAsserter,
    PromptAsserter,
)
from tuidriver.views import Views

logger = logging.getLogger(__name__)

if t.TYPE_CHECKING:
    from tuidriver.gui import GuiDriver
    from tuidriver.matcher import Matcher
    from tuidriver.shell import Shell


class TestDriver:
    """Drive and assert on one running application.

    Parameters
    ----------
    gui : :class:`~tuidriver.gui.GuiDriver`
        The application under test.
    shell : :class:`~tuidriver.shell.Shell`, optional
        Handle for out-of-band shell activity.
    keys : :class:`~tuidriver.keybindings.KeybindingConfig`, optional
        Keys bound to logical actions.
    config : :class:`~tuidriver.config.DriverConfig`, optional
        Timeout, poll interval and key delay.

    Examples
    --------
    >>> from tuidriver.matcher import contains
    >>> test_driver.navigate_to_list_item(contains("banana"))
    >>> _ = test_driver.views().current().selected_line_idx(1)
    """

    __test__ = False

    def __init__(
        self,
        gui: GuiDriver,
        shell: Shell | None = None,
        keys: KeybindingConfig | None = None,
        config: DriverConfig | None = None,
    ) -> None:
        self.gui = gui
        self.keys = keys if keys is not None else KeybindingConfig()
        self.config = config if config is not None else DriverConfig()
        self._shell = shell
        self.dispatcher = InputDispatcher(gui, self.config)
        self.modes = ModeDetector(gui, self.config)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.gui!r}, {self.config!r})"

    # Input
    def press(self, key: str) -> None:
        """Press ``key`` after the configured key delay.

        ``key`` is something like ``"w"`` or ``"<space>"``. Prefer passing a
        value from :attr:`keys` over a literal.
        """
        self.dispatcher.press(key)

    def type_content(self, content: str) -> None:
        self.dispatcher.type_content(content)

    def wait(self, seconds: float) -> None:
        """Give the application time to process something before continuing."""
        self.dispatcher.wait(seconds)

    # Diagnostics
    def log(self, message: str) -> None:
        """Log ``message`` here and in the application's own log."""
        logger.info(message)
        self.gui.log_ui(message)

    def log_ui(self, message: str) -> None:
        self.gui.log_ui(message)

    def fail(self, message: str) -> t.NoReturn:
        """Fail the test right away, without polling."""
        raise ManualFailure(message)

    def shell(self) -> Shell:
        """Return the handle for emulating background activity."""
        if self._shell is None:
            self.fail("This TestDriver was created without a shell")
        return self._shell

    # Views
    def views(self) -> Views:
        """Return the entry point for view assertions."""
        return Views(self)

    # Modes
    def in_list_context(self) -> None:
        self.modes.in_list_context()

    def in_confirm(self) -> None:
        self.modes.in_confirm()

    def in_prompt(self) -> None:
        self.modes.in_prompt()

    def in_alert(self) -> None:
        self.modes.in_alert()

    def in_menu(self) -> None:
        self.modes.in_menu()

    def in_commit_message_panel(self) -> None:
        self.modes.in_commit_message_panel()

    def not_in_popup(self) -> None:
        self.modes.not_in_popup()

    def current_window_name(self, expected_window_name: str) -> None:
        self.modes.current_window_name(expected_window_name)

    # Lists
    def navigate_to_list_item(self, matcher: Matcher) -> None:
        """Select the single visible row matching ``matcher``.

        See :func:`tuidriver.navigation.navigate_to_list_item`.
        """
        navigation.navigate_to_list_item(self, matcher)

    # Popups
    def expect_confirmation(self) -> ConfirmationAsserter:
        self.in_confirm()
        return ConfirmationAsserter(self)

    def expect_prompt(self) -> PromptAsserter:
        self.in_prompt()
        return PromptAsserter(self)

    def expect_alert(self) -> AlertAsserter:
        self.in_alert()
        return AlertAsserter(self)

    def expect_menu(self) -> MenuAsserter:
        self.in_menu()
        return MenuAsserter(self)

    def expect_commit_message_panel(self) -> CommitMessagePanelAsserter:
        self.in_commit_message_panel()
        return CommitMessagePanelAsserter(self)

    # Workflows
    def continue_merge(self) -> None:
        """Open the rebase options menu and pick ``continue``."""
        self.views().current().press(self.keys.create_rebase_options_menu)

        self.expect_menu().title(equals(REBASE_OPTIONS_TITLE)).select(
            contains("continue"),
        ).confirm()

    def continue_rebase(self) -> None:
        self.continue_merge()
