"""Wait for the application to be in a given mode.

Each detector wraps one single-shot predicate about the focused context in
:func:`~tuidriver.test.retry.assert_with_retries`. Detectors only read state.
When the application is already in the expected mode, they return after the
first poll.
"""

from __future__ import annotations

import logging
import typing as t

from tuidriver.config import DriverConfig
from tuidriver.constants import (
    COMMIT_MESSAGE_VIEW,
    CONFIRMATION_VIEW,
    MENU_VIEW,
    POPUP_VIEWS,
)
from tuidriver.test.retry import assert_with_retries

logger = logging.getLogger(__name__)

if t.TYPE_CHECKING:
    from tuidriver.gui import GuiDriver, View


class ModeDetector:
    """Named checks on the focused context.

    Examples
    --------
    >>> from tuidriver.test.fake import FakeGui, FakeView
    >>> gui = FakeGui(FakeView("confirmation", title="Discard changes?"))
    >>> modes = ModeDetector(gui, DriverConfig(timeout=0.05, interval=0.01))
    >>> modes.in_confirm()
    >>> modes.in_prompt()
    Traceback (most recent call last):
        ...
    tuidriver.exc.WaitTimeout: Expected prompt popup to be focused
    """

    def __init__(self, gui: GuiDriver, config: DriverConfig | None = None) -> None:
        self.gui = gui
        self.config = config if config is not None else DriverConfig()

    def _current_view(self) -> View:
        return self.gui.current_context().view

    def in_list_context(self) -> None:
        """Wait until the focused context exposes list rows."""

        def check() -> tuple[bool, str]:
            context = self.gui.current_context()
            return (
                context.as_list() is not None,
                "Expected current context to be a list context, "
                f"but got {context.key}",
            )

        assert_with_retries(check, self.config)

    def in_confirm(self) -> None:
        """Wait until a non-editable confirmation popup is focused."""

        def check() -> tuple[bool, str]:
            view = self._current_view()
            return (
                view.name == CONFIRMATION_VIEW and not view.editable,
                "Expected confirmation popup to be focused",
            )

        assert_with_retries(check, self.config)

    def in_prompt(self) -> None:
        """Wait until an editable confirmation popup is focused."""

        def check() -> tuple[bool, str]:
            view = self._current_view()
            return (
                view.name == CONFIRMATION_VIEW and view.editable,
                "Expected prompt popup to be focused",
            )

        assert_with_retries(check, self.config)

    def in_alert(self) -> None:
        """Wait until an alert is focused.

        Alerts render into the same view as confirmations.
        """

        def check() -> tuple[bool, str]:
            view = self._current_view()
            return (
                view.name == CONFIRMATION_VIEW and not view.editable,
                "Expected alert popup to be focused",
            )

        assert_with_retries(check, self.config)

    def in_menu(self) -> None:
        """Wait until a popup menu is focused."""
        assert_with_retries(
            lambda: (
                self._current_view().name == MENU_VIEW,
                "Expected popup menu to be focused",
            ),
            self.config,
        )

    def in_commit_message_panel(self) -> None:
        """Wait until the commit message panel is focused."""
        assert_with_retries(
            lambda: (
                self._current_view().name == COMMIT_MESSAGE_VIEW,
                "Expected commit message panel to be focused",
            ),
            self.config,
        )

    def not_in_popup(self) -> None:
        """Wait until no popup view is focused."""

        def check() -> tuple[bool, str]:
            view_name = self._current_view().name
            return (
                view_name not in POPUP_VIEWS,
                f"Unexpected popup view present: {view_name} view",
            )

        assert_with_retries(check, self.config)

    def current_window_name(self, expected_window_name: str) -> None:
        """Wait until the focused view is named ``expected_window_name``."""

        def check() -> tuple[bool, str]:
            actual = self._current_view().name
            return (
                actual == expected_window_name,
                f"Expected current window name to be '{expected_window_name}', "
                f"but got '{actual}'",
            )

        assert_with_retries(check, self.config)
