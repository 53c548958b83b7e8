"""Asserters returned by the ``expect_*`` operations of :class:`~tuidriver.driver.TestDriver`.

Each asserter re-checks that its popup is still focused before every check or
action. Chained calls therefore fail loudly if the popup closed early, rather
than acting on whatever view replaced it.
"""

from __future__ import annotations

import logging
import typing as t

logger = logging.getLogger(__name__)

if t.TYPE_CHECKING:
    import sys

    from tuidriver.driver import TestDriver
    from tuidriver.matcher import Matcher
    from tuidriver.views import ViewDriver

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self


class PopupAsserter:
    """Common surface of every popup: title, content, confirm and cancel."""

    def __init__(self, driver: TestDriver) -> None:
        self.driver = driver

    def check_mode(self) -> None:
        """Wait until this kind of popup is focused."""
        raise NotImplementedError

    def _view(self) -> ViewDriver:
        self.check_mode()
        return self.driver.views().current()

    def title(self, expected: Matcher) -> Self:
        self._view().title(expected)
        return self

    def content(self, expected: Matcher) -> Self:
        self._view().content(expected)
        return self

    def confirm(self) -> None:
        self._view().press(self.driver.keys.confirm)

    def cancel(self) -> None:
        self._view().press(self.driver.keys.cancel)


class ConfirmationAsserter(PopupAsserter):
    """A yes/no question.

    Examples
    --------
    >>> from tuidriver.matcher import contains, equals
    >>> from tuidriver.test.fake import FakeView
    >>> _ = test_driver.gui.push_popup(FakeView(
    ...     "confirmation", ["Are you sure?"], title="Discard changes",
    ... ))
    >>> test_driver.expect_confirmation().title(equals("Discard changes")).content(
    ...     contains("sure"),
    ... ).confirm()
    >>> test_driver.gui.keys
    ['<enter>']
    """

    def check_mode(self) -> None:
        self.driver.in_confirm()


class AlertAsserter(PopupAsserter):
    """A message the user can only acknowledge."""

    def check_mode(self) -> None:
        self.driver.in_alert()


class PromptAsserter(PopupAsserter):
    """A popup with an editable text field."""

    def check_mode(self) -> None:
        self.driver.in_prompt()

    def initial_text(self, expected: Matcher) -> Self:
        """Assert the text the prompt opened with."""
        return self.content(expected)

    def type(self, value: str) -> Self:
        self.check_mode()
        self.driver.type_content(value)
        return self

    def clear(self) -> Self:
        self._view().press(self.driver.keys.clear_prompt)
        return self


class MenuAsserter(PopupAsserter):
    """A list of options, one of which gets selected and confirmed."""

    def check_mode(self) -> None:
        self.driver.in_menu()

    def select(self, option: Matcher) -> Self:
        """Move the menu selection onto ``option``."""
        self.check_mode()
        self.driver.navigate_to_list_item(option)
        return self

    def lines(self, *matchers: Matcher) -> Self:
        self._view().lines(*matchers)
        return self


class CommitMessagePanelAsserter(PopupAsserter):
    """The panel where a commit message is written."""

    def check_mode(self) -> None:
        self.driver.in_commit_message_panel()

    def initial_text(self, expected: Matcher) -> Self:
        return self.content(expected)

    def type(self, value: str) -> Self:
        self.check_mode()
        self.driver.type_content(value)
        return self

    def clear(self) -> Self:
        self._view().press(self.driver.keys.clear_prompt)
        return self

    def confirm(self) -> None:
        self._view().press(self.driver.keys.submit_commit_message)
