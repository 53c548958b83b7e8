"""Assertions and actions on a single view.

:class:`ViewDriver` re-reads its view through a getter on every poll, so an
asserter obtained before a key press still sees the state after it.
"""

from __future__ import annotations

import logging
import typing as t

from tuidriver.gui import ViewLookup
from tuidriver.test.retry import assert_with_retries

logger = logging.getLogger(__name__)

if t.TYPE_CHECKING:
    import sys

    from tuidriver.driver import TestDriver
    from tuidriver.gui import Context, ContextGetter
    from tuidriver.matcher import Matcher

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self


def _format_lines(lines: list[str]) -> str:
    return "\n".join(lines)


class ViewDriver:
    """Assertions and input scoped to one view.

    Parameters
    ----------
    driver : :class:`~tuidriver.driver.TestDriver`
        Driver the assertions and input go through.
    get_context : callable
        Returns the context to inspect. It is called again on every poll.
    name : str, optional
        Name of the view this driver is bound to. ``None`` means whichever
        view is focused.
    """

    def __init__(
        self,
        driver: TestDriver,
        get_context: ContextGetter,
        name: str | None = None,
    ) -> None:
        self.driver = driver
        self.get_context = get_context
        self.name = name

    def _context(self) -> Context:
        return self.get_context()

    def _assert(self, check: t.Callable[[], tuple[bool, str]]) -> Self:
        assert_with_retries(check, self.driver.config)
        return self

    def title(self, expected: Matcher) -> Self:
        """Assert the view's title."""

        def check() -> tuple[bool, str]:
            actual = self._context().view.title
            return (
                expected.test(actual),
                "Unexpected view title. "
                f"Expected view title to {expected.name}, but got '{actual}'",
            )

        return self._assert(check)

    def content(self, expected: Matcher) -> Self:
        """Assert the view's whole content, lines joined by newlines."""

        def check() -> tuple[bool, str]:
            view = self._context().view
            actual = _format_lines(view.buffer_lines())
            return (
                expected.test(actual),
                f"Unexpected content in view '{view.name}'. "
                f"Expected content to {expected.name}, but got:\n{actual}",
            )

        return self._assert(check)

    def selected_line(self, expected: Matcher) -> Self:
        """Assert the row under the selection."""

        def check() -> tuple[bool, str]:
            context = self._context()
            list_context = context.as_list()
            if list_context is None:
                return False, f"Expected view '{context.view.name}' to be a list"
            lines = list_context.view_buffer_lines()
            idx = list_context.selected_line_idx()
            if not 0 <= idx < len(lines):
                return (
                    False,
                    f"Selected line index {idx} is out of range in view "
                    f"'{context.view.name}' with {len(lines)} lines",
                )
            actual = lines[idx]
            return (
                expected.test(actual),
                f"Unexpected selected line in view '{context.view.name}'. "
                f"Expected selected line to {expected.name}, but got '{actual}'",
            )

        return self._assert(check)

    def selected_line_idx(self, expected: int) -> Self:
        """Assert the index of the selected row."""

        def check() -> tuple[bool, str]:
            context = self._context()
            list_context = context.as_list()
            if list_context is None:
                return False, f"Expected view '{context.view.name}' to be a list"
            actual = list_context.selected_line_idx()
            return (
                actual == expected,
                f"Expected selected line index to be {expected}, but got {actual}",
            )

        return self._assert(check)

    def lines(self, *matchers: Matcher) -> Self:
        """Assert the view renders exactly one line per matcher, in order."""

        def check() -> tuple[bool, str]:
            view = self._context().view
            actual = view.buffer_lines()
            if len(actual) != len(matchers):
                return (
                    False,
                    f"Expected {len(matchers)} lines in view '{view.name}', "
                    f"but got {len(actual)}:\n{_format_lines(actual)}",
                )
            for i, (line, matcher) in enumerate(zip(actual, matchers)):
                if not matcher.test(line):
                    return (
                        False,
                        f"Unexpected line {i} in view '{view.name}'. "
                        f"Expected line to {matcher.name}, but got '{line}'. "
                        f"Lines:\n{_format_lines(actual)}",
                    )
            return True, ""

        return self._assert(check)

    def contains_lines(self, *matchers: Matcher) -> Self:
        """Assert the matchers match a contiguous run of lines."""
        names = ", ".join(matcher.name for matcher in matchers)

        def check() -> tuple[bool, str]:
            view = self._context().view
            actual = view.buffer_lines()
            for start in range(len(actual) - len(matchers) + 1):
                window = actual[start : start + len(matchers)]
                if all(m.test(line) for m, line in zip(matchers, window)):
                    return True, ""
            return (
                False,
                f"Could not find consecutive lines in view '{view.name}' "
                f"matching: {names}. Lines:\n{_format_lines(actual)}",
            )

        return self._assert(check)

    def is_empty(self) -> Self:
        """Assert the view renders no lines."""

        def check() -> tuple[bool, str]:
            view = self._context().view
            actual = view.buffer_lines()
            return (
                not actual,
                f"Expected view '{view.name}' to be empty, "
                f"but got:\n{_format_lines(actual)}",
            )

        return self._assert(check)

    def is_focused(self) -> Self:
        """Assert this view is the focused one."""
        if self.name is None:
            return self

        def check() -> tuple[bool, str]:
            actual = self.driver.gui.current_context().view.name
            return (
                actual == self.name,
                f"Expected view '{self.name}' to be focused, but got '{actual}'",
            )

        return self._assert(check)

    def press(self, key: str) -> Self:
        self.driver.press(key)
        return self

    def press_enter(self) -> Self:
        return self.press(self.driver.keys.confirm)

    def press_escape(self) -> Self:
        return self.press(self.driver.keys.cancel)

    def select_next_item(self) -> Self:
        return self.press(self.driver.keys.select_next_item)

    def select_previous_item(self) -> Self:
        return self.press(self.driver.keys.select_previous_item)

    def navigate_to_line(self, matcher: Matcher) -> Self:
        """Move the selection onto the single row matching ``matcher``."""
        self.is_focused()
        self.driver.navigate_to_list_item(matcher)
        return self


class Views:
    """Entry point for view asserters.

    Examples
    --------
    >>> from tuidriver.matcher import contains
    >>> view = test_driver.views().current()
    >>> _ = view.lines(contains("apple"), contains("banana"), contains("cherry"))
    >>> _ = view.select_next_item().selected_line(contains("banana"))
    """

    def __init__(self, driver: TestDriver) -> None:
        self.driver = driver

    def current(self) -> ViewDriver:
        """Return an asserter that follows whichever view is focused."""
        return ViewDriver(self.driver, self.driver.gui.current_context)

    def by_name(self, name: str) -> ViewDriver:
        """Return an asserter bound to the view called ``name``.

        The application must also implement
        :class:`~tuidriver.gui.ViewLookup`.
        """
        gui = self.driver.gui
        if not isinstance(gui, ViewLookup):
            self.driver.fail(
                f"Cannot look up view '{name}': {type(gui).__name__} "
                "does not implement context_for_view",
            )
        lookup = gui

        def get_context() -> Context:
            context = lookup.context_for_view(name)
            if context is None:
                self.driver.fail(f"Could not find view '{name}'")
            return context

        return ViewDriver(self.driver, get_context, name=name)
