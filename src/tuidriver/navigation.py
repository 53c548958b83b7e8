"""Move a list selection onto the row matching a :class:`~tuidriver.matcher.Matcher`.

Only the rows currently rendered in the viewport are searched. A target that
has scrolled off screen is reported as not found; the navigator does not
scroll to look for it.

Once a single match is found, the number of key presses is computed from
that one snapshot. Each press is not re-checked against the screen. The
final selected-line assertion catches a list that did not move as expected.
"""

from __future__ import annotations

import logging
import typing as t

from tuidriver.test.retry import assert_with_retries

logger = logging.getLogger(__name__)

if t.TYPE_CHECKING:
    from tuidriver.driver import TestDriver
    from tuidriver.matcher import Matcher


def find_unique_match(lines: list[str], matcher: Matcher) -> tuple[int, str]:
    """Scan ``lines`` once for rows matching ``matcher``.

    Returns
    -------
    tuple[int, str]
        Index of the single match, or ``-1`` when there is none or several,
        along with the diagnostic for that case (empty on success).

    Examples
    --------
    >>> from tuidriver.matcher import contains
    >>> find_unique_match(["apple", "banana", "cherry"], contains("an"))
    (1, '')
    >>> print(find_unique_match(["apple", "banana"], contains("kiwi"))[1])
    Could not find item matching: contains 'kiwi'. Lines:
    apple
    banana
    >>> print(find_unique_match(["apple", "pineapple", "kiwi"], contains("apple"))[1])
    Found 2 matches for `contains 'apple'`, expected only a single match. Matching lines:
    apple
    pineapple
    """
    matches: list[str] = []
    match_index = -1
    for i, line in enumerate(lines):
        if matcher.test(line):
            matches.append(line)
            match_index = i

    if len(matches) > 1:
        return -1, (
            f"Found {len(matches)} matches for `{matcher.name}`, "
            "expected only a single match. Matching lines:\n" + "\n".join(matches)
        )
    if not matches:
        return -1, (
            f"Could not find item matching: {matcher.name}. Lines:\n"
            + "\n".join(lines)
        )
    return match_index, ""


def navigate_to_list_item(driver: TestDriver, matcher: Matcher) -> None:
    """Select the single visible row matching ``matcher`` in the focused list.

    1. Waits for the focused context to be a list.
    2. Polls the visible rows until exactly one matches. Zero and multiple
       matches are both retried until the global timeout, then fail with a
       dump of the rows involved.
    3. Presses "select next item" or "select previous item" once per row of
       distance, then asserts the selected row matches.

    Raises
    ------
    WaitTimeout
        If the context never became a list, no single row matched, or the
        selection did not land on the matching row.

    Examples
    --------
    >>> from tuidriver.matcher import contains
    >>> navigate_to_list_item(test_driver, contains("cherry"))
    >>> test_driver.gui.keys
    ['<down>', '<down>']
    """
    driver.in_list_context()

    context = driver.gui.current_context()
    list_context = context.as_list()
    if list_context is None:
        driver.fail(f"Current context {context.key} stopped being a list context")

    match_index = -1

    def check() -> tuple[bool, str]:
        nonlocal match_index
        match_index, message = find_unique_match(
            list_context.view_buffer_lines(),
            matcher,
        )
        return match_index != -1, message

    assert_with_retries(check, driver.config)

    selected_line_idx = list_context.selected_line_idx()
    view = driver.views().current()
    logger.debug(
        "Navigating from row %d to row %d (%s)",
        selected_line_idx,
        match_index,
        matcher.name,
    )

    if selected_line_idx < match_index:
        for _ in range(selected_line_idx, match_index):
            view.select_next_item()
    elif selected_line_idx > match_index:
        for _ in range(match_index, selected_line_idx):
            view.select_previous_item()

    view.selected_line(matcher)
