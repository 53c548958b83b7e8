"""Tests for tuidriver.navigation."""

from __future__ import annotations

import typing as t

import pytest

from tuidriver import exc
from tuidriver.keybindings import KeybindingConfig
from tuidriver.matcher import Matcher, contains, equals, matches_regex
from tuidriver.navigation import find_unique_match
from tuidriver.test.fake import FakeView

if t.TYPE_CHECKING:
    from tuidriver.config import DriverConfig
    from tuidriver.driver import TestDriver
    from tuidriver.test.fake import FakeGui

FRUIT = ["apple", "banana", "cherry"]


@pytest.fixture
def files(fake_gui: FakeGui) -> FakeView:
    """Return the focused ``files`` list, showing :data:`FRUIT`."""
    view = fake_gui.view("files")
    view.lines = list(FRUIT)
    return view


class NavigationFixture(t.NamedTuple):
    """Test fixture for navigating between rows."""

    test_id: str
    lines: list[str]
    selected: int
    matcher: Matcher
    expected_keys: list[str]
    expected_idx: int


NAVIGATION_FIXTURES: list[NavigationFixture] = [
    NavigationFixture(
        test_id="down_two_rows",
        lines=FRUIT,
        selected=0,
        matcher=contains("cherry"),
        expected_keys=["<down>", "<down>"],
        expected_idx=2,
    ),
    NavigationFixture(
        test_id="already_selected",
        lines=FRUIT,
        selected=1,
        matcher=contains("banana"),
        expected_keys=[],
        expected_idx=1,
    ),
    NavigationFixture(
        test_id="up_two_rows",
        lines=FRUIT,
        selected=2,
        matcher=equals("apple"),
        expected_keys=["<up>", "<up>"],
        expected_idx=0,
    ),
    NavigationFixture(
        test_id="up_one_row_regex",
        lines=["a1", "b22", "c333", "d4444"],
        selected=3,
        matcher=matches_regex(r"^c\d+$"),
        expected_keys=["<up>"],
        expected_idx=2,
    ),
    NavigationFixture(
        test_id="long_list",
        lines=[f"commit {i:02d}" for i in range(20)],
        selected=3,
        matcher=contains("commit 17"),
        expected_keys=["<down>"] * 14,
        expected_idx=17,
    ),
]


@pytest.mark.parametrize(
    list(NavigationFixture._fields),
    NAVIGATION_FIXTURES,
    ids=[f.test_id for f in NAVIGATION_FIXTURES],
)
def test_navigate_to_list_item(
    test_driver: TestDriver,
    fake_gui: FakeGui,
    test_id: str,
    lines: list[str],
    selected: int,
    matcher: Matcher,
    expected_keys: list[str],
    expected_idx: int,
) -> None:
    """Presses one key per row of distance, all in one direction."""
    view = fake_gui.view("files")
    view.lines = list(lines)
    view.selected_line_idx = selected

    test_driver.navigate_to_list_item(matcher)

    assert fake_gui.keys == expected_keys
    assert len(fake_gui.keys) == abs(expected_idx - selected)
    assert view.selected_line_idx == expected_idx


def test_navigate_no_match_fails_after_timeout(
    test_driver: TestDriver,
    files: FakeView,
    fake_gui: FakeGui,
    driver_config: DriverConfig,
) -> None:
    """The failure names the matcher and dumps every visible line."""
    with pytest.raises(exc.WaitTimeout) as excinfo:
        test_driver.navigate_to_list_item(contains("durian"))

    message = str(excinfo.value)
    assert message == (
        "Could not find item matching: contains 'durian'. Lines:\napple\nbanana\ncherry"
    )
    assert excinfo.value.elapsed >= driver_config.timeout
    assert fake_gui.keys == []


def test_navigate_ambiguous_match_fails(
    test_driver: TestDriver,
    files: FakeView,
    fake_gui: FakeGui,
    driver_config: DriverConfig,
) -> None:
    """Two matches fail through the same timeout path, listing both lines."""
    with pytest.raises(exc.WaitTimeout) as excinfo:
        test_driver.navigate_to_list_item(contains("an") | contains("ch"))

    assert str(excinfo.value) == (
        "Found 2 matches for `contains 'an' or contains 'ch'`, "
        "expected only a single match. Matching lines:\nbanana\ncherry"
    )
    assert excinfo.value.attempts > 1
    assert excinfo.value.elapsed >= driver_config.timeout
    assert fake_gui.keys == []


def test_navigate_waits_for_list_context(
    test_driver: TestDriver,
    fake_gui: FakeGui,
) -> None:
    """Navigation starts once a list is focused."""
    fake_gui.push_popup(FakeView("status"))
    fake_gui.after_polls(3, lambda gui: gui.pop_popup())
    fake_gui.view("files").lines = list(FRUIT)

    test_driver.navigate_to_list_item(contains("banana"))

    assert fake_gui.keys == ["<down>"]


def test_navigate_fails_outside_list_context(
    test_driver: TestDriver,
    fake_gui: FakeGui,
) -> None:
    """Never reaching a list is a precondition failure."""
    fake_gui.focus(FakeView("status", ["banana"]))

    with pytest.raises(
        exc.WaitTimeout,
        match="Expected current context to be a list context, but got status",
    ):
        test_driver.navigate_to_list_item(contains("banana"))


def test_navigate_waits_for_row_to_render(
    test_driver: TestDriver,
    files: FakeView,
    fake_gui: FakeGui,
) -> None:
    """A row that appears after some polls is found without sleeping in the test."""

    def add_row(gui: FakeGui) -> None:
        gui.view("files").lines.append("durian")

    fake_gui.after_polls(4, add_row)

    test_driver.navigate_to_list_item(contains("durian"))

    assert fake_gui.keys == ["<down>"] * 3
    assert files.selected_line_idx == 3


def test_navigate_fails_when_selection_does_not_move(
    test_driver: TestDriver,
    files: FakeView,
    fake_gui: FakeGui,
) -> None:
    """A list that ignores movement keys fails the selected line check."""
    fake_gui.keybindings = KeybindingConfig(select_next_item="<nope>")

    with pytest.raises(exc.WaitTimeout) as excinfo:
        test_driver.navigate_to_list_item(contains("cherry"))

    assert str(excinfo.value) == (
        "Unexpected selected line in view 'files'. "
        "Expected selected line to contains 'cherry', but got 'apple'"
    )
    assert fake_gui.keys == ["<down>", "<down>"]


def test_find_unique_match_empty_lines() -> None:
    """An empty viewport reports no match with an empty dump."""
    assert find_unique_match([], contains("x")) == (
        -1,
        "Could not find item matching: contains 'x'. Lines:\n",
    )

