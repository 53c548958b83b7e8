"""Conftest.py (root-level).

We keep this in root pytest fixtures in pytest's doctest plugin to be available, as well
as avoiding conftest.py from being included in the wheel, in addition to pytest_plugin
for pytester only being available via the root directory.

See "pytest_plugins in non-top-level conftest files" in
https://docs.pytest.org/en/stable/deprecations.html
"""

from __future__ import annotations

import typing as t

import pytest
from _pytest.doctest import DoctestItem

from tuidriver.test.fake import FakeGui, FakeView

if t.TYPE_CHECKING:
    from tuidriver.driver import TestDriver

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def add_doctest_fixtures(
    request: pytest.FixtureRequest,
    doctest_namespace: dict[str, t.Any],
) -> None:
    """Configure doctest fixtures for pytest-doctest.

    ``test_driver`` is focused on a ``files`` list showing ``apple``,
    ``banana`` and ``cherry`` with the first row selected.
    """
    if isinstance(request._pyfuncitem, DoctestItem):
        fake_gui: FakeGui = request.getfixturevalue("fake_gui")
        fake_gui.view("files").lines = ["apple", "banana", "cherry"]
        test_driver: TestDriver = request.getfixturevalue("test_driver")
        doctest_namespace["FakeGui"] = FakeGui
        doctest_namespace["FakeView"] = FakeView
        doctest_namespace["fake_gui"] = fake_gui
        doctest_namespace["test_driver"] = test_driver
        doctest_namespace["tmp_path"] = request.getfixturevalue("tmp_path")
        doctest_namespace["request"] = request
