"""Protocols for the application under test.

tuidriver.gui
~~~~~~~~~~~~~

tuidriver never renders anything itself. It reads what the application
reports through these protocols and sends it key presses. Any object with the
right shape works; :class:`tuidriver.test.fake.FakeGui` is an in-memory one.

Only some contexts behave like lists. Rather than downcasting, callers ask
with :meth:`Context.as_list`, which returns ``None`` when the context has no
rows to select.
"""

from __future__ import annotations

import typing as t
from typing import Protocol


class View(Protocol):
    """A rendered region of the screen."""

    @property
    def name(self) -> str:
        """Identity of the view, e.g. ``"confirmation"`` or ``"files"``."""
        ...

    @property
    def title(self) -> str:
        """Title drawn on the view's frame."""
        ...

    @property
    def editable(self) -> bool:
        """Whether typed characters go into the view's text."""
        ...

    def buffer_lines(self) -> list[str]:
        """Return the lines currently rendered in the view."""
        ...


class ListContext(Protocol):
    """List capability of a context: visible rows and a selection."""

    def view_buffer_lines(self) -> list[str]:
        """Return the rows currently rendered in the viewport."""
        ...

    def selected_line_idx(self) -> int:
        """Return the index of the selected row within the visible rows."""
        ...


class Context(Protocol):
    """The focused logical region of the UI."""

    @property
    def key(self) -> str:
        """Key identifying the context, used in diagnostics."""
        ...

    @property
    def view(self) -> View:
        """The view this context renders into."""
        ...

    def as_list(self) -> ListContext | None:
        """Return the list capability, or ``None`` if this is not a list."""
        ...


class GuiDriver(Protocol):
    """Capabilities tuidriver consumes from the application under test."""

    def press_key(self, key: str) -> None:
        """Inject one key event, e.g. ``"a"`` or ``"<enter>"``."""
        ...

    def current_context(self) -> Context:
        """Return a fresh snapshot of the focused context."""
        ...

    def log_ui(self, message: str) -> None:
        """Forward a message into the application's own log."""
        ...


@t.runtime_checkable
class ViewLookup(Protocol):
    """Optional capability: find a view by name, focused or not.

    Needed only by :meth:`tuidriver.views.Views.by_name`. A
    :class:`GuiDriver` without it can still be driven through the focused
    view.
    """

    def context_for_view(self, name: str) -> Context | None:
        """Return the context rendering into view ``name``, if any."""
        ...


if t.TYPE_CHECKING:
    from collections.abc import Callable

    #: Returns the context a view asserter should inspect right now
    ContextGetter = Callable[[], Context]
