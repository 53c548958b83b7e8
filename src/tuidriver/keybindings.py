"""Map logical actions to the physical keys the application expects.

Tests should press ``keys.confirm`` rather than ``"<enter>"`` so that a
change to the application's default bindings only needs updating here.
"""

from __future__ import annotations

import dataclasses
import logging

from tuidriver.exc import UnknownKeybinding

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class KeybindingConfig:
    """Keys bound to each logical action.

    Examples
    --------
    >>> keys = KeybindingConfig()
    >>> keys.select_next_item
    '<down>'
    >>> keys.lookup("confirm")
    '<enter>'

    Override individual bindings:

    >>> vim = KeybindingConfig(select_next_item="j", select_previous_item="k")
    >>> vim.lookup("select_previous_item")
    'k'

    >>> keys.lookup("launch_rockets")
    Traceback (most recent call last):
        ...
    tuidriver.exc.UnknownKeybinding: No keybinding for action: launch_rockets
    """

    select_next_item: str = "<down>"
    select_previous_item: str = "<up>"
    confirm: str = "<enter>"
    cancel: str = "<esc>"
    create_rebase_options_menu: str = "m"
    submit_commit_message: str = "<enter>"
    clear_prompt: str = "<c-u>"

    def lookup(self, action: str) -> str:
        """Return the key bound to ``action``.

        Raises
        ------
        UnknownKeybinding
            If no such action exists.
        """
        if action not in {field.name for field in dataclasses.fields(self)}:
            raise UnknownKeybinding(action)
        key: str = getattr(self, action)
        return key
