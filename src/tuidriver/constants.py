"""Constant variables for tuidriver."""

from __future__ import annotations

#: View shared by confirmation, alert and prompt popups
CONFIRMATION_VIEW = "confirmation"

#: View of popup menus
MENU_VIEW = "menu"

#: View of the commit message panel
COMMIT_MESSAGE_VIEW = "commitMessage"

#: Views that count as a popup being open
POPUP_VIEWS: frozenset[str] = frozenset(
    {MENU_VIEW, CONFIRMATION_VIEW, COMMIT_MESSAGE_VIEW},
)

#: Title of the menu opened by the create rebase options keybinding
REBASE_OPTIONS_TITLE = "Rebase Options"
