"""tuidriver, a polling driver and assertion layer for terminal UI tests."""

from .__about__ import (
    __author__,
    __copyright__,
    __description__,
    __license__,
    __package_name__,
    __title__,
    __version__,
)
from .config import DriverConfig
from .driver import TestDriver
from .keybindings import KeybindingConfig
from .matcher import (
    Matcher,
    anything,
    contains,
    does_not_contain,
    equals,
    matches_regex,
)
from .shell import Shell

__all__ = (
    "DriverConfig",
    "KeybindingConfig",
    "Matcher",
    "Shell",
    "TestDriver",
    "__author__",
    "__copyright__",
    "__description__",
    "__license__",
    "__package_name__",
    "__title__",
    "__version__",
    "anything",
    "contains",
    "does_not_contain",
    "equals",
    "matches_regex",
)
