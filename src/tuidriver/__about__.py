"""Metadata package for tuidriver."""

from __future__ import annotations

__title__ = "tuidriver"
__package_name__ = "tuidriver"
__version__ = "0.1.0"
__description__ = "Polling driver and assertions for end-to-end tests of terminal UIs"
__author__ = "tuidriver contributors"
__license__ = "MIT"
__copyright__ = "Copyright 2026- tuidriver contributors"
