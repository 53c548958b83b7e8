"""Tests for tuidriver."""
