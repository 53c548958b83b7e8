"""Tests for tuidriver.test."""
