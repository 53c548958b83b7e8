"""Helpers for testing with and testing tuidriver itself.

- :mod:`tuidriver.test.constants`: timing defaults, read from the environment
- :mod:`tuidriver.test.retry`: the polling engine every assertion runs on
- :mod:`tuidriver.test.fake`: an in-memory application to drive
"""
