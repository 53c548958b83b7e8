"""Timing configuration threaded into the retry engine and input dispatcher.

tuidriver.config
~~~~~~~~~~~~~~~~

The defaults come from :mod:`tuidriver.test.constants`, which reads them once
from the environment. Nothing below reads those constants at call time. Code
that polls or presses keys receives a :class:`DriverConfig` explicitly.
"""

from __future__ import annotations

import dataclasses
import math
import typing as t

from tuidriver.test.constants import (
    KEY_DELAY_SECONDS,
    RETRY_INTERVAL_SECONDS,
    RETRY_TIMEOUT_SECONDS,
)

if t.TYPE_CHECKING:
    import sys

    if sys.version_info >= (3, 11):
        from typing import Self
    else:
        from typing_extensions import Self


@dataclasses.dataclass(frozen=True)
class DriverConfig:
    """Timing knobs for one test driver.

    Parameters
    ----------
    timeout : float
        Seconds a polled assertion may keep failing before the test fails.
    interval : float
        Seconds to sleep between poll attempts.
    key_delay : float
        Seconds to wait before each key press is delivered.

    Examples
    --------
    >>> config = DriverConfig(timeout=2.0, interval=0.1, key_delay=0.0)
    >>> config.timeout
    2.0

    Copies with one knob changed:

    >>> config.with_timeout(0.5).timeout
    0.5
    >>> config.with_key_delay(0.02).key_delay
    0.02
    >>> config.interval
    0.1

    Negative values are rejected:

    >>> DriverConfig(timeout=-1)
    Traceback (most recent call last):
        ...
    ValueError: timeout must be a finite, non-negative number, got -1

    So are values that would never let a wait end:

    >>> DriverConfig(timeout=float("nan"))
    Traceback (most recent call last):
        ...
    ValueError: timeout must be a finite, non-negative number, got nan
    """

    timeout: float = RETRY_TIMEOUT_SECONDS
    interval: float = RETRY_INTERVAL_SECONDS
    key_delay: float = KEY_DELAY_SECONDS

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if not math.isfinite(value) or value < 0:
                msg = (
                    f"{field.name} must be a finite, non-negative number, got {value}"
                )
                raise ValueError(msg)

    def with_timeout(self, timeout: float) -> Self:
        """Return a copy with a different global timeout."""
        return dataclasses.replace(self, timeout=timeout)

    def with_interval(self, interval: float) -> Self:
        """Return a copy with a different poll interval."""
        return dataclasses.replace(self, interval=interval)

    def with_key_delay(self, key_delay: float) -> Self:
        """Return a copy with a different inter-key delay."""
        return dataclasses.replace(self, key_delay=key_delay)
