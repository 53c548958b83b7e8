"""Named predicates over a single rendered line.

tuidriver.matcher
~~~~~~~~~~~~~~~~~

A :class:`Matcher` pairs a test function with a human readable name. The name
is what shows up in failure messages. It should read naturally after
"Expected line to", e.g. ``contains 'cherry'``.

Examples
--------
>>> contains("cherry").test("3 cherry pie")
True
>>> equals("apple").test("apple pie")
False
>>> matches_regex(r"^\\d+ commits?$").test("12 commits")
True

Matchers compose:

>>> m = contains("branch") & ~contains("remote")
>>> m.name
"contains 'branch' and not (contains 'remote')"
>>> m.test("branch main"), m.test("remote branch origin/main")
(True, False)
"""

from __future__ import annotations

import dataclasses
import logging
import re
import typing as t

logger = logging.getLogger(__name__)

if t.TYPE_CHECKING:
    from collections.abc import Callable


@dataclasses.dataclass(frozen=True)
class Matcher:
    """A reusable, immutable line predicate with a display name.

    Parameters
    ----------
    name : str
        Description used in diagnostics.
    predicate : callable
        Pure function from a line to ``bool``.

    Examples
    --------
    >>> starts_with_star = Matcher("starts with '*'", lambda line: line.startswith("*"))
    >>> starts_with_star
    Matcher(starts with '*')
    >>> starts_with_star.test("* main")
    True
    >>> starts_with_star.test(42)
    False
    """

    name: str
    predicate: Callable[[str], bool] = dataclasses.field(compare=False)

    def test(self, line: t.Any) -> bool:
        """Return whether ``line`` satisfies this matcher.

        Non-string values are compared by their ``str()``.
        """
        if not isinstance(line, str):
            line = str(line)
        return bool(self.predicate(line))

    def __and__(self, other: Matcher) -> Matcher:
        return Matcher(
            f"{self.name} and {other.name}",
            lambda line: self.test(line) and other.test(line),
        )

    def __or__(self, other: Matcher) -> Matcher:
        return Matcher(
            f"{self.name} or {other.name}",
            lambda line: self.test(line) or other.test(line),
        )

    def __invert__(self) -> Matcher:
        return Matcher(f"not ({self.name})", lambda line: not self.test(line))

    def __repr__(self) -> str:
        return f"Matcher({self.name})"


def equals(expected: str) -> Matcher:
    """Match a line that is exactly ``expected``.

    >>> equals("Rebase Options").name
    "equals 'Rebase Options'"
    """
    return Matcher(f"equals '{expected}'", lambda line: line == expected)


def contains(expected: str) -> Matcher:
    """Match a line that contains ``expected``.

    >>> contains("continue").test("continue rebase")
    True
    """
    return Matcher(f"contains '{expected}'", lambda line: expected in line)


def does_not_contain(unexpected: str) -> Matcher:
    """Match a line that does not contain ``unexpected``.

    >>> does_not_contain("error").test("all good")
    True
    """
    return Matcher(
        f"does not contain '{unexpected}'",
        lambda line: unexpected not in line,
    )


def matches_regex(pattern: str | re.Pattern[str]) -> Matcher:
    """Match a line where ``pattern`` is found anywhere (:func:`re.search`).

    The pattern is compiled here, so an invalid pattern fails the test at the
    point the matcher is built.

    >>> matches_regex(r"[0-9a-f]{7}").name
    "matches regular expression '[0-9a-f]{7}'"
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    return Matcher(
        f"matches regular expression '{compiled.pattern}'",
        lambda line: compiled.search(line) is not None,
    )


def anything() -> Matcher:
    """Match every line.

    >>> anything().test("")
    True
    """
    return Matcher("anything", lambda line: True)
