"""Matching rules for exception patterns.

A pattern is built from a raw string and is exactly one of three kinds:

- ``regex:<expr>`` compiles ``<expr>`` as a regular expression and matches anywhere in
  the candidate name (``re.search`` semantics).
- A string containing ``*`` or ``?`` is a wildcard pattern, matched against the whole name.
- Anything else is an exact pattern that only matches an identical name.

Regex patterns are deliberately more permissive than wildcard and exact patterns, which
never match a substring.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from dir2tree.exceptions import PatternParseError

REGEX_PREFIX = "regex:"
WILDCARD_CHARS = ("*", "?")


def has_wildcard(text: str) -> bool:
    """Return True if ``text`` contains a ``*`` or ``?`` wildcard character."""
    return any(char in text for char in WILDCARD_CHARS)


def wildcard_match(pattern: str, text: str) -> bool:
    """Match ``text`` against a glob-style ``pattern`` anchored at both ends.

    ``*`` matches any run of characters (including none), ``?`` matches exactly one
    character and every other character matches itself.

    The matcher backtracks: at each ``*`` every possible consumption length is tried.
    Its worst case is exponential in the number of ``*`` characters, which is acceptable
    for filename-sized inputs.

    Example:
        >>> wildcard_match("*.log", "error.log")
        True
        >>> wildcard_match("*.log", "error.log.bak")
        False
        >>> wildcard_match("file?.txt", "file1.txt")
        True
        >>> wildcard_match("file?.txt", "file.txt")
        False
    """
    return _match_from(pattern, 0, text, 0)


def _match_from(pattern: str, p: int, text: str, t: int) -> bool:
    while p < len(pattern):
        char = pattern[p]
        if char == "*":
            return any(_match_from(pattern, p + 1, text, k) for k in range(t, len(text) + 1))
        if t >= len(text):
            return False
        if char != "?" and char != text[t]:
            return False
        p += 1
        t += 1
    return t == len(text)


class Pattern(ABC):
    """A single compiled matching rule.

    Use ``Pattern.from_string`` to build the right kind of pattern from a raw string.

    Example:
        >>> Pattern.from_string("keep.secret").matches("keep.secret")
        True
        >>> Pattern.from_string("*.secret").matches("x.secret")
        True
        >>> Pattern.from_string("regex:^test_").matches("test_main.py")
        True
    """

    @abstractmethod
    def matches(self, candidate: str) -> bool:
        """Return True if ``candidate`` satisfies this pattern."""
        pass

    @staticmethod
    def from_string(raw: str) -> "Pattern":
        """Parse a raw pattern string.

        Args:
            raw: The pattern as supplied by the user.

        Returns:
            A RegexPattern, WildcardPattern or ExactPattern.

        Raises:
            PatternParseError: If a ``regex:`` pattern does not compile.
        """
        if raw.startswith(REGEX_PREFIX):
            try:
                return RegexPattern(re.compile(raw[len(REGEX_PREFIX) :]))
            except re.error as e:
                raise PatternParseError(raw, str(e)) from e
        if has_wildcard(raw):
            return WildcardPattern(raw)
        return ExactPattern(raw)


@dataclass(frozen=True)
class ExactPattern(Pattern):
    """Matches only a name identical to ``text``."""

    text: str

    def matches(self, candidate: str) -> bool:
        return candidate == self.text


@dataclass(frozen=True)
class WildcardPattern(Pattern):
    """Matches whole names against a glob-style ``glob`` using ``*`` and ``?``."""

    glob: str

    def matches(self, candidate: str) -> bool:
        return wildcard_match(self.glob, candidate)


@dataclass(frozen=True)
class RegexPattern(Pattern):
    """Matches names in which ``regex`` finds a match anywhere."""

    regex: re.Pattern[str]

    def matches(self, candidate: str) -> bool:
        return self.regex.search(candidate) is not None


def parse_exception_patterns(raws: Iterable[str]) -> Tuple[List[Pattern], List[PatternParseError]]:
    """Parse exception patterns, collecting failures instead of stopping at the first one.

    Args:
        raws: Raw pattern strings in evaluation order.

    Returns:
        A pair of (patterns, errors). Patterns keep the order of ``raws`` with failed
        entries left out; errors hold one PatternParseError per failed entry.

    Example:
        >>> patterns, errors = parse_exception_patterns(["regex:[", "*.md"])
        >>> patterns
        [WildcardPattern(glob='*.md')]
        >>> errors[0].pattern
        'regex:['
    """
    patterns: List[Pattern] = []
    errors: List[PatternParseError] = []
    for raw in raws:
        try:
            patterns.append(Pattern.from_string(raw))
        except PatternParseError as e:
            errors.append(e)
    return patterns, errors
