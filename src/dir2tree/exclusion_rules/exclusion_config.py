"""The include/exclude decision for a single directory entry."""

from dataclasses import dataclass, field
from typing import AbstractSet, FrozenSet, Iterable, Sequence, Tuple

from .base_rules import BaseExclusionRules
from .ignore_rules import matches_any_rule
from .patterns import Pattern


def should_exclude(
    name: str,
    manual_excludes: AbstractSet[str],
    ignore_rules: Iterable[str],
    exceptions: Sequence[Pattern],
) -> bool:
    """Decide whether an entry is hidden from the tree.

    The first decisive rule wins:

    1. An entry matching any exception pattern is always shown.
    2. An entry whose name is in ``manual_excludes`` is hidden. Only exact names
       match, so excluding ``.git`` does not hide ``.github``.
    3. An entry matching any ignore rule is hidden. Rules with ``*`` or ``?`` are
       anchored wildcards; other rules must equal the name.
    4. Everything else is shown.

    Example:
        >>> from dir2tree.exclusion_rules.patterns import Pattern
        >>> keep = [Pattern.from_string("keep.secret")]
        >>> should_exclude("keep.secret", set(), {"*.secret"}, keep)
        False
        >>> should_exclude("x.secret", set(), {"*.secret"}, keep)
        True
        >>> should_exclude(".github", {".git"}, set(), [])
        False
    """
    if any(pattern.matches(name) for pattern in exceptions):
        return False
    if name in manual_excludes:
        return True
    return matches_any_rule(name, ignore_rules)


@dataclass(frozen=True)
class ExclusionConfig(BaseExclusionRules):
    """Read-only exclusion settings for one render.

    Attributes:
        manual_excludes: Names excluded by exact match.
        ignore_rules: Rule strings loaded from ignore files and built-in defaults.
        exceptions: Patterns that force inclusion, evaluated in order.

    Example:
        >>> config = ExclusionConfig(manual_excludes=frozenset({"build"}))
        >>> config.exclude("build"), config.exclude("builder")
        (True, False)
    """

    manual_excludes: FrozenSet[str] = field(default_factory=frozenset)
    ignore_rules: FrozenSet[str] = field(default_factory=frozenset)
    exceptions: Tuple[Pattern, ...] = ()

    def exclude(self, name: str) -> bool:
        return should_exclude(name, self.manual_excludes, self.ignore_rules, self.exceptions)
