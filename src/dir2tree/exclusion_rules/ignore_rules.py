"""Exclusion rules loaded from ignore files such as .gitignore."""

from os import PathLike
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Sequence, Union

from dir2tree.types import PathType

from .base_rules import BaseExclusionRules
from .patterns import has_wildcard, wildcard_match

# Ignore files consulted when the caller does not name an explicit subset
KNOWN_IGNORE_FILES = (
    ".gitignore",
    ".dockerignore",
    ".npmignore",
    ".eslintignore",
    ".prettierignore",
    ".hgignore",
    ".terraformignore",
    ".helmignore",
    ".gcloudignore",
    ".cfignore",
    ".slugignore",
    ".pt",
)

# Version control and operating system artifacts hidden unless "show all" is requested
DEFAULT_EXCLUDES = (
    ".git",
    ".svn",
    ".hg",
    ".bzr",
    "_darcs",
    "CVS",
    ".DS_Store",
    "Thumbs.db",
    "desktop.ini",
)


def clean_rule_lines(lines: Iterable[str]) -> List[str]:
    """Turn raw ignore-file lines into rule strings.

    Lines are trimmed; blank lines and ``#`` comments are dropped and a trailing ``/``
    is stripped.

    Example:
        >>> clean_rule_lines(["# build output", "build/", "", "  *.log  "])
        ['build', '*.log']
    """
    rules = []
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        rules.append(line.rstrip("/"))
    return rules


def read_ignore_file(path: Path) -> List[str]:
    """Read the rule strings from one ignore file.

    A file that is absent or cannot be read or decoded contributes no rules.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []
    # Only "\n" ends a line; strip() removes the "\r" of CRLF endings
    return clean_rule_lines(content.split("\n"))


class IgnoreFileExclusionRules(BaseExclusionRules):
    """Exclusion rules made from the lines of ignore files.

    Rules are kept as a set of strings. A rule containing ``*`` or ``?`` is matched as an
    anchored wildcard against the entry name; any other rule must equal the name exactly.
    Rules from every loaded file are merged and duplicates collapse.

    Attributes:
        rules (FrozenSet[str]): The merged rule strings.

    Example:
        >>> rules = IgnoreFileExclusionRules()
        >>> rules.add_rule("node_modules/")
        >>> rules.add_rule("*.log")
        >>> sorted(rules.rules)
        ['*.log', 'node_modules']
        >>> rules.exclude("node_modules")
        True
        >>> rules.exclude("node_modules_backup")
        False
        >>> rules.exclude("server.log")
        True
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize IgnoreFileExclusionRules, optionally loading rule files.

        Args:
            rules_files: Path(s) to ignore files. Missing files are skipped.
        """
        self.rules: FrozenSet[str] = frozenset()

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, name: str) -> bool:
        return matches_any_rule(name, self.rules)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Merge the rules of one or more ignore files into this rule set.

        Args:
            rules_files: Path(s) to ignore files. Files that are absent or unreadable
                contribute nothing.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            self.rules = self.rules.union(read_ignore_file(Path(rules_file)))

    def add_rule(self, rule: str) -> None:
        """Add a single rule, cleaned the same way as an ignore-file line."""
        self.rules = self.rules.union(clean_rule_lines([rule]))


def matches_any_rule(name: str, rules: Iterable[str]) -> bool:
    """Return True if ``name`` matches any rule by wildcard or exact comparison."""
    for rule in rules:
        if has_wildcard(rule):
            if wildcard_match(rule, name):
                return True
        elif rule == name:
            return True
    return False


def load_ignore_rules(
    directory: PathType,
    filenames: Optional[Sequence[str]] = None,
    suppress_defaults: bool = False,
) -> IgnoreFileExclusionRules:
    """Build the ignore rule set for a directory.

    Args:
        directory: Directory holding the ignore files.
        filenames: Basenames of the ignore files to read. When None, every name in
            KNOWN_IGNORE_FILES is tried; an explicit list bypasses that list entirely.
        suppress_defaults: When True, DEFAULT_EXCLUDES are not added.

    Returns:
        The merged rules.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     _ = (Path(tmpdir) / ".gitignore").write_text("dist/\\n")
        ...     rules = load_ignore_rules(tmpdir)
        >>> rules.exclude("dist"), rules.exclude(".git")
        (True, True)
    """
    root = Path(directory)
    names = KNOWN_IGNORE_FILES if filenames is None else filenames

    rules = IgnoreFileExclusionRules([root / name for name in names])
    if not suppress_defaults:
        for default in DEFAULT_EXCLUDES:
            rules.add_rule(default)
    return rules
