from abc import ABC, abstractmethod
from typing import Sequence, Union

from dir2tree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Exclusion rules decide, from an entry's bare name, whether that entry is hidden from
    the rendered tree. All implementations must provide ``exclude``. Loading rules from
    files and adding single rules are optional capabilities that depend on the rule type.

    Example:
        >>> from dir2tree.exclusion_rules.ignore_rules import IgnoreFileExclusionRules
        >>> rules = IgnoreFileExclusionRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('test.pyc')
        True
        >>> rules.exclude('test.py')
        False
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if an entry with the given name should be excluded.

        Args:
            name (str): The bare name of a file or directory, without any parent path.

        Returns:
            bool: True if the entry should be excluded, False if it should be shown.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load exclusion rules from one or more files.

        Rule types that don't support file operations use this default implementation,
        which raises NotImplementedError.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add (e.g., "*.pyc").

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
