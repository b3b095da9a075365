"""Exclusion rules for filtering files and directories."""

from .base_rules import BaseExclusionRules
from .exclusion_config import ExclusionConfig, should_exclude
from .ignore_rules import DEFAULT_EXCLUDES, KNOWN_IGNORE_FILES, IgnoreFileExclusionRules, load_ignore_rules
from .patterns import ExactPattern, Pattern, RegexPattern, WildcardPattern, parse_exception_patterns

__all__ = [
    "BaseExclusionRules",
    "DEFAULT_EXCLUDES",
    "ExactPattern",
    "ExclusionConfig",
    "IgnoreFileExclusionRules",
    "KNOWN_IGNORE_FILES",
    "Pattern",
    "RegexPattern",
    "WildcardPattern",
    "load_ignore_rules",
    "parse_exception_patterns",
    "should_exclude",
]
