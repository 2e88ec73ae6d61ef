"""Exclusion rules for filtering files and directories out of the tree."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .git_rules import GitIgnoreExclusionRules
from .name_rules import DEFAULT_SKIP_DIRECTORIES, DEFAULT_SKIP_FILES, HiddenExclusionRules, NameExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "DEFAULT_SKIP_DIRECTORIES",
    "DEFAULT_SKIP_FILES",
    "GitIgnoreExclusionRules",
    "HiddenExclusionRules",
    "NameExclusionRules",
]
