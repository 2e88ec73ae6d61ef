"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules excludes it. This is how
    the tree walker stacks the skip lists, the hidden-entry policy and any
    caller-supplied patterns into a single filter.

    Attributes:
        rules (List[BaseExclusionRules]): Constituent rules, evaluated in order.

    Example:
        >>> from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from dirtree.exclusion_rules.name_rules import HiddenExclusionRules, NameExclusionRules
        >>> patterns = GitIgnoreExclusionRules()
        >>> patterns.add_rule("*.tmp")
        >>> composite = CompositeExclusionRules([NameExclusionRules.with_defaults(), HiddenExclusionRules(), patterns])
        >>> composite.exclude("node_modules/")  # default skip list
        True
        >>> composite.exclude(".cache/")  # hidden
        True
        >>> composite.exclude("scratch.tmp")  # pattern
        True
        >>> composite.exclude("src/")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Evaluation stops at the first rule that excludes the path.
        """
        return any(rule.exclude(path) for rule in self.rules)
