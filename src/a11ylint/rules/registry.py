"""Rule registry: holds lint rules by name."""

from __future__ import annotations

from typing import Iterator

from a11ylint.rules.base import Rule


class RuleRegistry:
    """Maps rule names to rule implementations."""

    def __init__(self) -> None:
        self._rules: dict[str, Rule] = {}

    def register(self, rule: Rule) -> None:
        """Register a rule instance.

        Raises:
            TypeError: If *rule* doesn't implement the Rule protocol.
            ValueError: If a rule with the same name is already registered.
        """
        if not isinstance(rule, Rule):
            raise TypeError(
                f"Rule must implement the Rule protocol (name, default_config, "
                f"detect), got {type(rule).__name__}"
            )
        if rule.name in self._rules:
            existing = self._rules[rule.name]
            raise ValueError(
                f"Rule '{rule.name}' is already registered "
                f"(existing: {type(existing).__name__}, new: {type(rule).__name__})"
            )
        self._rules[rule.name] = rule

    def get(self, name: str) -> Rule | None:
        return self._rules.get(name)

    def names(self) -> list[str]:
        """Registered rule names, sorted alphabetically."""
        return sorted(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules


def default_registry() -> RuleRegistry:
    """Create a RuleRegistry with every built-in rule registered."""
    from a11ylint.rules.accessibility import AccessibilityIssuesRule

    registry = RuleRegistry()
    registry.register(AccessibilityIssuesRule())
    return registry
