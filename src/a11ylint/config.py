from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterable

# Severity levels: 0 disables a rule, 1 reports warnings, 2 reports errors.
OFF = 0
WARNING = 1
ERROR = 2


class ConfigError(ValueError):
    """Raised when lint configuration names an unknown rule or bad level."""


@dataclass(frozen=True)
class LintConfig:
    rules: dict[str, int] = field(default_factory=dict)
    options: dict[str, dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def default(cls, rule_names: Iterable[str], level: int = WARNING) -> "LintConfig":
        """Enable every rule in *rule_names* at *level*."""
        return cls(rules={name: level for name in rule_names})

    def with_rule(self, name: str, level: int) -> "LintConfig":
        return replace(self, rules={**self.rules, name: level})

    def with_options(self, name: str, **options: Any) -> "LintConfig":
        merged = {**self.options.get(name, {}), **options}
        return replace(self, options={**self.options, name: merged})

    def check(self, known_rules: Iterable[str]) -> None:
        """Raise ConfigError for unknown rule names or out-of-range levels."""
        known = set(known_rules)
        for name, level in self.rules.items():
            if name not in known:
                raise ConfigError(
                    f"Unknown rule '{name}'. Known rules: {', '.join(sorted(known))}"
                )
            if level not in (OFF, WARNING, ERROR):
                raise ConfigError(
                    f"Rule '{name}' has invalid level {level!r}; use 0, 1 or 2"
                )
        for name in self.options:
            if name not in known:
                raise ConfigError(f"Options given for unknown rule '{name}'")
