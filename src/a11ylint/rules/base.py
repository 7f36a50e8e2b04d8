"""Base protocol for lint rules and the context they run with."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from a11ylint.model.issue import Issue, Severity
from a11ylint.model.nodes import Position, Stylesheet


@dataclass(frozen=True)
class RuleContext:
    """Invocation context handed to a rule by the linter.

    Attributes:
        rule_id: Name reported on every issue the rule emits.
        severity: Severity reported on every issue the rule emits.
        options: The rule's default config merged with user options.
    """

    rule_id: str
    severity: Severity = Severity.WARNING
    options: dict[str, Any] = field(default_factory=dict)

    def issue(self, start: Position, message: str) -> Issue:
        """Build an Issue for this rule at *start*."""
        return Issue(
            rule_id=self.rule_id,
            severity=self.severity,
            line=start.line,
            column=start.column,
            message=message,
        )


@runtime_checkable
class Rule(Protocol):
    """A stylesheet lint rule: static metadata plus a detection function."""

    @property
    def name(self) -> str: ...

    @property
    def default_config(self) -> dict[str, Any]: ...

    def detect(self, tree: Stylesheet, context: RuleContext) -> list[Issue]: ...
