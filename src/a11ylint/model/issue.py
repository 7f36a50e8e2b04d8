"""Issue model: structured findings reported by lint rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a reported issue."""

    ERROR = "ERROR"
    WARNING = "WARNING"

    @classmethod
    def from_level(cls, level: int) -> "Severity":
        """Map a numeric config level (1 warning, 2 error) to a Severity."""
        if level == 1:
            return cls.WARNING
        if level == 2:
            return cls.ERROR
        raise ValueError(f"Severity level must be 1 or 2, got {level!r}")


@dataclass(frozen=True)
class Issue:
    """A single finding about a stylesheet.

    Equality and hashing cover every field, so two issues are the same issue
    only when rule, severity, position and message all match.

    Attributes:
        rule_id: Name of the rule that produced this issue.
        severity: How serious the issue is.
        line: 1-based source line.
        column: 1-based source column.
        message: Human-readable description of the problem.
    """

    rule_id: str
    severity: Severity
    line: int
    column: int
    message: str

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        return (
            f"{self.line}:{self.column}: {self.severity.value} "
            f"[{self.rule_id}] {self.message}"
        )
