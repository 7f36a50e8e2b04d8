"""Order-preserving, deduplicating issue accumulator."""

from __future__ import annotations

from typing import Iterable, Iterator

from a11ylint.model.issue import Issue


class IssueCollector:
    """Accumulates issues, keeping only the first of any identical findings.

    Each traversal level builds its own collector and returns it; the caller
    folds it into its own with :meth:`merge`.
    """

    def __init__(self, issues: Iterable[Issue] = ()) -> None:
        self._issues: dict[Issue, None] = {}
        self.extend(issues)

    def add(self, issue: Issue) -> None:
        self._issues.setdefault(issue, None)

    def extend(self, issues: Iterable[Issue]) -> None:
        for issue in issues:
            self.add(issue)

    def merge(self, other: "IssueCollector") -> "IssueCollector":
        """Fold *other* into this collector and return self."""
        self.extend(other)
        return self

    @property
    def issues(self) -> list[Issue]:
        return list(self._issues)

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    def __len__(self) -> int:
        return len(self._issues)

    def __contains__(self, issue: object) -> bool:
        return issue in self._issues
