"""Linter: parses a stylesheet, runs enabled rules and reports issues."""

from __future__ import annotations

import logging
from pathlib import Path

from a11ylint.config import OFF, LintConfig
from a11ylint.model.issue import Issue, Severity
from a11ylint.model.nodes import Stylesheet
from a11ylint.parser import parse_file, parse_stylesheet
from a11ylint.rules.base import RuleContext
from a11ylint.rules.collector import IssueCollector
from a11ylint.rules.registry import RuleRegistry, default_registry

logger = logging.getLogger(__name__)


class LintError(Exception):
    """Raised when linting produces ERROR-severity issues."""

    def __init__(self, issues: list[Issue]) -> None:
        self.issues = issues
        messages = [str(i) for i in issues if i.is_error]
        super().__init__(
            f"Lint failed with {len(messages)} error(s): " + "; ".join(messages)
        )


def lint(
    tree: Stylesheet | str,
    config: LintConfig | None = None,
    registry: RuleRegistry | None = None,
) -> list[Issue]:
    """Run every enabled rule against *tree* (parsed first if given as source).

    Returns the deduplicated issues of all rules, in rule order.
    """
    if isinstance(tree, str):
        tree = parse_stylesheet(tree)
    registry = registry or default_registry()
    config = config or LintConfig.default(registry.names())
    config.check(registry.names())

    issues = IssueCollector()
    for rule in registry:
        level = config.rules.get(rule.name, OFF)
        if level == OFF:
            logger.debug("Skipping disabled rule %s", rule.name)
            continue
        context = RuleContext(
            rule_id=rule.name,
            severity=Severity.from_level(level),
            options={**rule.default_config, **config.options.get(rule.name, {})},
        )
        found = rule.detect(tree, context)
        logger.debug("Rule %s reported %d issue(s)", rule.name, len(found))
        issues.extend(found)
    return issues.issues


def lint_or_raise(
    tree: Stylesheet | str,
    config: LintConfig | None = None,
    registry: RuleRegistry | None = None,
) -> list[Issue]:
    """Lint; raises :class:`LintError` if any ERROR issues exist.

    Returns the issues (warnings only) when no errors are found.
    """
    issues = lint(tree, config=config, registry=registry)
    if any(i.is_error for i in issues):
        raise LintError(issues)
    return issues


def lint_file(
    path: str | Path,
    config: LintConfig | None = None,
    registry: RuleRegistry | None = None,
) -> list[Issue]:
    """Parse and lint the stylesheet at *path*."""
    logger.info("Linting %s", path)
    return lint(parse_file(path), config=config, registry=registry)
