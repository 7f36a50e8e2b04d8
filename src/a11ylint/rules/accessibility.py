"""The ``accessibility-issues`` rule.

Walks every ruleset once. Per ruleset it classifies the selector group,
runs the declaration checks, tracks the block's foreground and background
colors, and finally checks the color pairing.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from a11ylint.model.issue import Issue
from a11ylint.model.nodes import Declaration, Ruleset, Stylesheet, children_of, find_all
from a11ylint.rules.base import RuleContext
from a11ylint.rules.collector import IssueCollector
from a11ylint.rules.colors import (
    BACKGROUND_PROPERTIES,
    FOREGROUND_PROPERTIES,
    ColorValue,
    extract_color,
    is_valid_color,
)
from a11ylint.rules.contrast import has_sufficient_contrast
from a11ylint.rules.properties import DECLARATION_CHECKS
from a11ylint.rules.selectors import InteractionFlags, classify_selectors

logger = logging.getLogger(__name__)

RULE_NAME = "accessibility-issues"

DEVICE_DEPENDENCE = (
    "Use of :hover, :active, or :focus without all three creates device dependence"
)
MISSING_FOREGROUND = (
    "Color should always be specified any time background-color is defined"
)
LOW_CONTRAST = "There is not enough contrast between background and foreground colors"


def _check_declarations(
    ruleset: Ruleset, flags: InteractionFlags, context: RuleContext
) -> tuple[IssueCollector, Optional[ColorValue], Optional[ColorValue]]:
    """Run every declaration check; return issues plus the final fg/bg colors."""
    issues = IssueCollector()
    foreground: Optional[ColorValue] = None
    background: Optional[ColorValue] = None
    for decl in children_of(ruleset.block, Declaration):
        if decl.property in FOREGROUND_PROPERTIES:
            foreground = extract_color(decl.value)
        elif decl.property in BACKGROUND_PROPERTIES:
            background = extract_color(decl.value)
        for check in DECLARATION_CHECKS:
            issues.extend(check(decl, flags, context))
    return issues, foreground, background


def _check_colors(
    ruleset: Ruleset,
    foreground: Optional[ColorValue],
    background: Optional[ColorValue],
    context: RuleContext,
) -> list[Issue]:
    # Only a background without a foreground is flagged, never the reverse.
    if not is_valid_color(background):
        return []
    if not is_valid_color(foreground):
        return [context.issue(ruleset.block.start, MISSING_FOREGROUND)]
    if not has_sufficient_contrast(foreground, background):  # type: ignore[arg-type]
        return [context.issue(ruleset.block.start, LOW_CONTRAST)]
    return []


def check_ruleset(ruleset: Ruleset, context: RuleContext) -> IssueCollector:
    """Evaluate one ruleset independently of every other."""
    issues = IssueCollector()
    flags = classify_selectors(ruleset.selectors)
    if flags.is_device_dependent:
        issues.add(context.issue(ruleset.start, DEVICE_DEPENDENCE))

    declaration_issues, foreground, background = _check_declarations(
        ruleset, flags, context
    )
    issues.merge(declaration_issues)
    issues.extend(_check_colors(ruleset, foreground, background, context))
    return issues


class AccessibilityIssuesRule:
    """Flags styling patterns that get in the way of assistive technology."""

    name = RULE_NAME

    @property
    def default_config(self) -> dict[str, Any]:
        return {"per-property": {}, "global": []}

    def detect(self, tree: Stylesheet, context: RuleContext) -> list[Issue]:
        issues = IssueCollector()
        for ruleset in find_all(tree, Ruleset):
            issues.merge(check_ruleset(ruleset, context))
        logger.debug("%s found %d issue(s)", self.name, len(issues))
        return issues.issues
