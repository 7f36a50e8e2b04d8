"""Lint rules and the registry that holds them."""

from a11ylint.rules.accessibility import AccessibilityIssuesRule, check_ruleset
from a11ylint.rules.base import Rule, RuleContext
from a11ylint.rules.collector import IssueCollector
from a11ylint.rules.colors import ColorValue, extract_color
from a11ylint.rules.contrast import (
    brightness,
    brightness_difference,
    has_sufficient_contrast,
    hue_difference,
)
from a11ylint.rules.registry import RuleRegistry, default_registry
from a11ylint.rules.selectors import InteractionFlags, classify_selectors

__all__ = [
    "Rule",
    "RuleContext",
    "RuleRegistry",
    "default_registry",
    "IssueCollector",
    "AccessibilityIssuesRule",
    "check_ruleset",
    "ColorValue",
    "extract_color",
    "InteractionFlags",
    "classify_selectors",
    "brightness",
    "brightness_difference",
    "hue_difference",
    "has_sufficient_contrast",
]
