"""Per-declaration accessibility checks.

Each check takes a Declaration, the flags of the block it sits in and the
rule context, and returns a list of Issue objects describing any problems.
"""

from __future__ import annotations

from typing import Callable

from a11ylint.model.issue import Issue
from a11ylint.model.nodes import Declaration, Dimension, children_of, render
from a11ylint.rules.base import RuleContext
from a11ylint.rules.selectors import InteractionFlags


# ---------------------------------------------------------------------------
# Property tables
# ---------------------------------------------------------------------------

# Content hiding methods that hide content from assistive technology.
HIDDEN_DISALLOWED: dict[str, frozenset[str]] = {
    "display": frozenset({"none"}),
    "height": frozenset({"0"}),
    "overflow": frozenset({"hidden"}),
    "visibility": frozenset({"hidden"}),
    "width": frozenset({"0"}),
}

# Absolute units for these properties cause visual acuity issues.
UNITS_ALLOWED: dict[str, tuple[str, ...]] = {
    "font-size": ("em", "rem"),
    "margin": ("em", "rem"),
    "padding": ("em", "rem"),
}

_HIDDEN_OUTLINE = frozenset({"none", "0"})


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------


def check_hidden_content(
    decl: Declaration, flags: InteractionFlags, context: RuleContext
) -> list[Issue]:
    disallowed = HIDDEN_DISALLOWED.get(decl.property)
    value = render(decl.value)
    if disallowed is None or value not in disallowed:
        return []
    return [
        context.issue(
            decl.start,
            f"Content hidden by setting '{decl.property}' to '{value}' "
            "is not available to assistive technology",
        )
    ]


def check_relative_units(
    decl: Declaration, flags: InteractionFlags, context: RuleContext
) -> list[Issue]:
    """Every dimension in a restricted property must use an allowed unit."""
    allowed = UNITS_ALLOWED.get(decl.property)
    if allowed is None:
        return []
    return [
        context.issue(
            dimension.start,
            f"Values for property '{decl.property}' may only be specified as "
            + ", ".join(allowed),
        )
        for dimension in children_of(decl.value, Dimension)
        if dimension.unit not in allowed
    ]


def check_stylesheet_content(
    decl: Declaration, flags: InteractionFlags, context: RuleContext
) -> list[Issue]:
    # Fires on selectors that are *not* ::before / ::after.
    if decl.property != "content" or flags.is_pseudo_element:
        return []
    if not render(decl.value).strip():
        return []
    return [
        context.issue(
            decl.start,
            "Content specified in a stylesheet is not available to assistive technology",
        )
    ]


def check_absolute_position(
    decl: Declaration, flags: InteractionFlags, context: RuleContext
) -> list[Issue]:
    if decl.property == "position" and render(decl.value) == "absolute":
        return [
            context.issue(
                decl.start, "Absolutely positioned content poses discoverability issues"
            )
        ]
    return []


def check_outline_hidden(
    decl: Declaration, flags: InteractionFlags, context: RuleContext
) -> list[Issue]:
    if decl.property == "outline" and render(decl.value) in _HIDDEN_OUTLINE:
        return [context.issue(decl.start, "Outline should not be hidden")]
    return []


DeclarationCheck = Callable[[Declaration, InteractionFlags, RuleContext], list[Issue]]

DECLARATION_CHECKS: list[DeclarationCheck] = [
    check_stylesheet_content,
    check_absolute_position,
    check_outline_hidden,
    check_hidden_content,
    check_relative_units,
]
