"""Selector classification: interaction and pseudo-element flags per block."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from a11ylint.model.nodes import PseudoClass, Selector, children_of

INTERACTION_STATES = ("active", "focus", "hover")
PSEUDO_ELEMENTS = ("before", "after")


@dataclass(frozen=True)
class InteractionFlags:
    """Flags shared by every selector guarding one declaration block."""

    active: bool = False
    hover: bool = False
    focus: bool = False
    before: bool = False
    after: bool = False

    @property
    def is_device_dependent(self) -> bool:
        """Some, but not all, of :hover / :focus / :active are styled."""
        states = (self.active, self.focus, self.hover)
        return any(states) and not all(states)

    @property
    def is_pseudo_element(self) -> bool:
        return self.before or self.after


def classify_selectors(selectors: Iterable[Selector]) -> InteractionFlags:
    """Derive block-scoped flags from every pseudo token in *selectors*.

    ``:before`` and ``::before`` are treated alike.
    """
    names = {
        pseudo.name
        for selector in selectors
        for pseudo in children_of(selector, PseudoClass)
    }
    return InteractionFlags(
        active="active" in names,
        hover="hover" in names,
        focus="focus" in names,
        before="before" in names,
        after="after" in names,
    )
