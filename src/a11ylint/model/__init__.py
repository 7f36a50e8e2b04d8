"""a11ylint model layer -- public type re-exports."""

from a11ylint.model.issue import Issue, Severity
from a11ylint.model.nodes import (
    AtRule,
    Block,
    Color,
    Declaration,
    Dimension,
    FunctionCall,
    Ident,
    Node,
    Number,
    Operator,
    Parens,
    Percentage,
    Position,
    PseudoClass,
    Ruleset,
    Selector,
    SimpleSelector,
    StringLiteral,
    Stylesheet,
    Url,
    Value,
    Variable,
    children,
    children_of,
    find_all,
    first_of,
    render,
    walk,
)

__all__ = [
    # issue
    "Severity",
    "Issue",
    # structure
    "Position",
    "Node",
    "Stylesheet",
    "Ruleset",
    "AtRule",
    "Block",
    "Declaration",
    # selectors
    "Selector",
    "SimpleSelector",
    "PseudoClass",
    # values
    "Value",
    "Number",
    "Dimension",
    "Percentage",
    "Color",
    "Ident",
    "StringLiteral",
    "Variable",
    "Url",
    "Operator",
    "FunctionCall",
    "Parens",
    # traversal
    "children",
    "walk",
    "find_all",
    "children_of",
    "first_of",
    "render",
]
