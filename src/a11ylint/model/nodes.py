"""Stylesheet syntax tree: a closed set of node variants plus traversal helpers.

Every node is a frozen dataclass carrying its source ``start`` position.
Traversal is type-directed through :func:`find_all` and child-directed
through :func:`children_of` / :func:`first_of`; :func:`render` turns a
subtree back into text for literal-value comparisons.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Type, TypeVar, Union


@dataclass(frozen=True)
class Position:
    """A 1-based (line, column) location in the source text."""

    line: int = 1
    column: int = 1


_ORIGIN = Position()


# ---------------------------------------------------------------------------
# Value parts
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Number:
    text: str
    start: Position = _ORIGIN


@dataclass(frozen=True)
class Dimension:
    """A number immediately followed by a unit, e.g. ``12px``."""

    number: str
    unit: str
    start: Position = _ORIGIN


@dataclass(frozen=True)
class Percentage:
    number: str
    start: Position = _ORIGIN


@dataclass(frozen=True)
class Color:
    """A ``#`` color literal. ``hex`` holds the text after the hash, unvalidated."""

    hex: str
    start: Position = _ORIGIN


@dataclass(frozen=True)
class Ident:
    name: str
    start: Position = _ORIGIN


@dataclass(frozen=True)
class StringLiteral:
    raw: str  # including quotes
    start: Position = _ORIGIN


@dataclass(frozen=True)
class Variable:
    """An SCSS ``$variable`` reference."""

    name: str
    start: Position = _ORIGIN


@dataclass(frozen=True)
class Url:
    raw: str
    start: Position = _ORIGIN


@dataclass(frozen=True)
class Operator:
    symbol: str
    start: Position = _ORIGIN


@dataclass(frozen=True)
class FunctionCall:
    """A function call such as ``rgb(10, 20, 30)``.

    Attributes:
        name: Function name without the opening parenthesis.
        arguments: Every argument token in order, separators included.
    """

    name: str
    arguments: tuple["ValuePart", ...] = ()
    start: Position = _ORIGIN


@dataclass(frozen=True)
class Parens:
    parts: tuple["ValuePart", ...] = ()
    start: Position = _ORIGIN


ValuePart = Union[
    Number,
    Dimension,
    Percentage,
    Color,
    Ident,
    StringLiteral,
    Variable,
    Url,
    Operator,
    FunctionCall,
    Parens,
]


@dataclass(frozen=True)
class Value:
    """The value expression on the right-hand side of a declaration."""

    parts: tuple[ValuePart, ...] = ()
    start: Position = _ORIGIN


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimpleSelector:
    """One non-pseudo selector component.

    ``kind`` is one of: type, universal, class, id, attribute, parent,
    placeholder, combinator, interpolation, keyframe.
    """

    kind: str
    text: str
    start: Position = _ORIGIN


@dataclass(frozen=True)
class PseudoClass:
    """A ``:name`` or ``::name`` selector component.

    Attributes:
        name: Lower-cased identifier after the colon(s).
        argument: Text between the parentheses for functional pseudos.
        is_element: True for the double-colon form.
    """

    name: str
    argument: Optional[str] = None
    is_element: bool = False
    start: Position = _ORIGIN


SelectorComponent = Union[SimpleSelector, PseudoClass]


@dataclass(frozen=True)
class Selector:
    """One selector of a comma-separated selector list."""

    components: tuple[SelectorComponent, ...] = ()
    text: str = ""
    start: Position = _ORIGIN


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Declaration:
    property: str
    value: Value = field(default_factory=Value)
    start: Position = _ORIGIN


@dataclass(frozen=True)
class Block:
    children: tuple["Statement", ...] = ()
    start: Position = _ORIGIN


@dataclass(frozen=True)
class Ruleset:
    """A selector group sharing one declaration block."""

    selectors: tuple[Selector, ...] = ()
    block: Block = field(default_factory=Block)
    start: Position = _ORIGIN


@dataclass(frozen=True)
class AtRule:
    """An ``@name prelude`` statement, with or without a block."""

    name: str
    prelude: str = ""
    block: Optional[Block] = None
    start: Position = _ORIGIN


Statement = Union[Ruleset, AtRule, Declaration]


@dataclass(frozen=True)
class Stylesheet:
    children: tuple[Statement, ...] = ()
    start: Position = _ORIGIN


Node = Union[
    Stylesheet,
    Ruleset,
    AtRule,
    Block,
    Declaration,
    Selector,
    SimpleSelector,
    PseudoClass,
    Value,
    Number,
    Dimension,
    Percentage,
    Color,
    Ident,
    StringLiteral,
    Variable,
    Url,
    Operator,
    FunctionCall,
    Parens,
]

N = TypeVar("N")


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def children(node: Node) -> tuple[Node, ...]:
    """Return the direct children of *node* in document order."""
    if isinstance(node, (Stylesheet, Block)):
        return node.children
    if isinstance(node, Ruleset):
        return (*node.selectors, node.block)
    if isinstance(node, AtRule):
        return (node.block,) if node.block is not None else ()
    if isinstance(node, Declaration):
        return (node.value,)
    if isinstance(node, Selector):
        return node.components
    if isinstance(node, (Value, Parens)):
        return node.parts
    if isinstance(node, FunctionCall):
        return node.arguments
    return ()


def walk(node: Node) -> Iterator[Node]:
    """Yield *node* and all of its descendants, depth-first in document order."""
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(children(current)))


def find_all(node: Node, kind: Type[N]) -> Iterator[N]:
    """Yield every node of type *kind* anywhere under *node* (inclusive)."""
    for candidate in walk(node):
        if isinstance(candidate, kind):
            yield candidate


def children_of(node: Node, kind: Type[N]) -> Iterator[N]:
    """Yield the direct children of *node* that are of type *kind*."""
    for child in children(node):
        if isinstance(child, kind):
            yield child


def first_of(node: Node, kind: Type[N]) -> Optional[N]:
    """Return the first direct child of *node* of type *kind*, or None."""
    return next(children_of(node, kind), None)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def _join(parts: tuple[ValuePart, ...]) -> str:
    out = ""
    for part in parts:
        text = render(part)
        if isinstance(part, Operator) and part.symbol == ",":
            out += ","
        elif out:
            out += " " + text
        else:
            out = text
    return out


def render(node: Node) -> str:
    """Render *node* back to stylesheet text.

    Tokens are separated by single spaces and commas attach to the token
    before them, so ``rgb( 1 ,2,3 )`` renders as ``rgb(1, 2, 3)``.
    """
    if isinstance(node, Number):
        return node.text
    if isinstance(node, Dimension):
        return f"{node.number}{node.unit}"
    if isinstance(node, Percentage):
        return f"{node.number}%"
    if isinstance(node, Color):
        return f"#{node.hex}"
    if isinstance(node, Ident):
        return node.name
    if isinstance(node, (StringLiteral, Url)):
        return node.raw
    if isinstance(node, Variable):
        return f"${node.name}"
    if isinstance(node, Operator):
        return node.symbol
    if isinstance(node, FunctionCall):
        return f"{node.name}({_join(node.arguments)})"
    if isinstance(node, Parens):
        return f"({_join(node.parts)})"
    if isinstance(node, Value):
        return _join(node.parts)
    if isinstance(node, SimpleSelector):
        return node.text
    if isinstance(node, PseudoClass):
        colons = "::" if node.is_element else ":"
        argument = f"({node.argument})" if node.argument is not None else ""
        return f"{colons}{node.name}{argument}"
    if isinstance(node, Selector):
        return node.text or "".join(render(c) for c in node.components)
    if isinstance(node, Declaration):
        return f"{node.property}: {render(node.value)};"
    if isinstance(node, Block):
        return "{ " + " ".join(render(c) for c in node.children) + " }"
    if isinstance(node, Ruleset):
        selectors = ", ".join(render(s) for s in node.selectors)
        return f"{selectors} {render(node.block)}"
    if isinstance(node, AtRule):
        head = f"@{node.name} {node.prelude}".rstrip()
        if node.block is None:
            return head + ";"
        return f"{head} {render(node.block)}"
    if isinstance(node, Stylesheet):
        return "\n".join(render(c) for c in node.children)
    raise TypeError(f"Not a stylesheet node: {type(node).__name__}")
