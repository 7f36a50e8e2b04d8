"""Lark Transformers that turn selector and value parse trees into tree nodes.

Both grammars parse a fragment cut out of the full stylesheet source. The
transformers receive the fragment's absolute offset and a locator so every
node carries its position in the original source.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable

from lark import Lark, Token, Transformer, v_args
from lark.exceptions import LarkError, UnexpectedInput

from a11ylint.model.nodes import (
    Color,
    Dimension,
    FunctionCall,
    Ident,
    Number,
    Operator,
    Parens,
    Percentage,
    Position,
    PseudoClass,
    Selector,
    SimpleSelector,
    StringLiteral,
    Url,
    Value,
    ValuePart,
    Variable,
)
from a11ylint.parser.errors import ParseError

GRAMMAR_DIR = Path(__file__).parent

Locator = Callable[[int], Position]

_DIMENSION_RE = re.compile(r"([+-]?(?:\d+\.?\d*|\.\d+))([a-zA-Z]+)")

# Token types that map straight onto a SimpleSelector kind.
_SIMPLE_KINDS: dict[str, str] = {
    "INTERPOLATION": "interpolation",
    "ID": "id",
    "CLASS": "class",
    "PLACEHOLDER": "placeholder",
    "ATTRIBUTE": "attribute",
    "KEYFRAME": "keyframe",
    "PARENT": "parent",
    "TYPE": "type",
    "UNIVERSAL": "universal",
    "COMBINATOR": "combinator",
}


@lru_cache(maxsize=None)
def _grammar(name: str) -> Lark:
    """Build (once) the LALR parser for the named grammar file."""
    return Lark(
        (GRAMMAR_DIR / f"{name}.lark").read_text(encoding="utf-8"),
        parser="lalr",
        lexer="basic",
        start="start",
        propagate_positions=True,
    )


class _FragmentTransformer(Transformer):  # type: ignore[type-arg]
    """Shared position handling for fragment transformers."""

    def __init__(self, offset: int, locate: Locator) -> None:
        super().__init__()
        self._offset = offset
        self._locate = locate

    def _at(self, token: Token) -> Position:
        return self._locate(self._offset + (token.start_pos or 0))


class ValueTransformer(_FragmentTransformer):
    """Transform a value parse tree into a tuple of value parts."""

    def color(self, items: list[Token]) -> Color:
        return Color(hex=str(items[0])[1:], start=self._at(items[0]))

    def dimension(self, items: list[Token]) -> Dimension:
        number, unit = _DIMENSION_RE.fullmatch(str(items[0])).groups()  # type: ignore[union-attr]
        return Dimension(number=number, unit=unit.lower(), start=self._at(items[0]))

    def percentage(self, items: list[Token]) -> Percentage:
        return Percentage(number=str(items[0])[:-1], start=self._at(items[0]))

    def number(self, items: list[Token]) -> Number:
        return Number(text=str(items[0]), start=self._at(items[0]))

    def string(self, items: list[Token]) -> StringLiteral:
        return StringLiteral(raw=str(items[0]), start=self._at(items[0]))

    def variable(self, items: list[Token]) -> Variable:
        return Variable(name=str(items[0])[1:], start=self._at(items[0]))

    def url(self, items: list[Token]) -> Url:
        return Url(raw=str(items[0]), start=self._at(items[0]))

    def ident(self, items: list[Token]) -> Ident:
        return Ident(name=str(items[0]), start=self._at(items[0]))

    def important(self, items: list[Token]) -> Ident:
        # "! important" and "!important" are the same flag.
        return Ident(name="".join(str(items[0]).split()), start=self._at(items[0]))

    def interpolation(self, items: list[Token]) -> Ident:
        return Ident(name=str(items[0]), start=self._at(items[0]))

    def operator(self, items: list[Token]) -> Operator:
        return Operator(symbol=str(items[0]), start=self._at(items[0]))

    def function(self, items: list[Any]) -> FunctionCall:
        head, *rest = items
        arguments = tuple(i for i in rest if not isinstance(i, Token))
        return FunctionCall(
            name=str(head)[:-1],
            arguments=arguments,  # type: ignore[arg-type]
            start=self._at(head),
        )

    def parens(self, items: list[Any]) -> Parens:
        head, *rest = items
        parts = tuple(i for i in rest if not isinstance(i, Token))
        return Parens(parts=parts, start=self._at(head))  # type: ignore[arg-type]

    def start(self, items: list[ValuePart]) -> tuple[ValuePart, ...]:
        return tuple(items)


class SelectorTransformer(_FragmentTransformer):
    """Transform a selector-list parse tree into a tuple of Selectors."""

    def __init__(self, text: str, offset: int, locate: Locator) -> None:
        super().__init__(offset, locate)
        self._text = text

    def component(self, items: list[Token]) -> SimpleSelector | PseudoClass:
        token = items[0]
        raw = str(token)
        if token.type == "PSEUDO":
            return _pseudo(raw, self._at(token))
        return SimpleSelector(
            kind=_SIMPLE_KINDS[token.type], text=raw, start=self._at(token)
        )

    @v_args(meta=True)
    def selector(self, meta, items) -> Selector:  # type: ignore[no-untyped-def]
        return Selector(
            components=tuple(items),
            text=self._text[meta.start_pos:meta.end_pos],
            start=self._locate(self._offset + meta.start_pos),
        )

    def start(self, items: list[Selector]) -> tuple[Selector, ...]:
        return tuple(items)


def _pseudo(raw: str, start: Position) -> PseudoClass:
    """Split ``::name(arg)`` into its parts."""
    is_element = raw.startswith("::")
    body = raw.lstrip(":")
    argument = None
    if "(" in body:
        body, _, rest = body.partition("(")
        argument = rest[:-1]
    return PseudoClass(
        name=body.lower(), argument=argument, is_element=is_element, start=start
    )


def _parse_error(
    exc: LarkError, what: str, offset: int, locate: Locator
) -> ParseError:
    """Translate a Lark failure into a ParseError at its absolute position."""
    pos = getattr(exc, "pos_in_stream", None)
    if not isinstance(exc, UnexpectedInput) or pos is None or pos < 0:
        pos = 0
    where = locate(offset + pos)
    return ParseError(
        f"Invalid {what}: {exc}", line=where.line, column=where.column
    )


def parse_value(text: str, offset: int, locate: Locator) -> Value:
    """Parse a declaration value located at *offset* in the source."""
    try:
        tree = _grammar("value").parse(text)
        parts = ValueTransformer(offset, locate).transform(tree)
    except LarkError as e:
        raise _parse_error(e, "value", offset, locate) from e
    leading = len(text) - len(text.lstrip())
    return Value(parts=parts, start=locate(offset + leading))


def parse_selectors(text: str, offset: int, locate: Locator) -> tuple[Selector, ...]:
    """Parse a comma-separated selector list located at *offset* in the source."""
    try:
        tree = _grammar("selector").parse(text)
        return SelectorTransformer(text, offset, locate).transform(tree)
    except LarkError as e:
        raise _parse_error(e, "selector", offset, locate) from e
