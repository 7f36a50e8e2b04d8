"""Block scanner for CSS and SCSS sources.

The scanner splits the source into statements on ``{``, ``}`` and ``;``
(ignoring those inside strings, parentheses and ``#{...}`` interpolation)
and hands selector preludes and declaration values to the Lark grammars in
:mod:`a11ylint.parser.transformer`.

Syntax example:
    a:hover, a:focus { color: #fff; background: rgb(0, 0, 0); }
    .card { padding: 1em; &::before { content: ""; } }
"""

from __future__ import annotations

import logging
import re
from bisect import bisect_right
from pathlib import Path

from a11ylint.model.nodes import (
    AtRule,
    Block,
    Declaration,
    Position,
    Ruleset,
    Statement,
    Stylesheet,
)
from a11ylint.parser.errors import ParseError
from a11ylint.parser.transformer import parse_selectors, parse_value

__all__ = ["parse_stylesheet", "parse_file"]

logger = logging.getLogger(__name__)

# Strings and unquoted url() are kept verbatim; comments are blanked.
_COMMENT_RE = re.compile(
    r"""
    (?P<keep>"(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*'|url\([^)]*\))
    | (?P<block>/\*.*?(?:\*/|\Z))
    | (?P<line>//[^\n]*)
    """,
    re.VERBOSE | re.DOTALL | re.IGNORECASE,
)

_AT_RULE_RE = re.compile(r"@(?P<name>[-\w]+)\s*(?P<prelude>.*)", re.DOTALL)


def _blank_comments(source: str) -> str:
    """Replace comments with spaces so offsets and line numbers are preserved."""

    def replace(match: re.Match[str]) -> str:
        if match.group("keep") is not None:
            return match.group(0)
        return re.sub(r"[^\n]", " ", match.group(0))

    return _COMMENT_RE.sub(replace, source)


class _Locator:
    """Map absolute offsets to 1-based (line, column) positions."""

    def __init__(self, text: str) -> None:
        self._line_starts = [0] + [m.end() for m in re.finditer(r"\n", text)]

    def __call__(self, offset: int) -> Position:
        line = bisect_right(self._line_starts, offset)
        return Position(line=line, column=offset - self._line_starts[line - 1] + 1)


class _Scanner:
    def __init__(self, text: str) -> None:
        self._text = text
        self._locate = _Locator(text)

    def scan(self) -> Stylesheet:
        statements, _ = self._statements(0, opened_at=None)
        return Stylesheet(children=tuple(statements), start=Position(1, 1))

    # ---- low-level skipping ----

    def _skip_string(self, i: int) -> int:
        """Return the index just past the string starting at *i*."""
        text = self._text
        quote = text[i]
        i += 1
        while i < len(text):
            if text[i] == "\\":
                i += 2
                continue
            if text[i] == quote:
                return i + 1
            if text[i] == "\n":
                break
            i += 1
        where = self._locate(i)
        raise ParseError("Unterminated string", line=where.line, column=where.column)

    def _skip_interpolation(self, i: int) -> int:
        """Return the index just past the ``#{...}`` starting at *i*."""
        end = self._text.find("}", i)
        if end == -1:
            where = self._locate(i)
            raise ParseError(
                "Unterminated interpolation", line=where.line, column=where.column
            )
        return end + 1

    # ---- statements ----

    def _statements(
        self, pos: int, opened_at: int | None
    ) -> tuple[list[Statement], int]:
        """Scan statements from *pos* until the block closes (or EOF at top level).

        Returns the statements and the index just past the closing brace.
        """
        text = self._text
        statements: list[Statement] = []
        chunk_start = pos
        depth = 0
        i = pos
        while i < len(text):
            ch = text[i]
            if ch in "\"'":
                i = self._skip_string(i)
                continue
            if text.startswith("#{", i):
                i = self._skip_interpolation(i)
                continue
            if ch == "(":
                depth += 1
            elif ch == ")":
                depth = max(depth - 1, 0)
            elif depth == 0 and ch == ";":
                self._append(statements, self._simple_statement(chunk_start, i))
                chunk_start = i + 1
            elif depth == 0 and ch == "{":
                statement, i = self._block_statement(chunk_start, i)
                self._append(statements, statement)
                chunk_start = i
                continue
            elif depth == 0 and ch == "}":
                if opened_at is None:
                    where = self._locate(i)
                    raise ParseError(
                        "Unexpected '}'", line=where.line, column=where.column
                    )
                self._append(statements, self._simple_statement(chunk_start, i))
                return statements, i + 1
            i += 1

        if opened_at is not None:
            where = self._locate(opened_at)
            raise ParseError("Unclosed block", line=where.line, column=where.column)
        self._append(statements, self._simple_statement(chunk_start, len(text)))
        return statements, len(text)

    @staticmethod
    def _append(statements: list[Statement], statement: Statement | None) -> None:
        if statement is not None:
            statements.append(statement)

    def _trimmed(self, start: int, end: int) -> tuple[str, int]:
        """Return the stripped text of [start, end) and its absolute offset."""
        raw = self._text[start:end]
        stripped = raw.strip()
        return stripped, start + (len(raw) - len(raw.lstrip()))

    def _simple_statement(self, start: int, end: int) -> Statement | None:
        """Build a declaration or block-less at-rule from [start, end)."""
        text, offset = self._trimmed(start, end)
        if not text:
            return None
        if text.startswith("@"):
            return self._at_rule(text, offset, block=None)

        colon = text.find(":")
        if colon <= 0:
            where = self._locate(offset)
            raise ParseError(
                f"Expected a declaration, got {text!r}",
                line=where.line,
                column=where.column,
            )
        return Declaration(
            property=text[:colon].strip().lower(),
            value=parse_value(text[colon + 1:], offset + colon + 1, self._locate),
            start=self._locate(offset),
        )

    def _block_statement(
        self, start: int, brace: int
    ) -> tuple[Statement | None, int]:
        """Build a ruleset or at-rule whose block opens at *brace*."""
        prelude, offset = self._trimmed(start, brace)
        children, end = self._statements(brace + 1, opened_at=brace)
        block = Block(children=tuple(children), start=self._locate(brace))

        if not prelude:
            where = self._locate(brace)
            raise ParseError(
                "Block without a selector", line=where.line, column=where.column
            )
        if prelude.startswith("@"):
            return self._at_rule(prelude, offset, block=block), end
        if prelude.endswith(":"):
            # SCSS nested properties, e.g. `font: { family: serif; }`
            logger.debug("Skipping nested property group %r", prelude)
            return None, end

        selectors = parse_selectors(prelude, offset, self._locate)
        return Ruleset(selectors=selectors, block=block, start=self._locate(offset)), end

    def _at_rule(self, text: str, offset: int, block: Block | None) -> AtRule:
        match = _AT_RULE_RE.match(text)
        if match is None:
            where = self._locate(offset)
            raise ParseError(
                f"Invalid at-rule {text!r}", line=where.line, column=where.column
            )
        return AtRule(
            name=match.group("name").lower(),
            prelude=match.group("prelude").strip(),
            block=block,
            start=self._locate(offset),
        )


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse CSS or SCSS source into a Stylesheet tree.

    Raises:
        ParseError: On unbalanced braces or unparsable selectors and values.
    """
    if source.startswith("\ufeff"):
        source = source[1:]
    stylesheet = _Scanner(_blank_comments(source)).scan()
    logger.debug("Parsed stylesheet with %d top-level statements", len(stylesheet.children))
    return stylesheet


def parse_file(path: str | Path) -> Stylesheet:
    """Read and parse a UTF-8 stylesheet file.

    Raises:
        ParseError: If the file is not valid UTF-8 or does not parse.
    """
    data = Path(path).read_bytes()
    try:
        source = data.decode("utf-8")
    except UnicodeDecodeError as e:
        line_start = data.rfind(b"\n", 0, e.start) + 1
        raise ParseError(
            f"Invalid UTF-8 in {path}: {e.reason}",
            line=data.count(b"\n", 0, e.start) + 1,
            column=e.start - line_start + 1,
        ) from e
    return parse_stylesheet(source)
