"""Stylesheet parser: CSS/SCSS source to syntax tree."""

from a11ylint.parser.errors import ParseError
from a11ylint.parser.stylesheet import parse_file, parse_stylesheet

__all__ = ["ParseError", "parse_file", "parse_stylesheet"]
