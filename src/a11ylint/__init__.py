"""a11ylint: accessibility lint rules for CSS and SCSS stylesheets."""
from __future__ import annotations

__version__ = "0.1.0"

from a11ylint.config import ConfigError, LintConfig  # noqa: E402
from a11ylint.linter import LintError, lint, lint_file, lint_or_raise  # noqa: E402
from a11ylint.model.issue import Issue, Severity  # noqa: E402
from a11ylint.parser import ParseError, parse_stylesheet  # noqa: E402

__all__ = [
    "__version__",
    "ConfigError",
    "LintConfig",
    "LintError",
    "lint",
    "lint_file",
    "lint_or_raise",
    "Issue",
    "Severity",
    "ParseError",
    "parse_stylesheet",
]
