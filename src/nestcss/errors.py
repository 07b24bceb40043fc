"""Compiler error types."""

from __future__ import annotations


def format_path(path: tuple[str, ...]) -> str:
    """Render a style-tree location as ``hover > class[1] > color``."""
    return " > ".join(path) if path else "<root>"


class StyleError(Exception):
    """Base class for errors raised while compiling a style tree."""

    def __init__(self, message: str, path: tuple[str, ...] = ()):
        self.path = tuple(path)
        self.reason = message
        super().__init__(f"{message} (at {format_path(self.path)})")


class StyleConfigError(StyleError):
    """Raised when a style tree is structurally malformed.

    Covers modifier/child specs without ``name``/``selector``, parameterized
    pseudo keys without ``param`` and values the compiler cannot serialize.
    """
