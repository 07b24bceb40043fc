"""Property-key and value normalization."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping

from nestcss.errors import StyleConfigError

__all__ = [
    "UNITLESS_PROPERTIES",
    "NON_NUMERIC_PROPERTIES",
    "normalize_property",
    "normalize_value",
    "format_number",
]

# Properties whose numeric values are emitted without a unit.
UNITLESS_PROPERTIES = frozenset({
    "animation-iteration-count",
    "aspect-ratio",
    "column-count",
    "fill-opacity",
    "flex",
    "flex-grow",
    "flex-shrink",
    "font-weight",
    "grid-column",
    "grid-column-end",
    "grid-column-start",
    "grid-row",
    "grid-row-end",
    "grid-row-start",
    "line-clamp",
    "line-height",
    "opacity",
    "order",
    "orphans",
    "scale",
    "stroke-opacity",
    "tab-size",
    "widows",
    "z-index",
    "zoom",
})

# Properties for which a bare number is never meaningful; numbers are rejected.
NON_NUMERIC_PROPERTIES = frozenset({
    "animation",
    "animation-name",
    "background",
    "background-color",
    "background-image",
    "border-color",
    "border-style",
    "color",
    "content",
    "cursor",
    "display",
    "fill",
    "float",
    "font-family",
    "font-style",
    "grid-template-areas",
    "list-style-type",
    "outline-color",
    "overflow",
    "pointer-events",
    "position",
    "stroke",
    "text-align",
    "text-decoration",
    "text-transform",
    "transform",
    "transition",
    "transition-property",
    "visibility",
    "white-space",
})

_UPPER_RE = re.compile(r"[A-Z]")
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_-]*$")


def normalize_property(key: str) -> str:
    """Convert a camelCase key to a hyphenated CSS property name.

    ``flexDirection`` -> ``flex-direction``; ``WebkitTransition`` ->
    ``-webkit-transition``.  Hyphenated keys and custom properties pass
    through unchanged.  Acronyms are not special-cased.
    """
    if key.startswith("--") or "-" in key:
        return key
    return _UPPER_RE.sub(lambda m: "-" + m.group(0).lower(), key)


def format_number(value: int | float) -> str:
    """Decimal rendering of a number; integral floats drop the fraction."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def normalize_value(
    prop: str,
    value: object,
    *,
    unit: str = "px",
    unitless: frozenset[str] = UNITLESS_PROPERTIES,
    non_numeric: frozenset[str] = NON_NUMERIC_PROPERTIES,
    constants: Mapping[str, str] | None = None,
    path: tuple[str, ...] = (),
) -> str:
    """Serialize a declaration value for the (already hyphenated) *prop*.

    Strings are emitted verbatim unless they are a bare identifier found in
    *constants*.  Quotes are never added or removed.
    """
    if isinstance(value, bool):
        raise StyleConfigError(f"Boolean is not a valid value for '{prop}'", path)
    if isinstance(value, (int, float)):
        if prop in non_numeric:
            raise StyleConfigError(
                f"'{prop}' does not accept a bare number ({format_number(value)})", path
            )
        if isinstance(value, float) and not math.isfinite(value):
            raise StyleConfigError(f"'{prop}' has a non-finite value ({value!r})", path)
        if prop in unitless:
            return format_number(value)
        return f"{format_number(value)}{unit}"
    if isinstance(value, str):
        if constants and _IDENTIFIER_RE.match(value):
            return constants.get(value, value)
        return value
    raise StyleConfigError(
        f"Unsupported value type {type(value).__name__} for '{prop}'", path
    )
