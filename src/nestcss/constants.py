"""Named color constants that can be injected into the compiler.

Pass ``PALETTE`` (or any mapping of your own) as ``CompilerConfig.constants``
to let bare identifiers such as ``"primary"`` resolve to color values.
Unresolved identifiers are emitted verbatim.
"""

from __future__ import annotations

from types import MappingProxyType

PALETTE = MappingProxyType({
    "primary": "#0b5ed7",
    "secondary": "#6c757d",
    "success": "#198754",
    "danger": "#dc3545",
    "warning": "#ffc107",
    "info": "#0dcaf0",
    "light": "#f8f9fa",
    "dark": "#212529",
    "muted": "#6a6a6a",
    "border": "#e3e3e3",
    "background": "#f8f8f8",
    "foreground": "#1a1a1a",
    "link": "#0b5ed7",
    "offWhite": "#fcfcfc",
    "paleGray": "#f3f3f3",
})
