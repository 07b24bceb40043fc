"""Key classification for style-tree entries."""

from __future__ import annotations

from nestcss.config import CompilerConfig
from nestcss.model.style import KeyKind, is_node, is_scalar
from nestcss.pseudo import PSEUDO_SELECTORS

__all__ = ["classify"]


def classify(key: str, value: object, config: CompilerConfig) -> KeyKind:
    """Decide how the entry ``key: value`` is compiled.

    The modifier and child keys are reserved: whatever they hold is read as
    a spec, so a malformed value is reported instead of becoming a
    declaration.  Otherwise scalar values are always declarations, so
    ``{"content": '"x"'}`` or ``{"placeholder": "..."}`` never open a nested
    scope.  Unrecognized keys fall through to :attr:`KeyKind.PROPERTY`.
    """
    if key == config.modifier_key:
        return KeyKind.MODIFIER
    if key == config.child_key:
        return KeyKind.CHILD
    if is_scalar(value):
        return KeyKind.PROPERTY
    if key in PSEUDO_SELECTORS and is_node(value):
        return KeyKind.PSEUDO
    if key in config.breakpoints and is_node(value):
        return KeyKind.BREAKPOINT
    return KeyKind.PROPERTY
