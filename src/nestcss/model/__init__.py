"""nestcss model layer -- public type re-exports."""

from nestcss.model.diagnostic import Diagnostic, Severity
from nestcss.model.output import CompiledOutput
from nestcss.model.style import (
    ChildSpec,
    KeyKind,
    ModifierSpec,
    StyleNode,
    StyleValue,
    child_specs,
    modifier_specs,
)

__all__ = [
    # style tree
    "StyleNode",
    "StyleValue",
    "KeyKind",
    "ModifierSpec",
    "ChildSpec",
    "modifier_specs",
    "child_specs",
    # output
    "CompiledOutput",
    # diagnostic
    "Severity",
    "Diagnostic",
]
