from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from nestcss.breakpoints import DEFAULT_BREAKPOINTS, BreakpointRegistry
from nestcss.normalize import NON_NUMERIC_PROPERTIES, UNITLESS_PROPERTIES


@dataclass(frozen=True)
class CompilerConfig:
    selector: str = "&"  # placeholder for the host rule's own selector
    breakpoints: BreakpointRegistry = DEFAULT_BREAKPOINTS
    unit: str = "px"
    unitless: frozenset[str] = UNITLESS_PROPERTIES
    non_numeric: frozenset[str] = NON_NUMERIC_PROPERTIES
    constants: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    modifier_key: str = "class"
    child_key: str = "child"

    def __post_init__(self) -> None:
        if self.modifier_key == self.child_key:
            raise ValueError("modifier_key and child_key must differ")
        object.__setattr__(self, "constants", MappingProxyType(dict(self.constants)))

    def with_overrides(self, **changes: Any) -> CompilerConfig:
        return replace(self, **changes)


DEFAULT_CONFIG = CompilerConfig()
