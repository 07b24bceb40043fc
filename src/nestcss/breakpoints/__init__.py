from nestcss.breakpoints.registry import (
    DEFAULT_BREAKPOINTS,
    Breakpoint,
    BreakpointRegistry,
)

__all__ = ["Breakpoint", "BreakpointRegistry", "DEFAULT_BREAKPOINTS"]
