"""nestcss -- compile nested style trees into CSS."""

__version__ = "0.1.0"

from nestcss.breakpoints import DEFAULT_BREAKPOINTS, Breakpoint, BreakpointRegistry  # noqa: E402
from nestcss.compiler import Compiler, compile_node, compile_style, css, stylesheet  # noqa: E402
from nestcss.config import DEFAULT_CONFIG, CompilerConfig  # noqa: E402
from nestcss.errors import StyleConfigError, StyleError  # noqa: E402
from nestcss.model import CompiledOutput, KeyKind  # noqa: E402

__all__ = [
    "__version__",
    # compiler
    "Compiler",
    "compile_node",
    "compile_style",
    "css",
    "stylesheet",
    # configuration
    "CompilerConfig",
    "DEFAULT_CONFIG",
    "Breakpoint",
    "BreakpointRegistry",
    "DEFAULT_BREAKPOINTS",
    # model
    "CompiledOutput",
    "KeyKind",
    # errors
    "StyleError",
    "StyleConfigError",
]
