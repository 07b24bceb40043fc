from nestcss.compiler.classify import classify
from nestcss.compiler.compiler import (
    Compiler,
    compile_node,
    compile_style,
    css,
    stylesheet,
)

__all__ = ["Compiler", "classify", "compile_node", "compile_style", "css", "stylesheet"]
