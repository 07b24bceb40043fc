"""Recursive style-tree compiler.

Walks a nested style mapping and produces the declarations of the current
selector scope plus fully qualified auxiliary rules for every nested scope:

    {"color": "white", "hover": {"color": "black"}}
        -> declarations  "color:white;"
        -> auxiliary     ["&:hover{color:black;}"]

Pseudo, modifier and child scopes extend the *current* selector, so the same
subtree produces different compound selectors at different depths.
Breakpoint scopes keep the selector and wrap output in the registered
``@media`` predicate; a breakpoint already implied by the enclosing media
context is merged into it instead of being wrapped again.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from nestcss.compiler.classify import classify
from nestcss.config import DEFAULT_CONFIG, CompilerConfig
from nestcss.errors import StyleConfigError
from nestcss.model.output import CompiledOutput
from nestcss.model.style import (
    PARAM_KEY,
    KeyKind,
    StyleNode,
    child_specs,
    is_node,
    is_node_sequence,
    is_scalar,
    modifier_specs,
)
from nestcss.normalize import format_number, normalize_property, normalize_value
from nestcss.pseudo import PSEUDO_SELECTORS, pseudo_suffix

logger = logging.getLogger(__name__)

__all__ = ["Compiler", "compile_node", "compile_style", "css", "stylesheet"]


def _rule(prelude: str, body: str) -> str:
    return f"{prelude}{{{body}}}"


class Compiler:
    """Compile style trees against a fixed :class:`CompilerConfig`.

    Instances hold no per-call state and may be shared between threads.
    """

    def __init__(self, config: CompilerConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    # --- public API -----------------------------------------------------------

    def compile(
        self,
        node: StyleNode,
        scope_selector: str | None = None,
        media_context: str | None = None,
    ) -> CompiledOutput:
        """Compile *node* for *scope_selector* inside *media_context*.

        *scope_selector* defaults to the configured placeholder (``&``); an
        empty string is treated the same way.
        Raises :class:`StyleConfigError` on malformed input; nothing is
        returned in that case.
        """
        scope = scope_selector or self.config.selector
        if media_context is not None and media_context not in self.config.breakpoints:
            raise ValueError(f"Unknown media context: {media_context!r}")
        if not isinstance(node, Mapping):
            raise StyleConfigError(
                f"Style tree must be a mapping, got {type(node).__name__}"
            )
        output = self._compile(node, scope, media_context, ())
        logger.debug(
            "Compiled %r: %d declaration bytes, %d auxiliary rule(s)",
            scope,
            len(output.declarations),
            len(output.auxiliary_rules),
        )
        return output

    def css(self, node: StyleNode) -> str:
        """Declarations followed by auxiliary rules, for embedding in a host rule."""
        return self.compile(node).to_css()

    def stylesheet(self, selector: str, node: StyleNode) -> str:
        """A standalone stylesheet with *selector* as the root scope."""
        if not selector or not selector.strip():
            raise ValueError("stylesheet() needs a non-empty selector")
        output = self.compile(node, selector)
        head = _rule(selector, output.declarations) if output.declarations else ""
        return head + "".join(output.auxiliary_rules)

    # --- recursion ------------------------------------------------------------

    def _compile(
        self,
        node: Mapping[str, Any],
        scope: str,
        media: str | None,
        path: tuple[str, ...],
    ) -> CompiledOutput:
        declarations: list[str] = []
        rules: list[str] = []
        for key, value in node.items():
            kind = classify(key, value, self.config)
            key_path = path + (key,)
            if kind is KeyKind.PROPERTY:
                declarations.append(self._declaration(key, value, key_path))
            elif kind is KeyKind.PSEUDO:
                rules.extend(self._pseudo(key, value, scope, media, key_path))
            elif kind is KeyKind.BREAKPOINT:
                merged, wrapped = self._breakpoint(key, value, scope, media, key_path)
                declarations.append(merged)
                rules.extend(wrapped)
            elif kind is KeyKind.MODIFIER:
                for spec in modifier_specs(value, key, path):
                    rules.extend(
                        self._scoped(f"{scope}.{spec.name}", spec.body, media, spec.path)
                    )
            elif kind is KeyKind.CHILD:
                for spec in child_specs(value, key, path):
                    rules.extend(
                        self._scoped(f"{scope} {spec.selector}", spec.body, media, spec.path)
                    )
        return CompiledOutput("".join(declarations), tuple(rules))

    def _declaration(self, key: str, value: object, path: tuple[str, ...]) -> str:
        if is_node(value) or is_node_sequence(value):
            raise StyleConfigError(
                f"'{key}' is not a pseudo, breakpoint, '{self.config.modifier_key}' "
                f"or '{self.config.child_key}' key and cannot hold a nested block",
                path,
            )
        prop = normalize_property(key)
        normalized = normalize_value(
            prop,
            value,
            unit=self.config.unit,
            unitless=self.config.unitless,
            non_numeric=self.config.non_numeric,
            constants=self.config.constants,
            path=path,
        )
        return f"{prop}:{normalized};"

    def _scoped(
        self,
        selector: str,
        body: Mapping[str, Any],
        media: str | None,
        path: tuple[str, ...],
    ) -> list[str]:
        """Compile *body* under *selector*: its own rule first, then nested rules."""
        inner = self._compile(body, selector, media, path)
        rules: list[str] = []
        if inner.declarations:
            rules.append(_rule(selector, inner.declarations))
        rules.extend(inner.auxiliary_rules)
        return rules

    def _pseudo(
        self,
        key: str,
        value: Mapping[str, Any],
        scope: str,
        media: str | None,
        path: tuple[str, ...],
    ) -> list[str]:
        pseudo = PSEUDO_SELECTORS[key]
        raw_param = value.get(PARAM_KEY)
        if raw_param is None:
            if pseudo.parameterized:
                raise StyleConfigError(f"'{key}' requires a '{PARAM_KEY}' value", path)
            param = None
        elif is_scalar(raw_param):
            param = raw_param if isinstance(raw_param, str) else format_number(raw_param)
        else:
            raise StyleConfigError(
                f"'{PARAM_KEY}' must be a string or number, got {type(raw_param).__name__}",
                path + (PARAM_KEY,),
            )
        body = {k: v for k, v in value.items() if k != PARAM_KEY}
        return self._scoped(scope + pseudo_suffix(pseudo, param), body, media, path)

    def _breakpoint(
        self,
        key: str,
        value: Mapping[str, Any],
        scope: str,
        media: str | None,
        path: tuple[str, ...],
    ) -> tuple[str, list[str]]:
        """Returns (declarations merged into the current scope, auxiliary rules)."""
        registry = self.config.breakpoints
        if registry.implies(media, key):
            inner = self._compile(value, scope, media, path)
            return inner.declarations, list(inner.auxiliary_rules)

        inner = self._compile(value, scope, key, path)
        prelude = registry.get(key).media
        rules: list[str] = []
        if inner.declarations:
            # Bare declarations are only valid directly inside the host rule.
            body = inner.declarations
            if scope != self.config.selector:
                body = _rule(scope, body)
            rules.append(_rule(prelude, body))
        rules.extend(_rule(prelude, rule) for rule in inner.auxiliary_rules)
        return "", rules


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------


def compile_node(
    node: StyleNode,
    scope_selector: str | None = None,
    media_context: str | None = None,
    *,
    config: CompilerConfig | None = None,
) -> CompiledOutput:
    """Compile *node* for one selector scope; see :meth:`Compiler.compile`."""
    return Compiler(config).compile(node, scope_selector, media_context)


def compile_style(
    node: StyleNode,
    *,
    selector: str | None = None,
    config: CompilerConfig | None = None,
) -> CompiledOutput:
    return Compiler(config).compile(node, selector)


def css(node: StyleNode, *, config: CompilerConfig | None = None) -> str:
    """Compile *node* to a CSS body for the host rule's placeholder scope."""
    return Compiler(config).css(node)


def stylesheet(
    selector: str, node: StyleNode, *, config: CompilerConfig | None = None
) -> str:
    """Compile *node* to a standalone stylesheet rooted at *selector*."""
    return Compiler(config).stylesheet(selector, node)
