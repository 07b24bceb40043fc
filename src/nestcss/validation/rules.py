"""Validation rules for style trees.

Each rule is a function taking a style tree and a CompilerConfig and
returning a list of Diagnostic objects describing any issues found.  Rules
never raise on malformed input; they report it.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from nestcss.compiler.classify import classify
from nestcss.config import CompilerConfig
from nestcss.model.diagnostic import Diagnostic, Severity
from nestcss.model.style import PARAM_KEY, KeyKind, StyleNode, is_node, is_node_sequence, is_scalar
from nestcss.normalize import normalize_property
from nestcss.pseudo import PSEUDO_SELECTORS


# ---------------------------------------------------------------------------
# Tree walking
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Entry:
    """One ``key: value`` pair found in a style tree, with its location."""

    path: tuple[str, ...]
    key: str
    value: Any
    kind: KeyKind


def _spec_items(
    value: object, key: str, path: tuple[str, ...]
) -> list[tuple[Mapping[str, Any], tuple[str, ...]]]:
    if isinstance(value, Mapping):
        return [(value, path + (key,))]
    if isinstance(value, (list, tuple)):
        return [
            (raw, path + (f"{key}[{i}]",))
            for i, raw in enumerate(value)
            if isinstance(raw, Mapping)
        ]
    return []


def iter_entries(
    node: Mapping[str, Any], config: CompilerConfig, path: tuple[str, ...] = ()
) -> Iterator[Entry]:
    """Yield every entry in *node*, depth-first, in source order."""
    for key, value in node.items():
        kind = classify(key, value, config)
        entry_path = path + (key,)
        yield Entry(entry_path, key, value, kind)
        if kind is KeyKind.PSEUDO:
            body = {k: v for k, v in value.items() if k != PARAM_KEY}
            yield from iter_entries(body, config, entry_path)
        elif kind is KeyKind.BREAKPOINT:
            yield from iter_entries(value, config, entry_path)
        elif kind in (KeyKind.MODIFIER, KeyKind.CHILD):
            field_name = "name" if kind is KeyKind.MODIFIER else "selector"
            for raw, spec_path in _spec_items(value, key, path):
                body = {k: v for k, v in raw.items() if k != field_name}
                yield from iter_entries(body, config, spec_path)


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def _check_specs(
    node: StyleNode, config: CompilerConfig, kind: KeyKind, field_name: str, rule: str
) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for entry in iter_entries(node, config):
        if entry.kind is not kind:
            continue
        if not (is_node(entry.value) or is_node_sequence(entry.value)):
            diagnostics.append(
                Diagnostic(
                    rule=rule,
                    severity=Severity.ERROR,
                    message=f"'{entry.key}' must be a mapping or a list of mappings.",
                    path=entry.path,
                )
            )
            continue
        if not is_node(entry.value) and not entry.value:
            diagnostics.append(
                Diagnostic(
                    rule=rule,
                    severity=Severity.ERROR,
                    message=f"'{entry.key}' is an empty list and produces no rule.",
                    path=entry.path,
                    fix=f"Remove '{entry.key}' or add at least one spec.",
                )
            )
            continue
        for raw, spec_path in _spec_items(entry.value, entry.key, entry.path[:-1]):
            value = raw.get(field_name)
            if not isinstance(value, str) or not value.strip():
                diagnostics.append(
                    Diagnostic(
                        rule=rule,
                        severity=Severity.ERROR,
                        message=f"'{entry.key}' spec has no '{field_name}'.",
                        path=spec_path,
                        fix=f"Add a non-empty '{field_name}' string to the spec.",
                    )
                )
    return diagnostics


def check_modifier_specs(node: StyleNode, config: CompilerConfig) -> list[Diagnostic]:
    """Every modifier spec needs a ``name``."""
    return _check_specs(node, config, KeyKind.MODIFIER, "name", "check_modifier_specs")


def check_child_specs(node: StyleNode, config: CompilerConfig) -> list[Diagnostic]:
    """Every child spec needs a ``selector``."""
    return _check_specs(node, config, KeyKind.CHILD, "selector", "check_child_specs")


def check_pseudo_params(node: StyleNode, config: CompilerConfig) -> list[Diagnostic]:
    """Parameterized pseudos need ``param``; others should not carry one."""
    diagnostics: list[Diagnostic] = []
    for entry in iter_entries(node, config):
        if entry.kind is not KeyKind.PSEUDO:
            continue
        pseudo = PSEUDO_SELECTORS[entry.key]
        param = entry.value.get(PARAM_KEY)
        if param is None:
            if pseudo.parameterized:
                diagnostics.append(
                    Diagnostic(
                        rule="check_pseudo_params",
                        severity=Severity.ERROR,
                        message=f"'{entry.key}' requires a '{PARAM_KEY}' value.",
                        path=entry.path,
                        fix=f"Add e.g. '{PARAM_KEY}': '2n+1'.",
                    )
                )
        elif not is_scalar(param):
            diagnostics.append(
                Diagnostic(
                    rule="check_pseudo_params",
                    severity=Severity.ERROR,
                    message=f"'{PARAM_KEY}' must be a string or number.",
                    path=entry.path + (PARAM_KEY,),
                )
            )
        elif not pseudo.parameterized:
            diagnostics.append(
                Diagnostic(
                    rule="check_pseudo_params",
                    severity=Severity.WARNING,
                    message=(
                        f"'{entry.key}' does not take a parameter; "
                        f"'{pseudo.suffix}({param})' will be emitted."
                    ),
                    path=entry.path,
                    fix=f"Remove '{PARAM_KEY}'.",
                )
            )
    return diagnostics


def check_nested_unknown(node: StyleNode, config: CompilerConfig) -> list[Diagnostic]:
    """Nested blocks are only allowed under structural keys."""
    diagnostics: list[Diagnostic] = []
    for entry in iter_entries(node, config):
        if entry.kind is KeyKind.PROPERTY and (
            is_node(entry.value) or is_node_sequence(entry.value)
        ):
            diagnostics.append(
                Diagnostic(
                    rule="check_nested_unknown",
                    severity=Severity.ERROR,
                    message=(
                        f"'{entry.key}' is not a pseudo, breakpoint, "
                        f"'{config.modifier_key}' or '{config.child_key}' key "
                        "but holds a nested block."
                    ),
                    path=entry.path,
                )
            )
    return diagnostics


def check_numeric_values(node: StyleNode, config: CompilerConfig) -> list[Diagnostic]:
    """Declaration values must be strings or numbers the property accepts."""
    diagnostics: list[Diagnostic] = []
    for entry in iter_entries(node, config):
        if entry.kind is not KeyKind.PROPERTY:
            continue
        value = entry.value
        if is_node(value) or is_node_sequence(value):
            continue  # reported by check_nested_unknown
        prop = normalize_property(entry.key)
        if not is_scalar(value):
            diagnostics.append(
                Diagnostic(
                    rule="check_numeric_values",
                    severity=Severity.ERROR,
                    message=f"Unsupported value type {type(value).__name__} for '{prop}'.",
                    path=entry.path,
                )
            )
        elif not isinstance(value, str) and prop in config.non_numeric:
            diagnostics.append(
                Diagnostic(
                    rule="check_numeric_values",
                    severity=Severity.ERROR,
                    message=f"'{prop}' does not accept a bare number.",
                    path=entry.path,
                    fix="Pass the value as a string.",
                )
            )
        elif isinstance(value, float) and not math.isfinite(value):
            diagnostics.append(
                Diagnostic(
                    rule="check_numeric_values",
                    severity=Severity.ERROR,
                    message=f"'{prop}' has a non-finite value ({value!r}).",
                    path=entry.path,
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING severity)
# ---------------------------------------------------------------------------

_CONTENT_KEYWORDS = frozenset({
    "none",
    "normal",
    "open-quote",
    "close-quote",
    "no-open-quote",
    "no-close-quote",
    "inherit",
    "initial",
    "unset",
})


def check_empty_blocks(node: StyleNode, config: CompilerConfig) -> list[Diagnostic]:
    """Nested scopes without any entries produce no CSS."""
    diagnostics: list[Diagnostic] = []

    def _warn(path: tuple[str, ...]) -> None:
        diagnostics.append(
            Diagnostic(
                rule="check_empty_blocks",
                severity=Severity.WARNING,
                message="Nested block is empty and produces no CSS.",
                path=path,
            )
        )

    for entry in iter_entries(node, config):
        if entry.kind in (KeyKind.PSEUDO, KeyKind.BREAKPOINT):
            if not any(k != PARAM_KEY for k in entry.value):
                _warn(entry.path)
        elif entry.kind in (KeyKind.MODIFIER, KeyKind.CHILD):
            field_name = "name" if entry.kind is KeyKind.MODIFIER else "selector"
            for raw, spec_path in _spec_items(entry.value, entry.key, entry.path[:-1]):
                if not any(k != field_name for k in raw):
                    _warn(spec_path)
    return diagnostics


def check_content_quotes(node: StyleNode, config: CompilerConfig) -> list[Diagnostic]:
    """``content`` strings are emitted verbatim and usually need quotes."""
    diagnostics: list[Diagnostic] = []
    for entry in iter_entries(node, config):
        if entry.kind is not KeyKind.PROPERTY or not isinstance(entry.value, str):
            continue
        if normalize_property(entry.key) != "content":
            continue
        value = entry.value.strip()
        if value[:1] in ("'", '"') or value in _CONTENT_KEYWORDS or "(" in value:
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_content_quotes",
                severity=Severity.WARNING,
                message=f"content value {entry.value!r} is not quoted.",
                path=entry.path,
                fix=f"Use '\"{entry.value}\"' to emit a literal string.",
            )
        )
    return diagnostics


ALL_RULES = [
    check_modifier_specs,
    check_child_specs,
    check_pseudo_params,
    check_nested_unknown,
    check_numeric_values,
    check_empty_blocks,
    check_content_quotes,
]
