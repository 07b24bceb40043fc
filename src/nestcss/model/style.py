"""Style tree model: key kinds and structural (modifier/child) specs."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from nestcss.errors import StyleConfigError

# A style node is a plain mapping; values are declaration scalars, nested
# nodes, or sequences of nested nodes (modifier/child specs).
StyleValue = Union[str, int, float, Mapping[str, Any], Sequence[Mapping[str, Any]]]
StyleNode = Mapping[str, StyleValue]

PARAM_KEY = "param"


class KeyKind(Enum):
    """How a key in a style node is interpreted."""

    PROPERTY = "property"
    PSEUDO = "pseudo"
    BREAKPOINT = "breakpoint"
    MODIFIER = "modifier"
    CHILD = "child"


def is_scalar(value: object) -> bool:
    """Return True for values that serialize as a single declaration."""
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def is_node(value: object) -> bool:
    return isinstance(value, Mapping)


def is_node_sequence(value: object) -> bool:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    return all(isinstance(item, Mapping) for item in value)


@dataclass(frozen=True)
class ModifierSpec:
    """A class-qualified scope: ``<scope>.<name> { body }``."""

    name: str
    body: Mapping[str, Any]
    path: tuple[str, ...] = field(default=(), compare=False)


@dataclass(frozen=True)
class ChildSpec:
    """A descendant scope: ``<scope> <selector> { body }``."""

    selector: str
    body: Mapping[str, Any]
    path: tuple[str, ...] = field(default=(), compare=False)


def _raw_specs(
    value: object, key: str, path: tuple[str, ...]
) -> list[tuple[Mapping[str, Any], tuple[str, ...]]]:
    """Pair each raw spec with its location; a single mapping is a one-item list."""
    if isinstance(value, Mapping):
        return [(value, path + (key,))]
    if is_node_sequence(value):
        if not value:  # type: ignore[truthy-bool]
            raise StyleConfigError(f"'{key}' is an empty list", path + (key,))
        return [(raw, path + (f"{key}[{i}]",)) for i, raw in enumerate(value)]  # type: ignore[arg-type]
    raise StyleConfigError(
        f"'{key}' expects a mapping or a list of mappings, got {type(value).__name__}",
        path + (key,),
    )


def _split_spec(
    raw: Mapping[str, Any], field_name: str, path: tuple[str, ...]
) -> tuple[str, dict[str, Any]]:
    value = raw.get(field_name)
    if not isinstance(value, str) or not value.strip():
        raise StyleConfigError(f"spec is missing required '{field_name}' string", path)
    body = {k: v for k, v in raw.items() if k != field_name}
    return value, body


def modifier_specs(
    value: object, key: str = "class", path: tuple[str, ...] = ()
) -> list[ModifierSpec]:
    """Normalize a modifier entry found under *key* at *path* to specs.

    A leading dot on ``name`` is tolerated (``".active"`` == ``"active"``).
    """
    specs: list[ModifierSpec] = []
    for raw, spec_path in _raw_specs(value, key, path):
        name, body = _split_spec(raw, "name", spec_path)
        specs.append(ModifierSpec(name=name.strip().lstrip("."), body=body, path=spec_path))
    return specs


def child_specs(
    value: object, key: str = "child", path: tuple[str, ...] = ()
) -> list[ChildSpec]:
    """Normalize a child entry found under *key* at *path* to specs.

    The selector is kept verbatim; it is never validated.
    """
    specs: list[ChildSpec] = []
    for raw, spec_path in _raw_specs(value, key, path):
        selector, body = _split_spec(raw, "selector", spec_path)
        specs.append(ChildSpec(selector=selector, body=body, path=spec_path))
    return specs
