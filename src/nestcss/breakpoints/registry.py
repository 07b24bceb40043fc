"""Breakpoint registry: named media-query predicates and their inheritance.

A breakpoint *inherits from* another when styles declared for the other are
also visible at it.  Inheritance is a fixed, non-transitive lookup table:
``print`` inherits only from ``tablet`` even though ``tablet`` itself
inherits from ``small``.  A mobile-only breakpoint applies at its own width
and nowhere else, so it neither inherits nor is inherited.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Breakpoint:
    """A single named breakpoint."""

    name: str
    predicate: str
    inherits_from: tuple[str, ...] = ()
    mobile_only: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Breakpoint name must be a non-empty string")
        if not self.predicate:
            raise ValueError(f"Breakpoint '{self.name}' needs a media predicate")

    @property
    def media(self) -> str:
        """The ``@media`` prelude for this breakpoint."""
        return f"@media {self.predicate}"


@dataclass(frozen=True)
class BreakpointRegistry:
    """An immutable, ordered table of breakpoints keyed by name."""

    breakpoints: tuple[Breakpoint, ...] = ()
    _by_name: dict[str, Breakpoint] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        by_name: dict[str, Breakpoint] = {}
        for bp in self.breakpoints:
            if bp.name in by_name:
                raise ValueError(f"Duplicate breakpoint name: {bp.name!r}")
            by_name[bp.name] = bp
        object.__setattr__(self, "_by_name", by_name)
        self._check_consistency()

    def _check_consistency(self) -> None:
        for bp in self.breakpoints:
            if bp.mobile_only and bp.inherits_from:
                raise ValueError(
                    f"Mobile-only breakpoint '{bp.name}' cannot inherit from other breakpoints"
                )
            for parent in bp.inherits_from:
                if parent == bp.name:
                    raise ValueError(f"Breakpoint '{bp.name}' cannot inherit from itself")
                if parent not in self._by_name:
                    raise ValueError(
                        f"Breakpoint '{bp.name}' inherits from unknown breakpoint '{parent}'"
                    )
                if self._by_name[parent].mobile_only:
                    raise ValueError(
                        f"Breakpoint '{bp.name}' cannot inherit from mobile-only breakpoint '{parent}'"
                    )

    # --- lookup ---------------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Breakpoint]:
        return iter(self.breakpoints)

    def __len__(self) -> int:
        return len(self.breakpoints)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(bp.name for bp in self.breakpoints)

    def get(self, name: str) -> Breakpoint:
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"Unknown breakpoint: {name!r}") from None

    def predicate(self, name: str) -> str:
        return self.get(name).predicate

    def visible_at(self, name: str) -> tuple[str, ...]:
        """Breakpoints whose styles apply at *name*: itself plus its parents."""
        bp = self.get(name)
        return (bp.name,) + bp.inherits_from

    def implies(self, context: str | None, name: str) -> bool:
        """True when being inside *context* already guarantees *name* applies."""
        if context is None:
            return False
        return name in self.visible_at(context)

    # --- construction ---------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BreakpointRegistry:
        """Build a registry from ``{name: {predicate, inherits_from, mobile_only}}``.

        A bare string value is shorthand for ``{"predicate": value}``.
        """
        breakpoints: list[Breakpoint] = []
        for name, raw in data.items():
            if isinstance(raw, str):
                raw = {"predicate": raw}
            if not isinstance(raw, Mapping):
                raise ValueError(f"Breakpoint '{name}' must be a string or a mapping")
            predicate = raw.get("predicate")
            if not isinstance(predicate, str) or not predicate.strip():
                raise ValueError(f"Breakpoint '{name}' needs a non-empty string predicate")
            inherits = raw.get("inherits_from", ())
            if isinstance(inherits, str):
                inherits = (inherits,)
            if not isinstance(inherits, (list, tuple)) or not all(
                isinstance(parent, str) for parent in inherits
            ):
                raise ValueError(
                    f"Breakpoint '{name}': inherits_from must be a name or a list of names"
                )
            breakpoints.append(
                Breakpoint(
                    name=name,
                    predicate=predicate,
                    inherits_from=tuple(inherits),
                    mobile_only=bool(raw.get("mobile_only", False)),
                )
            )
        return cls(tuple(breakpoints))

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {
            bp.name: {
                "predicate": bp.predicate,
                "inherits_from": list(bp.inherits_from),
                "mobile_only": bp.mobile_only,
            }
            for bp in self.breakpoints
        }


DEFAULT_BREAKPOINTS = BreakpointRegistry(
    (
        Breakpoint("mobile", "only screen and (max-width: 575px)", mobile_only=True),
        Breakpoint("small", "only screen and (min-width: 576px)"),
        Breakpoint(
            "tablet",
            "print, only screen and (min-width: 768px)",
            inherits_from=("small",),
        ),
        Breakpoint(
            "large",
            "only screen and (min-width: 992px)",
            inherits_from=("tablet", "small"),
        ),
        Breakpoint(
            "xlarge",
            "only screen and (min-width: 1200px)",
            inherits_from=("large", "tablet", "small"),
        ),
        Breakpoint("print", "print", inherits_from=("tablet",)),
    )
)
