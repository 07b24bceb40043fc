"""Compiler output model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CompiledOutput:
    """Result of compiling one style scope.

    Attributes:
        declarations: ``prop:value;`` pairs belonging to the current scope only.
        auxiliary_rules: Fully qualified rules for nested scopes, in emission order.
    """

    declarations: str = ""
    auxiliary_rules: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.declarations and not self.auxiliary_rules

    def to_css(self) -> str:
        """Declarations followed by every auxiliary rule."""
        return self.declarations + "".join(self.auxiliary_rules)

    def __str__(self) -> str:
        return self.to_css()
