"""Pseudo-class and pseudo-element keys recognized in style trees."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Pseudo", "PSEUDO_SELECTORS", "pseudo_suffix"]


@dataclass(frozen=True)
class Pseudo:
    """A pseudo key's selector suffix.

    ``name`` is the CSS identifier (``nth-child``); ``element`` selects the
    double-colon form; ``parameterized`` pseudos require a ``param`` value
    rendered in functional notation.
    """

    name: str
    element: bool = False
    parameterized: bool = False

    @property
    def suffix(self) -> str:
        return ("::" if self.element else ":") + self.name


def _cls(name: str) -> Pseudo:
    return Pseudo(name)


def _fn(name: str) -> Pseudo:
    return Pseudo(name, parameterized=True)


def _el(name: str) -> Pseudo:
    return Pseudo(name, element=True)


PSEUDO_SELECTORS: dict[str, Pseudo] = {
    # user action / input state
    "hover": _cls("hover"),
    "focus": _cls("focus"),
    "focusWithin": _cls("focus-within"),
    "focusVisible": _cls("focus-visible"),
    "active": _cls("active"),
    "visited": _cls("visited"),
    "link": _cls("link"),
    "target": _cls("target"),
    "disabled": _cls("disabled"),
    "enabled": _cls("enabled"),
    "checked": _cls("checked"),
    "required": _cls("required"),
    "optional": _cls("optional"),
    "invalid": _cls("invalid"),
    "valid": _cls("valid"),
    "readOnly": _cls("read-only"),
    "placeholderShown": _cls("placeholder-shown"),
    # tree structure
    "root": _cls("root"),
    "empty": _cls("empty"),
    "firstChild": _cls("first-child"),
    "lastChild": _cls("last-child"),
    "onlyChild": _cls("only-child"),
    "firstOfType": _cls("first-of-type"),
    "lastOfType": _cls("last-of-type"),
    "onlyOfType": _cls("only-of-type"),
    "nthChild": _fn("nth-child"),
    "nthLastChild": _fn("nth-last-child"),
    "nthOfType": _fn("nth-of-type"),
    "nthLastOfType": _fn("nth-last-of-type"),
    # functional
    "not": _fn("not"),
    "is": _fn("is"),
    "where": _fn("where"),
    "has": _fn("has"),
    "lang": _fn("lang"),
    "dir": _fn("dir"),
    # pseudo-elements
    "before": _el("before"),
    "after": _el("after"),
    "placeholder": _el("placeholder"),
    "selection": _el("selection"),
    "firstLetter": _el("first-letter"),
    "firstLine": _el("first-line"),
    "marker": _el("marker"),
    "backdrop": _el("backdrop"),
}


def pseudo_suffix(pseudo: Pseudo, param: str | None) -> str:
    """Selector suffix for *pseudo*, with ``(param)`` when one is given."""
    if param is None:
        return pseudo.suffix
    return f"{pseudo.suffix}({param})"
