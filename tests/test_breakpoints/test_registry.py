"""Tests for the breakpoint registry."""

import pytest

from nestcss.breakpoints import DEFAULT_BREAKPOINTS, Breakpoint, BreakpointRegistry


class TestDefaultRegistry:
    def test_names_in_order(self):
        assert DEFAULT_BREAKPOINTS.names == ("mobile", "small", "tablet", "large", "xlarge", "print")

    def test_contains(self):
        assert "tablet" in DEFAULT_BREAKPOINTS
        assert "watch" not in DEFAULT_BREAKPOINTS

    def test_media_prelude(self):
        assert DEFAULT_BREAKPOINTS.get("print").media == "@media print"

    def test_mobile_only(self):
        mobile = DEFAULT_BREAKPOINTS.get("mobile")
        assert mobile.mobile_only
        assert DEFAULT_BREAKPOINTS.visible_at("mobile") == ("mobile",)

    def test_print_inherits_only_tablet(self):
        assert DEFAULT_BREAKPOINTS.visible_at("print") == ("print", "tablet")

    def test_large_sees_full_chain(self):
        assert DEFAULT_BREAKPOINTS.visible_at("large") == ("large", "tablet", "small")

    def test_tablet_predicate_covers_print(self):
        assert DEFAULT_BREAKPOINTS.predicate("tablet").startswith("print, ")
        assert "print" not in DEFAULT_BREAKPOINTS.predicate("large")


class TestImplies:
    def test_no_context(self):
        assert not DEFAULT_BREAKPOINTS.implies(None, "tablet")

    def test_same_breakpoint(self):
        assert DEFAULT_BREAKPOINTS.implies("mobile", "mobile")

    def test_inherited(self):
        assert DEFAULT_BREAKPOINTS.implies("xlarge", "small")

    def test_not_transitive_for_print(self):
        assert not DEFAULT_BREAKPOINTS.implies("print", "small")

    def test_narrower_not_implied(self):
        assert not DEFAULT_BREAKPOINTS.implies("tablet", "large")


class TestConsistency:
    def test_unknown_parent(self):
        with pytest.raises(ValueError, match="unknown"):
            BreakpointRegistry((Breakpoint("a", "x", inherits_from=("b",)),))

    def test_self_inheritance(self):
        with pytest.raises(ValueError, match="itself"):
            BreakpointRegistry((Breakpoint("a", "x", inherits_from=("a",)),))

    def test_mobile_only_cannot_inherit(self):
        with pytest.raises(ValueError, match="Mobile-only"):
            BreakpointRegistry(
                (
                    Breakpoint("a", "x"),
                    Breakpoint("m", "y", inherits_from=("a",), mobile_only=True),
                )
            )

    def test_cannot_inherit_mobile_only(self):
        with pytest.raises(ValueError, match="mobile-only"):
            BreakpointRegistry(
                (
                    Breakpoint("m", "y", mobile_only=True),
                    Breakpoint("a", "x", inherits_from=("m",)),
                )
            )

    def test_duplicate_names(self):
        with pytest.raises(ValueError, match="Duplicate"):
            BreakpointRegistry((Breakpoint("a", "x"), Breakpoint("a", "y")))

    def test_empty_predicate(self):
        with pytest.raises(ValueError):
            Breakpoint("a", "")

    def test_unknown_lookup(self):
        with pytest.raises(KeyError):
            DEFAULT_BREAKPOINTS.get("watch")


class TestFromDict:
    def test_shorthand_and_full_entries(self):
        registry = BreakpointRegistry.from_dict(
            {
                "phone": {"predicate": "(max-width: 30em)", "mobile_only": True},
                "desk": "(min-width: 64em)",
                "wall": {"predicate": "(min-width: 120em)", "inherits_from": "desk"},
            }
        )
        assert registry.names == ("phone", "desk", "wall")
        assert registry.get("phone").mobile_only
        assert registry.predicate("desk") == "(min-width: 64em)"
        assert registry.visible_at("wall") == ("wall", "desk")

    def test_default_survives_dict_conversion(self):
        assert BreakpointRegistry.from_dict(DEFAULT_BREAKPOINTS.to_dict()) == DEFAULT_BREAKPOINTS

    def test_invalid_entry(self):
        with pytest.raises(ValueError):
            BreakpointRegistry.from_dict({"a": 3})

    @pytest.mark.parametrize(
        "entry",
        [
            {"predicate": None},
            {"inherits_from": "desk"},
            {"predicate": "  "},
            {"predicate": 5},
        ],
    )
    def test_invalid_predicate(self, entry):
        with pytest.raises(ValueError, match="predicate"):
            BreakpointRegistry.from_dict({"wall": entry})

    @pytest.mark.parametrize("inherits", [5, None, {"desk": True}, ["desk", 3]])
    def test_invalid_inherits_from(self, inherits):
        with pytest.raises(ValueError, match="inherits_from"):
            BreakpointRegistry.from_dict(
                {
                    "desk": "(min-width: 64em)",
                    "wall": {"predicate": "(min-width: 120em)", "inherits_from": inherits},
                }
            )

    def test_breakpoint_is_frozen(self):
        bp = Breakpoint("a", "x")
        with pytest.raises(AttributeError):
            bp.name = "b"  # type: ignore[misc]
