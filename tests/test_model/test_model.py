"""Tests for style-tree model types and key classification."""

import pytest

from nestcss.compiler import classify
from nestcss.config import DEFAULT_CONFIG, CompilerConfig
from nestcss.errors import StyleConfigError, StyleError
from nestcss.model import (
    ChildSpec,
    CompiledOutput,
    Diagnostic,
    KeyKind,
    ModifierSpec,
    Severity,
    child_specs,
    modifier_specs,
)
from nestcss.pseudo import PSEUDO_SELECTORS, pseudo_suffix


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestClassify:
    @pytest.mark.parametrize(
        "key, value, kind",
        [
            ("color", "red", KeyKind.PROPERTY),
            ("hover", {"color": "red"}, KeyKind.PSEUDO),
            ("hover", "red", KeyKind.PROPERTY),
            ("tablet", {"color": "red"}, KeyKind.BREAKPOINT),
            ("class", {"name": "a"}, KeyKind.MODIFIER),
            ("class", [{"name": "a"}], KeyKind.MODIFIER),
            ("child", {"selector": "a"}, KeyKind.CHILD),
            ("class", "active", KeyKind.MODIFIER),
            ("child", "> a", KeyKind.CHILD),
            ("class", [], KeyKind.MODIFIER),
            ("wibble", "x", KeyKind.PROPERTY),
            ("wibble", {"x": 1}, KeyKind.PROPERTY),
        ],
    )
    def test_kinds(self, key, value, kind):
        assert classify(key, value, DEFAULT_CONFIG) is kind

    def test_structural_keys_come_from_config(self):
        config = CompilerConfig(child_key="descendant")
        assert classify("descendant", {"selector": "a"}, config) is KeyKind.CHILD
        assert classify("child", {"selector": "a"}, config) is KeyKind.PROPERTY

    def test_keys_must_differ(self):
        with pytest.raises(ValueError):
            CompilerConfig(modifier_key="x", child_key="x")


# ---------------------------------------------------------------------------
# Structural specs
# ---------------------------------------------------------------------------


class TestModifierSpecs:
    def test_single_mapping(self):
        specs = modifier_specs({"name": "active", "color": "red"})
        assert specs == [ModifierSpec(name="active", body={"color": "red"})]
        assert specs[0].path == ("class",)

    def test_sequence_paths(self):
        specs = modifier_specs([{"name": "a"}, {"name": "b"}], "class", ("hover",))
        assert [s.name for s in specs] == ["a", "b"]
        assert [s.path for s in specs] == [("hover", "class[0]"), ("hover", "class[1]")]

    def test_leading_dot_tolerated(self):
        assert modifier_specs({"name": ".on"})[0].name == "on"

    def test_missing_name(self):
        with pytest.raises(StyleConfigError, match="'name'"):
            modifier_specs({"color": "red"})

    def test_blank_name(self):
        with pytest.raises(StyleConfigError):
            modifier_specs({"name": "  "})

    def test_wrong_shape(self):
        with pytest.raises(StyleConfigError, match="mapping"):
            modifier_specs("active")

    def test_empty_list_rejected(self):
        with pytest.raises(StyleConfigError, match="empty list") as excinfo:
            modifier_specs([], "class", ("hover",))
        assert excinfo.value.path == ("hover", "class")


class TestChildSpecs:
    def test_selector_verbatim(self):
        specs = child_specs({"selector": " > a ", "color": "blue"})
        assert specs == [ChildSpec(selector=" > a ", body={"color": "blue"})]

    def test_missing_selector(self):
        with pytest.raises(StyleConfigError) as excinfo:
            child_specs([{"selector": "a"}, {}], "child")
        assert excinfo.value.path == ("child[1]",)
        assert isinstance(excinfo.value, StyleError)

    def test_empty_list_rejected(self):
        with pytest.raises(StyleConfigError, match="empty list"):
            child_specs([])


# ---------------------------------------------------------------------------
# Pseudo table
# ---------------------------------------------------------------------------


class TestPseudoTable:
    def test_elements_use_double_colon(self):
        for key in ("before", "after", "placeholder"):
            assert PSEUDO_SELECTORS[key].suffix.startswith("::")

    def test_classes_use_single_colon(self):
        for key in ("hover", "focus", "active", "visited", "disabled", "checked"):
            suffix = PSEUDO_SELECTORS[key].suffix
            assert suffix.startswith(":") and not suffix.startswith("::")

    def test_parameterized(self):
        assert PSEUDO_SELECTORS["nthChild"].parameterized
        assert pseudo_suffix(PSEUDO_SELECTORS["nthChild"], "2n") == ":nth-child(2n)"
        assert pseudo_suffix(PSEUDO_SELECTORS["lastChild"], None) == ":last-child"


# ---------------------------------------------------------------------------
# Output & diagnostics
# ---------------------------------------------------------------------------


class TestCompiledOutput:
    def test_to_css(self):
        out = CompiledOutput("color:red;", ("&:hover{color:blue;}",))
        assert out.to_css() == "color:red;&:hover{color:blue;}"
        assert str(out) == out.to_css()
        assert not out.is_empty

    def test_empty(self):
        assert CompiledOutput().is_empty

    def test_frozen(self):
        with pytest.raises(AttributeError):
            CompiledOutput().declarations = "x"  # type: ignore[misc]


class TestDiagnostic:
    def test_str_with_path(self):
        d = Diagnostic(
            rule="r", severity=Severity.ERROR, message="bad", path=("hover", "class[0]")
        )
        assert str(d) == "ERROR [hover > class[0]]: bad"
        assert d.is_error and not d.is_warning

    def test_str_at_root(self):
        d = Diagnostic(rule="r", severity=Severity.WARNING, message="meh")
        assert str(d) == "WARNING [<root>]: meh"


class TestStyleError:
    def test_message_includes_path(self):
        err = StyleConfigError("boom", ("hover", "color"))
        assert str(err) == "boom (at hover > color)"
        assert err.reason == "boom"
