"""
Tests for docspine.core.registry module.

Covers:
- InMemoryDocRegistry read/write/seed/snapshot
- resolve_identifier: modules, attributes, nested attributes, failures
- ObjectDocRegistry: writable __doc__, read-only overlay, variables
- Symbol identity across aliases and the shared overlay
- reset_object_docs
"""

import functools

import pytest

from docspine.core.enums import DocKind
from docspine.core.errors import ErrorCategory, UnknownIdentifierError
from docspine.core.registry import (
    InMemoryDocRegistry,
    ObjectDocRegistry,
    reset_object_docs,
    resolve_identifier,
)


class TestInMemoryDocRegistry:
    """Test InMemoryDocRegistry."""

    def test_unknown_key_reads_none(self):
        assert InMemoryDocRegistry().read("foo", DocKind.CALLABLE) is None

    def test_write_then_read(self):
        registry = InMemoryDocRegistry()
        registry.write("foo", DocKind.CALLABLE, "text")
        assert registry.read("foo", DocKind.CALLABLE) == "text"

    def test_kinds_are_separate(self):
        registry = InMemoryDocRegistry()
        registry.write("foo", DocKind.VARIABLE, "v")
        assert registry.read("foo", DocKind.CALLABLE) is None

    def test_initial_mapping_accepts_string_kinds(self):
        registry = InMemoryDocRegistry({("foo", "variable"): "v"})
        assert registry.read("foo", DocKind.VARIABLE) == "v"
        assert ("foo", DocKind.VARIABLE) in registry

    def test_seed_defaults_to_callable(self):
        registry = InMemoryDocRegistry()
        registry.seed("foo", "A")
        assert registry.read("foo", DocKind.CALLABLE) == "A"

    def test_snapshot_is_a_copy(self):
        registry = InMemoryDocRegistry({("foo", DocKind.CALLABLE): "A"})
        snap = registry.snapshot()
        registry.write("foo", DocKind.CALLABLE, "B")
        assert snap == {("foo", DocKind.CALLABLE): "A"}
        assert len(registry) == 1


class TestResolveIdentifier:
    """Test resolve_identifier."""

    def test_module(self):
        import json

        assert resolve_identifier("json") is json

    def test_module_attribute(self):
        assert resolve_identifier("functools.reduce") is functools.reduce

    def test_builtin(self):
        assert resolve_identifier("builtins.sorted") is sorted

    def test_nested_attribute(self):
        assert resolve_identifier("builtins.list.sort") is list.sort

    def test_submodule_attribute(self):
        import os.path

        assert resolve_identifier("os.path.join") is os.path.join

    def test_missing_attribute(self):
        with pytest.raises(UnknownIdentifierError) as exc_info:
            resolve_identifier("functools.not_a_function")
        err = exc_info.value
        assert err.category == ErrorCategory.RESOLUTION
        assert err.identifier == "functools.not_a_function"
        assert isinstance(err.__cause__, AttributeError)

    def test_missing_module(self):
        with pytest.raises(UnknownIdentifierError) as exc_info:
            resolve_identifier("no_such_module_xyz.thing")
        assert isinstance(exc_info.value.__cause__, ImportError)

    @pytest.mark.parametrize("identifier", ["", "functools.", ".reduce", "a..b"])
    def test_malformed(self, identifier):
        with pytest.raises(UnknownIdentifierError):
            resolve_identifier(identifier)


class TestObjectDocRegistryCallables:
    """CALLABLE documentation on live objects."""

    def test_read_function_doc(self, fixture_module):
        registry = ObjectDocRegistry()
        assert registry.read("docspine_fixture_mod.documented", DocKind.CALLABLE) == "Documented."

    def test_read_undocumented_is_none(self, fixture_module):
        registry = ObjectDocRegistry()
        assert registry.read("docspine_fixture_mod.bare", DocKind.CALLABLE) is None

    def test_write_sets_dunder_doc(self, fixture_module):
        registry = ObjectDocRegistry()
        registry.write("docspine_fixture_mod.documented", DocKind.CALLABLE, "new")
        assert fixture_module.documented.__doc__ == "new"
        assert not registry.overlaid("docspine_fixture_mod.documented")

    def test_write_class_doc(self, fixture_module):
        registry = ObjectDocRegistry()
        registry.write("docspine_fixture_mod.Widget", DocKind.CALLABLE, "A widget. More.")
        assert fixture_module.Widget.__doc__ == "A widget. More."

    def test_read_only_builtin_goes_to_overlay(self):
        """Builtins refuse __doc__ assignment; the overlay holds the text."""
        registry = ObjectDocRegistry()
        original = sorted.__doc__
        registry.write("builtins.sorted", DocKind.CALLABLE, "augmented")
        assert sorted.__doc__ == original
        assert registry.read("builtins.sorted", DocKind.CALLABLE) == "augmented"
        assert registry.overlaid("builtins.sorted")

    def test_read_only_type_goes_to_overlay(self):
        registry = ObjectDocRegistry()
        registry.write("builtins.map", DocKind.CALLABLE, "augmented")
        assert registry.read("builtins.map", DocKind.CALLABLE) == "augmented"
        assert map.__doc__ != "augmented"

    def test_overlay_is_shared_across_instances(self):
        """__doc__ is process-wide, so the overlay standing in for it is too."""
        ObjectDocRegistry().write("builtins.sorted", DocKind.CALLABLE, "augmented")
        assert ObjectDocRegistry().read("builtins.sorted", DocKind.CALLABLE) == "augmented"

    def test_unknown_identifier_raises(self):
        registry = ObjectDocRegistry()
        with pytest.raises(UnknownIdentifierError):
            registry.read("builtins.nope", DocKind.CALLABLE)
        with pytest.raises(UnknownIdentifierError):
            registry.write("builtins.nope", DocKind.CALLABLE, "x")


class TestObjectDocRegistryVariables:
    """VARIABLE documentation lives in the overlay."""

    def test_variable_has_no_original(self, fixture_module):
        """An int's type docstring is not the variable's documentation."""
        registry = ObjectDocRegistry()
        assert registry.read("docspine_fixture_mod.LIMIT", DocKind.VARIABLE) is None

    def test_variable_write_read(self, fixture_module):
        registry = ObjectDocRegistry()
        registry.write("docspine_fixture_mod.LIMIT", DocKind.VARIABLE, "Upper bound.")
        assert registry.read("docspine_fixture_mod.LIMIT", DocKind.VARIABLE) == "Upper bound."
        assert fixture_module.LIMIT == 42

    def test_variable_write_leaves_callable_slot(self, fixture_module):
        registry = ObjectDocRegistry()
        registry.write("docspine_fixture_mod.documented", DocKind.VARIABLE, "var doc")
        assert registry.read("docspine_fixture_mod.documented", DocKind.CALLABLE) == "Documented."

    def test_variable_must_resolve(self):
        registry = ObjectDocRegistry()
        with pytest.raises(UnknownIdentifierError):
            registry.read("sys.not_a_variable", DocKind.VARIABLE)


class TestDescribe:
    """Documentation lookup."""

    def test_describe_returns_live_text(self):
        registry = ObjectDocRegistry()
        registry.write("builtins.sorted", DocKind.CALLABLE, "augmented")
        assert registry.describe("builtins.sorted") == "augmented"

    def test_describe_missing_is_empty(self, fixture_module):
        registry = ObjectDocRegistry()
        assert registry.describe("docspine_fixture_mod.bare") == ""
        assert registry.describe("docspine_fixture_mod.LIMIT", "variable") == ""


class TestObjectIdentity:
    """Callables are keyed on the object, variables on the name."""

    def test_aliases_share_a_key(self, fixture_module):
        fixture_module.alias = fixture_module.documented
        registry = ObjectDocRegistry()
        assert registry.key_for("docspine_fixture_mod.alias", DocKind.CALLABLE) == registry.key_for(
            "docspine_fixture_mod.documented", DocKind.CALLABLE
        )

    def test_variables_keyed_by_name(self, fixture_module):
        fixture_module.OTHER_LIMIT = fixture_module.LIMIT
        registry = ObjectDocRegistry()
        registry.write("docspine_fixture_mod.LIMIT", DocKind.VARIABLE, "Upper bound.")
        assert registry.read("docspine_fixture_mod.OTHER_LIMIT", DocKind.VARIABLE) is None

    def test_overlay_text_visible_through_alias(self):
        """functools.reduce is _functools.reduce; a read-only builtin."""
        registry = ObjectDocRegistry()
        registry.write("functools.reduce", DocKind.CALLABLE, "augmented")
        assert registry.read("_functools.reduce", DocKind.CALLABLE) == "augmented"

    def test_key_for_unknown_identifier_raises(self):
        with pytest.raises(UnknownIdentifierError):
            ObjectDocRegistry().key_for("builtins.nope", DocKind.CALLABLE)


class TestResetObjectDocs:
    """reset_object_docs puts the process back the way it found it."""

    def test_restores_written_doc(self, fixture_module):
        registry = ObjectDocRegistry()
        registry.write("docspine_fixture_mod.documented", DocKind.CALLABLE, "one")
        registry.write("docspine_fixture_mod.documented", DocKind.CALLABLE, "two")
        reset_object_docs()
        assert fixture_module.documented.__doc__ == "Documented."

    def test_restores_missing_doc(self, fixture_module):
        ObjectDocRegistry().write("docspine_fixture_mod.bare", DocKind.CALLABLE, "now documented")
        reset_object_docs()
        assert fixture_module.bare.__doc__ is None

    def test_empties_overlay(self):
        registry = ObjectDocRegistry()
        registry.write("builtins.sorted", DocKind.CALLABLE, "augmented")
        reset_object_docs()
        assert not registry.overlaid("builtins.sorted")
        assert registry.read("builtins.sorted", DocKind.CALLABLE) == sorted.__doc__
