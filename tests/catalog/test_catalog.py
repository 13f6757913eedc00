"""
Tests for docspine.catalog.

Covers:
- Catalog shape: topics, identifiers, example text conventions
- entries_for topic filtering
- apply_catalog against in-memory and live registries
- Re-application under both append modes
"""

import pytest

from docspine.catalog import CATALOG, TOPICS, apply_catalog, entries_for
from docspine.catalog.models import AppliedAugmentation, Augmentation
from docspine.core.appender import DocAppender
from docspine.core.enums import AppendMode, DocKind
from docspine.core.errors import UnknownTopicError
from docspine.core.registry import InMemoryDocRegistry, ObjectDocRegistry, resolve_identifier


class TestCatalogContents:
    """Static checks over the catalog data."""

    def test_topics(self):
        assert TOPICS == ("iteration", "mapping", "sorting", "classes")

    def test_every_entry_has_known_topic(self):
        assert {entry.topic for entry in CATALOG} == set(TOPICS)

    def test_keys_unique(self):
        keys = [(entry.identifier, entry.kind) for entry in CATALOG]
        assert len(keys) == len(set(keys))

    @pytest.mark.parametrize("entry", CATALOG, ids=lambda e: e.identifier)
    def test_identifier_resolves(self, entry):
        resolve_identifier(entry.identifier)

    @pytest.mark.parametrize("entry", CATALOG, ids=lambda e: e.identifier)
    def test_text_conventions(self, entry):
        """Text starts on a new paragraph and links to the Python docs."""
        assert entry.text.startswith("\n\n")
        assert "https://docs.python.org/3/" in entry.text
        assert ">>>" in entry.text

    def test_variable_entries_present(self):
        variables = [entry.identifier for entry in CATALOG if entry.kind is DocKind.VARIABLE]
        assert "sys.maxsize" in variables


class TestEntriesFor:
    """Test topic filtering."""

    def test_no_topics_returns_all(self):
        assert entries_for() == CATALOG
        assert entries_for([]) == CATALOG

    def test_single_topic(self):
        entries = entries_for(["sorting"])
        assert entries
        assert all(entry.topic == "sorting" for entry in entries)
        assert "builtins.sorted" in [entry.identifier for entry in entries]

    def test_keeps_catalog_order(self):
        entries = entries_for(["classes", "iteration"])
        assert entries == tuple(e for e in CATALOG if e.topic in ("classes", "iteration"))

    def test_unknown_topic(self):
        with pytest.raises(UnknownTopicError):
            entries_for(["macros"])


class TestApplyCatalog:
    """Test apply_catalog."""

    def test_in_memory_registry(self):
        registry = InMemoryDocRegistry()
        applied = apply_catalog(DocAppender(registry))

        assert len(applied) == len(CATALOG)
        assert all(isinstance(a, AppliedAugmentation) for a in applied)
        for entry in CATALOG:
            assert registry.read(entry.identifier, entry.kind) == entry.text

    def test_applied_lengths(self):
        registry = InMemoryDocRegistry({("builtins.sorted", DocKind.CALLABLE): "Sort."})
        entry = next(e for e in CATALOG if e.identifier == "builtins.sorted")
        [result] = apply_catalog(DocAppender(registry), [entry])
        assert result.baseline_len == len("Sort.")
        assert result.live_len == len("Sort.") + len(entry.text)
        assert result.to_dict()["kind"] == "callable"

    def test_custom_entries(self):
        registry = InMemoryDocRegistry({("foo", DocKind.CALLABLE): "A"})
        entries = [
            Augmentation("foo", "X", topic="t"),
            Augmentation("foo", "Y", topic="t"),
            Augmentation("foo", "V", kind=DocKind.VARIABLE, topic="t"),
        ]
        apply_catalog(DocAppender(registry), entries)
        assert registry.read("foo", DocKind.CALLABLE) == "AXY"
        assert registry.read("foo", DocKind.VARIABLE) == "V"

    def test_reapply_idempotent(self):
        registry = InMemoryDocRegistry()
        appender = DocAppender(registry, mode=AppendMode.IDEMPOTENT)
        apply_catalog(appender)
        first = registry.snapshot()
        apply_catalog(appender)
        assert registry.snapshot() == first

    def test_reapply_accumulates(self):
        registry = InMemoryDocRegistry()
        appender = DocAppender(registry, mode=AppendMode.ACCUMULATE)
        apply_catalog(appender)
        apply_catalog(appender)
        entry = CATALOG[0]
        assert registry.read(entry.identifier, entry.kind) == entry.text * 2

    @pytest.mark.integration
    def test_live_objects_keep_original_prefix(self):
        """Against a fresh ObjectDocRegistry, live text = original + example."""
        registry = ObjectDocRegistry()
        appender = DocAppender(registry)
        entries = entries_for(["sorting"])
        originals = {e.identifier: appender.get_original(e.identifier, e.kind) for e in entries}

        apply_catalog(appender, entries)

        for entry in entries:
            live = registry.read(entry.identifier, entry.kind)
            assert live == originals[entry.identifier] + entry.text
        assert registry.read("builtins.sorted", DocKind.CALLABLE).startswith(sorted.__doc__)
