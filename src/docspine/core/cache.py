"""
Docstring cache - the original documentation of each symbol, captured once.

Manifesto:
    Augmenting documentation means rewriting it, and once it is rewritten
    the original is gone. The cache reads each symbol from the registry
    exactly once and keeps that text as the baseline every later append
    is built on.

    - **Read once:** First access materializes the entry, later ones reuse it
    - **Never overwritten:** Registry writes do not touch cached baselines
    - **Uniform values:** Missing documentation is cached as ``""``, never None
    - **Symbol identity:** Entries are keyed on ``registry.key_for``, so two
      names for one object share a baseline

Architecture:
    ::

        get_original(identifier, kind)
            │
            ├─ key = registry.key_for(identifier, kind)
            ├─ key cached? ──► return baseline
            │
            └─ registry.read(identifier, kind)
                   │  None → ""
                   └─► store, return

    Live Python objects are one store per process, so their baselines are
    too: ``get_object_cache()`` is the cache every appender over an
    ObjectDocRegistry shares.

Examples:
    >>> from docspine.core.registry import InMemoryDocRegistry
    >>> registry = InMemoryDocRegistry({("foo", DocKind.CALLABLE): "A"})
    >>> cache = DocstringCache(registry)
    >>> cache.get_original("foo")
    'A'
    >>> registry.write("foo", DocKind.CALLABLE, "changed")
    >>> cache.get_original("foo")
    'A'

Guardrails:
    ❌ DON'T: Catch registry errors here
    ✅ DO: Let UnknownIdentifierError (or whatever the registry raises) propagate

    ❌ DON'T: Build a private DocstringCache over live objects after they were augmented
    ✅ DO: Use get_object_cache(), whose baselines were taken before the first write

Tags:
    cache, docstring, baseline, memoization, docspine
"""

from __future__ import annotations

from docspine.core.enums import DocKind
from docspine.core.errors import DocSpineError
from docspine.core.registry import DocRegistry, Key, ObjectDocRegistry


class DocstringCache:
    """Process-lifetime cache of original documentation text.

    Besides baselines it holds, per symbol, the extras appended on top of
    them, so every appender sharing the cache rebuilds the same live text.

    Not thread-safe; entries are populated with a plain check-then-store.
    """

    def __init__(self, registry: DocRegistry):
        self._registry = registry
        self._originals: dict[Key, str] = {}
        self._extras: dict[Key, list[str]] = {}

    @property
    def registry(self) -> DocRegistry:
        return self._registry

    def get_original(self, identifier: str, kind: DocKind | str = DocKind.CALLABLE) -> str:
        """Return the baseline text for ``(identifier, kind)``.

        The first call reads the registry; every later call returns that
        same text regardless of what has been written since.
        """
        kind = DocKind.coerce(kind)
        key = self._registry.key_for(identifier, kind)
        if key in self._originals:
            return self._originals[key]

        text = self._registry.read(identifier, kind)
        baseline = text if text is not None else ""
        self._originals[key] = baseline
        return baseline

    def extras(self, identifier: str, kind: DocKind | str = DocKind.CALLABLE) -> list[str]:
        """The mutable list of text appended after the baseline of a symbol."""
        key = self._registry.key_for(identifier, DocKind.coerce(kind))
        return self._extras.setdefault(key, [])

    def clear(self) -> None:
        """Forget all baselines and extras (tests only; the registry is not restored)."""
        self._originals.clear()
        self._extras.clear()

    def __contains__(self, key: object) -> bool:
        if isinstance(key, tuple) and len(key) == 2:
            identifier, kind = key
            try:
                return self._registry.key_for(identifier, DocKind.coerce(kind)) in self._originals
            except (ValueError, DocSpineError):
                return False
        return False

    def __len__(self) -> int:
        return len(self._originals)


# ── Process-wide cache for live objects ──────────────────────────────────

_object_cache: DocstringCache | None = None


def get_object_cache() -> DocstringCache:
    """The one baseline cache over live Python objects."""
    global _object_cache
    if _object_cache is None:
        _object_cache = DocstringCache(ObjectDocRegistry())
    return _object_cache


def reset_object_cache() -> None:
    """Forget live-object baselines (tests only; see ``reset_object_docs``)."""
    global _object_cache
    _object_cache = None
