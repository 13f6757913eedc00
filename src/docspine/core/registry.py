"""
Documentation registries - where documentation text is read and written.

The cache and appender never touch ``__doc__`` directly. They talk to a
``DocRegistry``, which makes the host's documentation store an explicit,
injectable collaborator instead of hidden global state.

Manifesto:
    - **Protocol-based:** DocRegistry defines the read/write contract
    - **Injectable:** Tests use InMemoryDocRegistry, the CLI uses ObjectDocRegistry
    - **No surprises:** A write is always visible to the next read

Architecture:
    ::

        DocRegistry (Protocol)
        ├── InMemoryDocRegistry  - plain (identifier, kind) → text mapping
        └── ObjectDocRegistry    - live Python objects + process-wide overlay

        API: key_for(identifier, kind) → symbol identity
             read(identifier, kind)  → text | None
             write(identifier, kind, text)

    ObjectDocRegistry resolution::

        "builtins.list.sort"
           │
           ├─ import "builtins.list"  ✗ (ModuleNotFoundError)
           ├─ import "builtins"       ✓
           └─ getattr → list → sort

Guardrails:
    ❌ DON'T: Assume every ``__doc__`` is writable
    ✅ DO: Read back through the registry (overlay wins for read-only objects)

    ❌ DON'T: Read ``sys.maxsize.__doc__`` as the variable's docs (that's int's)
    ✅ DO: Use DocKind.VARIABLE, which lives in the overlay only

Tags:
    registry, protocol, docstring, introspection, docspine
"""

from __future__ import annotations

import importlib
from collections.abc import Hashable, Mapping
from typing import Any, Protocol

from docspine.core.enums import DocKind
from docspine.core.errors import UnknownIdentifierError
from docspine.core.logging import get_logger

logger = get_logger(__name__)

Key = tuple[Hashable, DocKind]


class DocRegistry(Protocol):
    """Protocol for documentation registries."""

    def key_for(self, identifier: str, kind: DocKind) -> Key:
        """Hashable identity of the symbol ``(identifier, kind)`` names."""
        ...

    def read(self, identifier: str, kind: DocKind) -> str | None:
        """Return the current documentation text, or ``None`` if there is none."""
        ...

    def write(self, identifier: str, kind: DocKind, text: str) -> None:
        """Replace the documentation text for ``(identifier, kind)``."""
        ...


# ------------------------------------------------------------------ #
# In-Memory Registry
# ------------------------------------------------------------------ #


class InMemoryDocRegistry:
    """Mapping-backed registry.

    Unknown keys read as ``None``; nothing is ever resolved, so any string
    is a valid identifier.

    Example:
        registry = InMemoryDocRegistry({("foo", DocKind.CALLABLE): "A"})
        registry.read("foo", DocKind.CALLABLE)   # "A"
        registry.read("bar", DocKind.CALLABLE)   # None
    """

    def __init__(self, initial: Mapping[tuple[str, DocKind | str], str] | None = None):
        self._store: dict[Key, str] = {}
        if initial:
            for (identifier, kind), text in initial.items():
                self.seed(identifier, text, kind)

    def seed(self, identifier: str, text: str, kind: DocKind | str = DocKind.CALLABLE) -> None:
        """Set initial text for a key (same as write, with kind defaulted)."""
        self.write(identifier, DocKind.coerce(kind), text)

    def key_for(self, identifier: str, kind: DocKind) -> Key:
        return (identifier, DocKind.coerce(kind))

    def read(self, identifier: str, kind: DocKind) -> str | None:
        return self._store.get((identifier, DocKind.coerce(kind)))

    def write(self, identifier: str, kind: DocKind, text: str) -> None:
        self._store[(identifier, DocKind.coerce(kind))] = text

    def snapshot(self) -> dict[Key, str]:
        """Copy of the current contents."""
        return dict(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)


# ------------------------------------------------------------------ #
# Python object registry
# ------------------------------------------------------------------ #


def resolve_identifier(identifier: str) -> Any:
    """Import the object named by a dotted identifier.

    The longest importable module prefix is imported, then the remaining
    parts are looked up as attributes.

    Raises:
        UnknownIdentifierError: nothing importable under that name.
    """
    parts = identifier.split(".")
    if not identifier or not all(parts):
        raise UnknownIdentifierError(identifier, f"Malformed identifier: {identifier!r}")

    module = None
    import_error: Exception | None = None
    index = len(parts)
    while index > 0:
        module_name = ".".join(parts[:index])
        try:
            module = importlib.import_module(module_name)
            break
        except ImportError as e:
            if import_error is None:
                import_error = e
            index -= 1

    if module is None:
        raise UnknownIdentifierError(identifier, cause=import_error)

    obj: Any = module
    for attr in parts[index:]:
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise UnknownIdentifierError(identifier, cause=e) from e
    return obj


# ``__doc__`` is process-wide, so everything the object registry knows is
# too: every ObjectDocRegistry instance shares these.
_overlay: dict[Key, str] = {}
# id(obj) -> obj, keeps identity keys valid while they are in use
_pinned: dict[int, Any] = {}
# id(obj) -> (obj, __doc__ before docspine first wrote it)
_pristine: dict[int, tuple[Any, str | None]] = {}


class ObjectDocRegistry:
    """Registry backed by live Python objects.

    Callable documentation is the object's ``__doc__``. Objects whose
    ``__doc__`` cannot be set (builtin functions, extension types) get the
    written text stored in the overlay, which takes precedence on read.
    Variable documentation exists only in the overlay.

    Callables are keyed on the resolved object, so ``os.path.join`` and
    ``posixpath.join`` are one symbol. Variables are keyed on their dotted
    name (two names bound to the same int are different variables). The
    overlay is shared by all instances.

    Example:
        registry = ObjectDocRegistry()
        registry.read("functools.reduce", DocKind.CALLABLE)[:6]   # "reduce"
        registry.write("builtins.sorted", DocKind.CALLABLE, "...")
        ObjectDocRegistry().describe("builtins.sorted")            # "..."
    """

    def _resolve(self, identifier: str, kind: DocKind) -> tuple[Any, Key]:
        obj = resolve_identifier(identifier)
        if kind is DocKind.VARIABLE:
            return obj, (identifier, kind)
        _pinned.setdefault(id(obj), obj)
        return obj, (id(obj), kind)

    def key_for(self, identifier: str, kind: DocKind) -> Key:
        """Symbol identity of ``(identifier, kind)``."""
        return self._resolve(identifier, DocKind.coerce(kind))[1]

    def read(self, identifier: str, kind: DocKind) -> str | None:
        kind = DocKind.coerce(kind)
        obj, key = self._resolve(identifier, kind)
        if key in _overlay:
            return _overlay[key]
        if kind is DocKind.VARIABLE:
            return None
        return getattr(obj, "__doc__", None)

    def write(self, identifier: str, kind: DocKind, text: str) -> None:
        kind = DocKind.coerce(kind)
        obj, key = self._resolve(identifier, kind)
        if kind is DocKind.CALLABLE:
            previous = getattr(obj, "__doc__", None)
            try:
                obj.__doc__ = text
            except (AttributeError, TypeError):
                logger.debug("doc_read_only", identifier=identifier, type=type(obj).__name__)
                _overlay[key] = text
                return
            _pristine.setdefault(id(obj), (obj, previous))
            _overlay.pop(key, None)
            return
        _overlay[key] = text

    def describe(self, identifier: str, kind: DocKind | str = DocKind.CALLABLE) -> str:
        """Documentation lookup: the live text, or "" when there is none."""
        return self.read(identifier, DocKind.coerce(kind)) or ""

    def overlaid(self, identifier: str, kind: DocKind | str = DocKind.CALLABLE) -> bool:
        """True if the text for ``(identifier, kind)`` is held by the overlay."""
        return self.key_for(identifier, DocKind.coerce(kind)) in _overlay


def reset_object_docs() -> None:
    """Put back every ``__doc__`` docspine wrote and empty the overlay.

    For tests and long-lived hosts that need a clean slate; pair it with
    ``docspine.core.cache.reset_object_cache``.
    """
    for obj, doc in _pristine.values():
        obj.__doc__ = doc
    _pristine.clear()
    _overlay.clear()
    _pinned.clear()


__all__ = [
    "DocRegistry",
    "InMemoryDocRegistry",
    "ObjectDocRegistry",
    "reset_object_docs",
    "resolve_identifier",
]
