"""
Docstring appender - concatenate example text onto original documentation.

Manifesto:
    An append is a read-modify-write against a documentation registry:
    read the baseline (through the cache), add the extra text, write the
    result back. The baseline always comes from the cache, so the live
    text is ``baseline + extras`` no matter how often the step runs.

    - **Baseline-relative:** Live text = cached original + applied extras
    - **Mode-controlled repeats:** ACCUMULATE repeats text, IDEMPOTENT does not
    - **Fire-and-forget:** No return value; registry errors propagate

Architecture:
    ::

        append_doc(identifier, extra_text, kind)
            │
            ├─ extra_text is str?  ✗ → InvalidDocTextError
            ├─ baseline = cache.get_original(identifier, kind)
            ├─ cache.extras(identifier, kind) += extra_text
            │      (IDEMPOTENT: skipped if already present)
            └─ registry.write(identifier, kind, baseline + "".join(extras))

    Examples over baseline "A"::

        ACCUMULATE:  X, Y → "AXY"    X, X → "AXX"
        IDEMPOTENT:  X, Y → "AXY"    X, X → "AX"

Concurrency:
    None. The cache read and the registry write are not atomic, so two
    threads appending to the same key can lose a segment. Augmentation
    is expected to run once, sequentially, at startup.

Examples:
    >>> from docspine.core.registry import InMemoryDocRegistry
    >>> registry = InMemoryDocRegistry()
    >>> appender = DocAppender(registry)
    >>> appender.append_doc("foo", "\\n\\nExample: (foo 1)")
    >>> registry.read("foo", DocKind.CALLABLE)
    '\\n\\nExample: (foo 1)'
    >>> appender.get_original("foo")
    ''

Tags:
    docstring, append, idempotency, registry, docspine
"""

from __future__ import annotations

from docspine.core.cache import DocstringCache, get_object_cache
from docspine.core.enums import AppendMode, DocKind
from docspine.core.errors import InvalidDocTextError
from docspine.core.logging import get_logger
from docspine.core.registry import DocRegistry, ObjectDocRegistry

logger = get_logger(__name__)


class DocAppender:
    """Append text to documentation held by a registry.

    Args:
        registry: Where documentation is read from and written to.
        cache: Baseline cache. If omitted, appenders over an ObjectDocRegistry
            share the process-wide ``get_object_cache()``; any other registry
            gets a cache of its own.
        mode: Behavior of repeated appends (see module docstring).
    """

    def __init__(
        self,
        registry: DocRegistry,
        cache: DocstringCache | None = None,
        mode: AppendMode | str = AppendMode.IDEMPOTENT,
    ):
        self._registry = registry
        if cache is None:
            cache = get_object_cache() if isinstance(registry, ObjectDocRegistry) else DocstringCache(registry)
        self._cache = cache
        self._mode = AppendMode(mode)

    @property
    def registry(self) -> DocRegistry:
        return self._registry

    @property
    def cache(self) -> DocstringCache:
        return self._cache

    @property
    def mode(self) -> AppendMode:
        return self._mode

    def get_original(self, identifier: str, kind: DocKind | str = DocKind.CALLABLE) -> str:
        return self._cache.get_original(identifier, kind)

    def append_doc(
        self,
        identifier: str,
        extra_text: str,
        kind: DocKind | str = DocKind.CALLABLE,
    ) -> None:
        """Append ``extra_text`` to the documentation of ``identifier``."""
        if not isinstance(extra_text, str):
            raise InvalidDocTextError(identifier, extra_text)

        kind = DocKind.coerce(kind)
        baseline = self._cache.get_original(identifier, kind)
        segments = self._cache.extras(identifier, kind)

        if self._mode is AppendMode.IDEMPOTENT and extra_text in segments:
            logger.debug(
                "doc_append_skipped",
                identifier=identifier,
                kind=kind.value,
                reason="already_applied",
            )
        else:
            segments.append(extra_text)

        text = baseline + "".join(segments)
        self._registry.write(identifier, kind, text)
        logger.debug(
            "doc_appended",
            identifier=identifier,
            kind=kind.value,
            baseline_len=len(baseline),
            live_len=len(text),
            segments=len(segments),
        )

    def segments(self, identifier: str, kind: DocKind | str = DocKind.CALLABLE) -> list[str]:
        """Extra texts applied so far for ``(identifier, kind)``, in order."""
        return list(self._cache.extras(identifier, kind))


# ── Process-wide default ─────────────────────────────────────────────────

_default_appender: DocAppender | None = None


def get_default_appender() -> DocAppender:
    """The process-wide appender over live Python objects.

    Built on first use with the configured ``append_mode``.
    """
    global _default_appender
    if _default_appender is None:
        from docspine.core.settings import get_settings

        _default_appender = DocAppender(ObjectDocRegistry(), mode=get_settings().append_mode)
    return _default_appender


def reset_default_appender() -> None:
    """Drop the process-wide appender.

    Baselines and extras live in ``get_object_cache()`` and survive this, so
    a rebuilt appender still sees the original documentation.
    """
    global _default_appender
    _default_appender = None


def get_original(identifier: str, kind: DocKind | str = DocKind.CALLABLE) -> str:
    """Original documentation of ``identifier`` via the process-wide appender."""
    return get_default_appender().get_original(identifier, kind)


def append_doc(identifier: str, extra_text: str, kind: DocKind | str = DocKind.CALLABLE) -> None:
    """Append ``extra_text`` via the process-wide appender."""
    get_default_appender().append_doc(identifier, extra_text, kind)
