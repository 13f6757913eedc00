"""
Catalog of documentation augmentations.

Each topic module holds a tuple of :class:`Augmentation` entries. The
catalog is static text; :func:`apply_catalog` feeds it to an appender,
one ``append_doc`` call per entry, in catalog order.

Examples:
    >>> from docspine.catalog import apply_catalog
    >>> applied = apply_catalog()
    >>> applied[0].identifier
    'builtins.enumerate'

Tags:
    catalog, examples, docstring, docspine
"""

from __future__ import annotations

from collections.abc import Iterable

from docspine.catalog import classes, iteration, mapping, sorting
from docspine.catalog.models import AppliedAugmentation, Augmentation
from docspine.core.appender import DocAppender, get_default_appender
from docspine.core.errors import UnknownTopicError
from docspine.core.logging import LogContext, get_logger

logger = get_logger(__name__)

_TOPIC_MODULES = (iteration, mapping, sorting, classes)

TOPICS: tuple[str, ...] = tuple(module.TOPIC for module in _TOPIC_MODULES)

CATALOG: tuple[Augmentation, ...] = tuple(
    entry for module in _TOPIC_MODULES for entry in module.ENTRIES
)


def entries_for(topics: Iterable[str] | None = None) -> tuple[Augmentation, ...]:
    """Catalog entries for the given topics (all entries when ``topics`` is empty)."""
    wanted = list(topics or ())
    if not wanted:
        return CATALOG
    for topic in wanted:
        if topic not in TOPICS:
            raise UnknownTopicError(topic, TOPICS)
    return tuple(entry for entry in CATALOG if entry.topic in wanted)


def apply_catalog(
    appender: DocAppender | None = None,
    entries: Iterable[Augmentation] | None = None,
) -> list[AppliedAugmentation]:
    """Append every entry's text to its identifier's documentation.

    Args:
        appender: Target appender; the process-wide one if omitted.
        entries: Entries to apply; the full catalog if omitted.

    Returns:
        One AppliedAugmentation per entry, in the order applied.
    """
    appender = appender if appender is not None else get_default_appender()
    entries = CATALOG if entries is None else tuple(entries)

    applied: list[AppliedAugmentation] = []
    for entry in entries:
        with LogContext(topic=entry.topic):
            appender.append_doc(entry.identifier, entry.text, entry.kind)
            baseline = appender.get_original(entry.identifier, entry.kind)
            live = appender.registry.read(entry.identifier, entry.kind) or ""
        applied.append(
            AppliedAugmentation(
                identifier=entry.identifier,
                kind=entry.kind,
                topic=entry.topic,
                baseline_len=len(baseline),
                live_len=len(live),
            )
        )

    logger.info("catalog_applied", entries=len(applied), mode=appender.mode.value)
    return applied


__all__ = [
    "Augmentation",
    "AppliedAugmentation",
    "CATALOG",
    "TOPICS",
    "entries_for",
    "apply_catalog",
]
