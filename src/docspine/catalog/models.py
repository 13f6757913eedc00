"""Catalog entry types."""

from __future__ import annotations

from dataclasses import dataclass

from docspine.core.enums import DocKind


@dataclass(frozen=True)
class Augmentation:
    """One piece of extra documentation for one identifier.

    Attributes:
        identifier: Dotted path of the documented object
        text: Appended verbatim to the original documentation
        kind: Which documentation slot to append to
        topic: Catalog topic the entry belongs to
    """

    identifier: str
    text: str
    kind: DocKind = DocKind.CALLABLE
    topic: str = ""


@dataclass(frozen=True)
class AppliedAugmentation:
    """Outcome of applying one Augmentation."""

    identifier: str
    kind: DocKind
    topic: str
    baseline_len: int
    live_len: int

    def to_dict(self) -> dict[str, object]:
        return {
            "identifier": self.identifier,
            "kind": self.kind.value,
            "topic": self.topic,
            "baseline_len": self.baseline_len,
            "live_len": self.live_len,
        }
