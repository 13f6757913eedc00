"""
Structured error types for docspine.

A small typed hierarchy so callers can tell an unresolvable identifier
apart from a bad argument or a configuration mistake, while keeping the
underlying exception attached as the cause.

Manifesto:
    - **Typed Error Hierarchy:** One subclass per failure domain
    - **Rich Context:** Errors carry the identifier and kind they concern
    - **Error Chaining:** Preserve original exceptions via ``cause=``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────┐
        │                     DocSpineError                        │
        │              (category, context, cause)                  │
        ├─────────────────────────────────────────────────────────┤
        │  UnknownIdentifierError   InvalidDocTextError            │
        │  (RESOLUTION)             (VALIDATION)                   │
        │                                                          │
        │  UnknownTopicError                                       │
        │  (CONFIG)                                                │
        └─────────────────────────────────────────────────────────┘

Examples:
    >>> err = UnknownIdentifierError("builtins.nope")
    >>> err.category
    <ErrorCategory.RESOLUTION: 'RESOLUTION'>
    >>> err.context.identifier
    'builtins.nope'

Guardrails:
    ❌ DON'T: Catch registry errors inside the cache or appender
    ✅ DO: Let them propagate to the caller unchanged

    ❌ DON'T: Swallow the original ImportError / AttributeError
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, docspine
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification."""

    RESOLUTION = "RESOLUTION"  # Identifier does not name anything importable
    VALIDATION = "VALIDATION"  # Bad argument (e.g. non-str doc text)
    CONFIG = "CONFIG"          # Unknown topic, bad settings
    INTERNAL = "INTERNAL"      # Bugs, unexpected state


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        identifier: Dotted identifier being resolved or documented
        kind: Documentation kind value ("callable" / "variable")
        topic: Catalog topic, when the error came from the catalog
        metadata: Free-form extra fields
    """

    identifier: str | None = None
    kind: str | None = None
    topic: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize non-None fields plus metadata."""
        result: dict[str, Any] = {}
        if self.identifier is not None:
            result["identifier"] = self.identifier
        if self.kind is not None:
            result["kind"] = self.kind
        if self.topic is not None:
            result["topic"] = self.topic
        result.update(self.metadata)
        return result


class DocSpineError(Exception):
    """
    Base exception for all docspine errors.

    Subclasses set ``default_category``; everything else is per-instance.

    Examples:
        >>> error = DocSpineError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> try:
        ...     raise AttributeError("no attribute 'nope'")
        ... except AttributeError as e:
        ...     error = DocSpineError("Lookup failed", cause=e)
        >>> error.__cause__
        AttributeError("no attribute 'nope'")
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> DocSpineError:
        """
        Add context to this error (fluent API).

        Usage:
            raise DocSpineError("Failed").with_context(
                identifier="functools.reduce",
                attempt=2,
            )
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class UnknownIdentifierError(DocSpineError):
    """The identifier does not resolve to an importable object."""

    default_category = ErrorCategory.RESOLUTION

    def __init__(
        self,
        identifier: str,
        message: str | None = None,
        *,
        kind: str | None = None,
        cause: Exception | None = None,
    ):
        self.identifier = identifier
        super().__init__(
            message or f"Cannot resolve identifier: {identifier}",
            context=ErrorContext(identifier=identifier, kind=kind),
            cause=cause,
        )


class InvalidDocTextError(DocSpineError):
    """Text handed to the appender is not a string."""

    default_category = ErrorCategory.VALIDATION

    def __init__(self, identifier: str, value: Any):
        self.identifier = identifier
        self.value = value
        super().__init__(
            f"Documentation text for {identifier} must be str, got {type(value).__name__}",
            context=ErrorContext(identifier=identifier),
        )


class UnknownTopicError(DocSpineError):
    """A catalog topic was requested that does not exist."""

    default_category = ErrorCategory.CONFIG

    def __init__(self, topic: str, known: tuple[str, ...] = ()):
        self.topic = topic
        self.known = known
        message = f"Unknown catalog topic: {topic}"
        if known:
            message += f" (known: {', '.join(known)})"
        super().__init__(message, context=ErrorContext(topic=topic))


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "DocSpineError",
    "UnknownIdentifierError",
    "InvalidDocTextError",
    "UnknownTopicError",
]
