"""docspine core -- registries, baseline cache, and the appender.

Architecture::

    enums.py       DocKind, AppendMode
    errors.py      DocSpineError hierarchy
    logging.py     structlog configuration
    settings.py    DocSpineSettings (pydantic-settings) + get_settings()
    registry.py    DocRegistry protocol, InMemory / Object registries
    cache.py       DocstringCache (original text, read once)
    appender.py    DocAppender + process-wide append_doc / get_original
"""

from docspine.core.appender import (
    DocAppender,
    append_doc,
    get_default_appender,
    get_original,
    reset_default_appender,
)
from docspine.core.cache import DocstringCache, get_object_cache, reset_object_cache
from docspine.core.enums import AppendMode, DocKind
from docspine.core.errors import (
    DocSpineError,
    ErrorCategory,
    ErrorContext,
    InvalidDocTextError,
    UnknownIdentifierError,
    UnknownTopicError,
)
from docspine.core.registry import (
    DocRegistry,
    InMemoryDocRegistry,
    ObjectDocRegistry,
    reset_object_docs,
    resolve_identifier,
)

__all__ = [
    "AppendMode",
    "DocKind",
    "DocAppender",
    "DocstringCache",
    "get_object_cache",
    "reset_object_cache",
    "DocRegistry",
    "InMemoryDocRegistry",
    "ObjectDocRegistry",
    "resolve_identifier",
    "reset_object_docs",
    "append_doc",
    "get_original",
    "get_default_appender",
    "reset_default_appender",
    "DocSpineError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidDocTextError",
    "UnknownIdentifierError",
    "UnknownTopicError",
]
