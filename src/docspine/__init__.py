"""
docspine -- usage examples appended to standard-library documentation.

Example:
    >>> import docspine
    >>> applied = docspine.apply_catalog()
    >>> print(docspine.describe("builtins.sorted"))
"""

from docspine.catalog import CATALOG, TOPICS, apply_catalog
from docspine.core import (
    AppendMode,
    DocAppender,
    DocKind,
    DocRegistry,
    DocstringCache,
    InMemoryDocRegistry,
    ObjectDocRegistry,
    append_doc,
    get_default_appender,
    get_original,
)

__version__ = "0.1.0"


def describe(identifier: str, kind: DocKind | str = DocKind.CALLABLE) -> str:
    """Live documentation of ``identifier`` as seen by the process-wide appender."""
    return get_default_appender().registry.read(identifier, DocKind.coerce(kind)) or ""


__all__ = [
    "AppendMode",
    "DocKind",
    "DocAppender",
    "DocstringCache",
    "DocRegistry",
    "InMemoryDocRegistry",
    "ObjectDocRegistry",
    "append_doc",
    "get_original",
    "describe",
    "apply_catalog",
    "CATALOG",
    "TOPICS",
    "__version__",
]
