"""
Shared enums for docspine.

STDLIB ONLY - NO PYDANTIC.
"""

from enum import Enum


class DocKind(str, Enum):
    """
    Which documentation slot an identifier is read from / written to.

    Callables (functions, methods, classes) carry their own ``__doc__``.
    Variables (module attributes such as ``sys.maxsize``) have no slot of
    their own, so their documentation is held by the registry.
    """

    CALLABLE = "callable"
    VARIABLE = "variable"

    @classmethod
    def coerce(cls, value: "DocKind | str") -> "DocKind":
        """Accept a DocKind or its string value ("callable" / "variable")."""
        if isinstance(value, cls):
            return value
        return cls(str(value).lower())


class AppendMode(str, Enum):
    """
    How repeated appends to the same key behave.

    ACCUMULATE: every call adds its text again, so applying the same
        augmentation twice repeats it in the live documentation.
    IDEMPOTENT: text already applied to a key is not added again; the
        live documentation is always baseline + distinct extras.
    """

    ACCUMULATE = "accumulate"
    IDEMPOTENT = "idempotent"
