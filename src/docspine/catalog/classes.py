"""Examples for class-definition facilities, plus a few documented variables."""

from docspine.catalog.models import Augmentation
from docspine.core.enums import DocKind

TOPIC = "classes"

ENTRIES = (
    Augmentation(
        "dataclasses.dataclass",
        """

Examples:

    >>> from dataclasses import dataclass
    >>> @dataclass
    ... class Point:
    ...     x: int
    ...     y: int = 0
    >>> Point(1)
    Point(x=1, y=0)
    >>> Point(1, 2) == Point(1, 2)
    True

Use @dataclass(frozen=True) for immutable, hashable instances and
@dataclass(order=True) to generate comparison methods.

See https://docs.python.org/3/library/dataclasses.html""",
        topic=TOPIC,
    ),
    Augmentation(
        "dataclasses.field",
        """

Examples:

    >>> from dataclasses import dataclass, field
    >>> @dataclass
    ... class Bag:
    ...     items: list = field(default_factory=list)   # never items: list = []
    ...     secret: str = field(default="", repr=False)
    >>> Bag()
    Bag(items=[])

See https://docs.python.org/3/library/dataclasses.html#dataclasses.field""",
        topic=TOPIC,
    ),
    Augmentation(
        "typing.NamedTuple",
        """

Examples:

    >>> from typing import NamedTuple
    >>> class Pair(NamedTuple):
    ...     left: int
    ...     right: int = 0
    >>> p = Pair(1)
    >>> p, p.left, p[1]
    (Pair(left=1, right=0), 1, 0)
    >>> p._replace(right=5)
    Pair(left=1, right=5)

See https://docs.python.org/3/library/typing.html#typing.NamedTuple""",
        topic=TOPIC,
    ),
    Augmentation(
        "builtins.property",
        """

Examples:

    >>> class Celsius:
    ...     def __init__(self, degrees):
    ...         self._degrees = degrees
    ...     @property
    ...     def degrees(self):
    ...         return self._degrees
    ...     @degrees.setter
    ...     def degrees(self, value):
    ...         if value < -273.15:
    ...             raise ValueError("below absolute zero")
    ...         self._degrees = value
    >>> Celsius(20).degrees
    20

See https://docs.python.org/3/library/functions.html#property""",
        topic=TOPIC,
    ),
    Augmentation(
        "dataclasses.MISSING",
        """

Sentinel meaning "no default was given" for dataclasses.field().
Compare with `is`:

    >>> import dataclasses
    >>> f = dataclasses.field()
    >>> f.default is dataclasses.MISSING
    True

See https://docs.python.org/3/library/dataclasses.html#dataclasses.MISSING""",
        kind=DocKind.VARIABLE,
        topic=TOPIC,
    ),
    Augmentation(
        "sys.maxsize",
        """

Largest value a Py_ssize_t can hold; the usual upper bound for list and
string lengths. Python ints themselves are unbounded:

    >>> import sys
    >>> sys.maxsize + 1 > sys.maxsize
    True

See https://docs.python.org/3/library/sys.html#sys.maxsize""",
        kind=DocKind.VARIABLE,
        topic=TOPIC,
    ),
)
